"""generate.py: prints the address (or subnet hash) for a name."""
import sys

from loguru import logger

from ip6gen import AddressGenerator, Ip6GenError


def main() -> None:
    """Generates an address for a name, or a subnet hash without a network."""
    args = sys.argv[1:]
    if args and args[0] == "-v":
        logger.enable("ip6gen")
        args = args[1:]
    if len(args) not in (1, 2):
        print("usage: [uv run] python generate.py [-v] name [cidr]")
        exit(1)

    name = args[0]
    if len(args) == 1:
        print(AddressGenerator.subnet_hash(name))
        return

    try:
        print(AddressGenerator.generate(name, args[1]))
    except Ip6GenError as e:
        print(e, file=sys.stderr)
        exit(1)


if __name__ == '__main__':
    main()
