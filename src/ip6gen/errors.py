"""errors.py: exceptions raised while generating addresses."""


class Ip6GenError(ValueError):
    """Base class for every error raised by ip6gen."""


class InvalidNetwork(Ip6GenError):
    """The CIDR text is not a valid IPv6 network.

    Attributes:
        cidr (str): The text that failed to parse.
        reason (str): The diagnostic reported by the parser.
    """

    def __init__(self, cidr: str, reason: str) -> None:
        self.cidr = cidr
        self.reason = reason
        super().__init__(f"{cidr} is not a valid IPv6 network: {reason}")


class AlreadyFullAddress(Ip6GenError):
    """The network is a /128, so there are no host bits left to generate.

    Attributes:
        ip (str): The address part of the network.
        prefix (int): The prefix length (always 128).
    """

    def __init__(self, ip: str, prefix: int) -> None:
        self.ip = ip
        self.prefix = prefix
        super().__init__(f"{ip}/{prefix} is already a full IPv6 address")


class AssemblyError(Ip6GenError):
    """The assembled digits do not form a valid address.

    This points at a bug in the region arithmetic, not at bad input.

    Attributes:
        generated (str): The colon-grouped string that failed to parse.
        reason (str): The diagnostic reported by the parser.
    """

    def __init__(self, generated: str, reason: str) -> None:
        self.generated = generated
        self.reason = reason
        super().__init__(
            f"generated IPv6 address ({generated}) has {reason}"
        )
