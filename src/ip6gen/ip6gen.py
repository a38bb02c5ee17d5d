"""ip6gen.py: ip6gen api."""
import ipaddress

from loguru import logger

from ._digest import _digest
from .errors import AlreadyFullAddress, AssemblyError
from .network import Network

_GROUP_LEN = 4
_SUBNET_BYTES = 2


class AddressGenerator:
    """Derives stable IPv6 addresses from names inside a network."""
    _network: Network

    def __init__(self, cidr: str) -> None:
        """Binds a generator to one network.

        The network is validated here, so a bad CIDR fails before the first
        address is requested.

        Args:
            cidr: Network in ``<ipv6-address>/<prefix-length>`` notation,
                e.g. ``fd52:f6b0:3162::/64``.

        Raises:
            InvalidNetwork: ``cidr`` does not parse as an IPv6 network.
            AlreadyFullAddress: ``cidr`` is a /128.
        """
        self._network = AddressGenerator._checked(cidr)


    @property
    def network(self) -> Network:
        """The network addresses are generated in."""
        return self._network


    @property
    def cidr(self) -> str:
        """The bound network in ``address/prefix`` form."""
        return repr(self._network)


    def address(self, name: str | bytes) -> ipaddress.IPv6Address:
        """Generates the address for ``name`` in the bound network.

        Args:
            name: Any string (or raw bytes) identifying the host.

        Returns:
            The derived address. The same name always yields the same one.
        """
        return AddressGenerator._assemble(name, self._network)


    @staticmethod
    def generate(name: str | bytes, cidr: str) -> ipaddress.IPv6Address:
        """Generates the address for ``name`` in ``cidr``.

        Args:
            name: Any string (or raw bytes) identifying the host.
            cidr: Network in ``<ipv6-address>/<prefix-length>`` notation.

        Returns:
            The derived address.

        Raises:
            InvalidNetwork: ``cidr`` does not parse as an IPv6 network.
            AlreadyFullAddress: ``cidr`` is a /128.
            AssemblyError: the assembled digits are not a valid address.
        """
        return AddressGenerator._assemble(name, AddressGenerator._checked(cidr))


    @staticmethod
    def subnet_hash(name: str | bytes) -> str:
        """Hashes ``name`` into a 4 digit lowercase hex subnet tag."""
        return _digest(name, _SUBNET_BYTES)


    @staticmethod
    def _checked(cidr: str) -> Network:
        """Parses ``cidr`` and rejects networks with no host digits.

        Args:
            cidr: Network in ``<ipv6-address>/<prefix-length>`` notation.

        Returns:
            Network: The parsed network, at most a /127.
        """
        net = Network(cidr)
        if net.is_full():
            raise AlreadyFullAddress(str(net.ip), net.prefix)
        return net


    @staticmethod
    def _assemble(name: str | bytes, net: Network) -> ipaddress.IPv6Address:
        """Joins the network digits to a digest of ``name``.

        The digest is sized to ``ceil(host_len / 2)`` bytes. When
        ``host_len`` is odd its hex form is one digit too long, and only the
        leading ``host_len`` digits are used.

        Args:
            name: Input to hash.
            net: Network whose leading digits are kept.

        Returns:
            ipaddress.IPv6Address: The assembled address.

        Raises:
            AssemblyError: the joined digits do not parse as an address.
        """
        network_len = net.network_len
        host_len = net.host_len
        assert network_len + host_len == 32, (network_len, host_len)

        # Digests come in whole bytes; an odd host_len drops the last digit.
        digest_size = (host_len + 1) // 2
        logger.debug(f"{net!r}: keeping {network_len} digits, "
                     f"generating {host_len} from {digest_size} bytes")
        host_digits = _digest(name, digest_size)[:host_len]

        digits = net.network_digits + host_digits
        generated = ":".join(
            digits[i:i + _GROUP_LEN] for i in range(0, len(digits), _GROUP_LEN)
        )
        try:
            addr = ipaddress.IPv6Address(generated)
        except ValueError as e:
            raise AssemblyError(generated, str(e)) from e
        logger.debug(f"generated {addr} in {net!r}")
        return addr


def ip(name: str | bytes, cidr: str) -> ipaddress.IPv6Address:
    """Generates an IPv6 address.

    Takes any string and an IPv6 prefix, e.g. a unique local prefix like
    ``fd52:f6b0:3162::/64``, and computes a stable address inside it.
    Shorthand for :meth:`AddressGenerator.generate`.
    """
    return AddressGenerator.generate(name, cidr)


def subnet(name: str | bytes) -> str:
    """Calculates a 4 digit hash for a subnet."""
    return AddressGenerator.subnet_hash(name)
