# network.py

import ipaddress
from typing import Any

from .errors import InvalidNetwork


class Network:
    """
    Represents an IPv6 network prefix split into fixed and generated nibbles.

    The 128 bit address is handled as 32 hex digits (nibbles). The first
    ``prefix // 4`` of them belong to the network and are never altered;
    the rest form the host region that generation fills in. Prefixes that
    are not a multiple of 4 keep the whole boundary nibble fixed.

    Attributes:
        ip (ipaddress.IPv6Address): The address as written, host bits kept.
        prefix (int): The prefix length in bits.

    Provides the nibble expansion and the region lengths used by the
    generator.
    """
    __slots__= ('ip', 'prefix')
    _NIBBLES: int = 32
    _NIBBLE_BITS: int = 4


    def __init__(self, cidr: str) -> None:
        if "%" in cidr.split("/", 1)[0]:
            raise InvalidNetwork(cidr, "zone index not allowed in a network")
        try:
            iface = ipaddress.IPv6Interface(cidr)
        except ValueError as e:
            raise InvalidNetwork(cidr, str(e)) from e
        self.ip = iface.ip
        self.prefix = iface.network.prefixlen



    @property
    def nibbles(self) -> str:
        """The full address as 32 lowercase, zero-padded hex digits."""
        return f"{int(self.ip):0{Network._NIBBLES}x}"


    @property
    def network_len(self) -> int:
        """Number of leading hex digits that must never change."""
        return self.prefix // Network._NIBBLE_BITS


    @property
    def host_len(self) -> int:
        """Number of trailing hex digits to generate."""
        return Network._NIBBLES - self.network_len


    @property
    def network_digits(self) -> str:
        """The fixed leading hex digits of the network."""
        return self.nibbles[:self.network_len]


    def is_full(self) -> bool:
        """True for a /128, which leaves nothing to generate."""
        return self.prefix == 128



    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Network):
            return False
        return self.ip == other.ip and self.prefix == other.prefix



    def __repr__(self) -> str:
        return f"{self.ip}/{self.prefix}"
