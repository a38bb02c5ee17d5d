"""Stable IPv6 addresses derived from names.

.. include:: ../../README.md
"""
from loguru import logger

from .errors import (
    AlreadyFullAddress,
    AssemblyError,
    InvalidNetwork,
    Ip6GenError,
)
from .ip6gen import AddressGenerator, ip, subnet
from .network import Network

logger.disable("ip6gen")

__all__=[
    'AddressGenerator',
    'AlreadyFullAddress',
    'AssemblyError',
    'InvalidNetwork',
    'Ip6GenError',
    'Network',
    'ip',
    'subnet',
]
