"""keagen - A Python library for building Kea DHCPv4 configuration documents."""

__version__ = "0.1.0"

from .base import KeaSection
from .interfaces import InterfacesConfig
from .lease import DEFAULT_LEASE_NAME, DEFAULT_LEASE_TYPE, LeaseDatabase
from .subnet import Pool, Subnet4, SubnetEntry, format_pool_range
from .options import Option, OptionData
from .dhcp4 import Dhcp4, RenderResult
from .config import DEFAULT_INTERFACES, DEFAULT_VALID_LIFETIME, KeaConfig, RootConfig
from .exceptions import IncompleteConfigError, KeaGenError

__all__ = [
    "KeaSection",
    "InterfacesConfig",
    "LeaseDatabase",
    "DEFAULT_LEASE_TYPE",
    "DEFAULT_LEASE_NAME",
    "Pool",
    "SubnetEntry",
    "Subnet4",
    "format_pool_range",
    "Option",
    "OptionData",
    "Dhcp4",
    "RenderResult",
    "KeaConfig",
    "RootConfig",
    "DEFAULT_VALID_LIFETIME",
    "DEFAULT_INTERFACES",
    # Errors
    "KeaGenError",
    "IncompleteConfigError",
]
