"""Network interfaces the DHCP daemon listens on."""

from typing import List

from pydantic import Field

from .base import KeaSection


class InterfacesConfig(KeaSection):
    """Represents the interfaces-config section."""

    interfaces: List[str] = Field(default_factory=list, description="Interface names, e.g. eth0")

    def is_empty(self) -> bool:
        """Check if no interfaces are configured."""
        return not self.interfaces
