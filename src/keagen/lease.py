"""Lease storage backend configuration."""

from pydantic import Field

from .base import KeaSection

DEFAULT_LEASE_TYPE = "memfile"
DEFAULT_LEASE_NAME = "/var/lib/kea/dhcp4.leases"


class LeaseDatabase(KeaSection):
    """Represents the lease-database section."""

    type: str = Field(default="", description="Backend kind, e.g. memfile")
    persist: bool = Field(default=False, description="Write leases to disk")
    name: str = Field(default="", description="Lease file path or database name")

    def is_empty(self) -> bool:
        """Check if the backend is unusable (missing type or name)."""
        return self.type == "" or self.name == ""
