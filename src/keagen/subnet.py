"""IPv4 subnet and address pool configuration."""

import bisect
from typing import Any, Dict, List, Optional

from pydantic import Field, PrivateAttr

from .base import KeaSection


def format_pool_range(low: str, high: str) -> str:
    """Build a pool range descriptor such as '10.0.0.10 - 10.0.0.20'."""
    return f"{low} - {high}"


class Pool(KeaSection):
    """A contiguous address range inside a subnet."""

    range: str = Field(..., alias="pool", description="Range descriptor '<low> - <high>'")


class SubnetEntry(KeaSection):
    """One IPv4 network definition with its pools."""

    id: int = Field(..., ge=1, description="Identifier assigned by Subnet4")
    subnet: str = Field(..., description="Network in CIDR notation")
    pools: List[Pool] = Field(default_factory=list, description="Pools ordered by range string")

    def add_pool(self, range_descriptor: str) -> None:
        """Insert a pool, keeping pools sorted and free of duplicates."""
        ranges = [pool.range for pool in self.pools]
        index = bisect.bisect_left(ranges, range_descriptor)
        if index < len(ranges) and ranges[index] == range_descriptor:
            return
        self.pools.insert(index, Pool(range=range_descriptor))


class Subnet4(KeaSection):
    """
    The subnet4 section.

    Subnets are addressed by the integer handle returned from
    ``add_config``; handles start at 1 and are never reused.
    """

    subnets: Dict[int, SubnetEntry] = Field(default_factory=dict)

    _next_id: int = PrivateAttr(default=1)

    @property
    def next_id(self) -> int:
        """Identifier the next add_config call will return."""
        return self._next_id

    def add_config(self, subnet: str) -> int:
        """Add a subnet with no pools and return its identifier."""
        subnet_id = self._next_id
        self.subnets[subnet_id] = SubnetEntry(id=subnet_id, subnet=subnet)
        self._next_id = subnet_id + 1
        return subnet_id

    def add_pool_for_cfg(self, subnet_id: int, low: str, high: str) -> bool:
        """
        Add the pool ``low - high`` to an existing subnet.

        Args:
            subnet_id: Identifier returned by add_config
            low: First address of the range
            high: Last address of the range

        Returns:
            False if no subnet has this identifier, True otherwise
            (including when the pool was already present)
        """
        entry = self.subnets.get(subnet_id)
        if entry is None:
            return False
        entry.add_pool(format_pool_range(low, high))
        return True

    def get(self, subnet_id: int) -> Optional[SubnetEntry]:
        """Return the subnet with this identifier, if any."""
        return self.subnets.get(subnet_id)

    def is_empty(self) -> bool:
        """Check if no subnets have been added."""
        return not self.subnets

    def __len__(self) -> int:
        return len(self.subnets)

    def to_dict(self) -> List[Dict[str, Any]]:  # type: ignore[override]
        """Serialize subnets as a list ordered by identifier."""
        return [self.subnets[subnet_id].to_dict() for subnet_id in sorted(self.subnets)]
