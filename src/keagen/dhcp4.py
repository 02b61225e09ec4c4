"""The Dhcp4 service block and its serializer."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import KeaSection
from .interfaces import InterfacesConfig
from .lease import DEFAULT_LEASE_NAME, DEFAULT_LEASE_TYPE, LeaseDatabase
from .options import OptionData
from .subnet import Subnet4

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Outcome of serializing a Dhcp4 block."""

    document: Dict[str, Any] = field(default_factory=dict)
    missing: Optional[str] = None  # key of the first empty required section

    @property
    def complete(self) -> bool:
        return self.missing is None

    @property
    def message(self) -> Optional[str]:
        if self.missing is None:
            return None
        return f"{self.missing} is empty, stopping serialization"


class Dhcp4(KeaSection):
    """
    Represents the Dhcp4 service configuration.

    Subnets and options start empty and are filled in through
    ``subnet4`` and ``option_data`` after construction.
    """

    valid_lifetime: int = Field(default=0, ge=0, alias="valid-lifetime")
    interfaces_config: InterfacesConfig = Field(
        default_factory=InterfacesConfig, alias="interfaces-config"
    )
    lease_database: LeaseDatabase = Field(default_factory=LeaseDatabase, alias="lease-database")
    subnet4: Subnet4 = Field(default_factory=Subnet4)
    option_data: OptionData = Field(default_factory=OptionData, alias="option-data")

    def __init__(
        self,
        valid_lifetime: int = 0,
        interfaces: Optional[List[str]] = None,
        lease_type: str = DEFAULT_LEASE_TYPE,
        lease_persist: bool = True,
        lease_name: str = DEFAULT_LEASE_NAME,
        **data: Any,
    ):
        data.setdefault("interfaces_config", InterfacesConfig(interfaces=list(interfaces or [])))
        data.setdefault(
            "lease_database",
            LeaseDatabase(type=lease_type, persist=lease_persist, name=lease_name),
        )
        super().__init__(valid_lifetime=valid_lifetime, **data)
        if self.interfaces_config.is_empty() and (interfaces is not None or valid_lifetime):
            logger.warning("Dhcp4 created with empty interfaces-config")

    def render(self) -> RenderResult:
        """
        Build the Dhcp4 document section by section.

        ``valid-lifetime`` is always written. Interfaces, lease database
        and subnets are then added in that order; the first one found
        empty ends the document there. ``option-data`` is added only
        when there are options, and its absence does not make the
        document incomplete.

        Returns:
            RenderResult holding the (possibly partial) document
        """
        result = RenderResult(document={"valid-lifetime": self.valid_lifetime})
        doc = result.document

        if self.interfaces_config.is_empty():
            result.missing = "interfaces-config"
            return result
        doc["interfaces-config"] = self.interfaces_config.to_dict()

        if self.lease_database.is_empty():
            result.missing = "lease-database"
            return result
        doc["lease-database"] = self.lease_database.to_dict()

        if self.subnet4.is_empty():
            result.missing = "subnet4"
            return result
        doc["subnet4"] = self.subnet4.to_dict()

        if not self.option_data.is_empty():
            doc["option-data"] = self.option_data.to_dict()

        return result

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the block, logging a warning if it is incomplete."""
        result = self.render()
        if not result.complete:
            logger.warning(result.message)
        return result.document
