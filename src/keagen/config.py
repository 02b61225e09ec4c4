"""Top-level Kea configuration document."""

import logging
from typing import Any, Dict, Optional

from pydantic import Field

from .base import KeaSection, dump_json, dump_yaml
from .dhcp4 import Dhcp4, RenderResult
from .exceptions import IncompleteConfigError

logger = logging.getLogger(__name__)

DEFAULT_VALID_LIFETIME = 4000
DEFAULT_INTERFACES = ["aaa", "bbb"]


def _default_dhcp4() -> Dhcp4:
    return Dhcp4(DEFAULT_VALID_LIFETIME, DEFAULT_INTERFACES)


class KeaConfig(KeaSection):
    """
    The document handed to the Kea DHCPv4 daemon.

    Example:
        config = KeaConfig(Dhcp4(7200, ["eth0"]))
        subnet_id = config.dhcp4.subnet4.add_config("10.0.0.0/24")
        config.dhcp4.subnet4.add_pool_for_cfg(subnet_id, "10.0.0.10", "10.0.0.20")
        print(config.to_json())
    """

    dhcp4: Dhcp4 = Field(default_factory=_default_dhcp4, alias="Dhcp4")

    def __init__(self, dhcp4: Optional[Dhcp4] = None, **data: Any):
        if dhcp4 is not None:
            data["dhcp4"] = dhcp4
        super().__init__(**data)

    def render(self) -> RenderResult:
        """Render the whole document, wrapping the Dhcp4 outcome."""
        inner = self.dhcp4.render()
        return RenderResult(document={"Dhcp4": inner.document}, missing=inner.missing)

    def _document(self, strict: bool) -> Dict[str, Any]:
        result = self.render()
        if not result.complete:
            if strict:
                raise IncompleteConfigError(result.missing, result.document)
            logger.warning(result.message)
        return result.document

    def to_dict(self, strict: bool = False) -> Dict[str, Any]:
        """
        Convert the configuration to a dictionary.

        Args:
            strict: Raise IncompleteConfigError instead of returning a
                partial document when a required section is empty

        Returns:
            Dictionary of the form {"Dhcp4": {...}}
        """
        return self._document(strict)

    def to_json(self, indent: int = 2, strict: bool = False) -> str:
        """
        Convert the configuration to a JSON string.

        Args:
            indent: Indentation level for pretty printing
            strict: Raise IncompleteConfigError on an incomplete document

        Returns:
            JSON string representation
        """
        return dump_json(self._document(strict), indent)

    def to_yaml(self, strict: bool = False) -> str:
        """
        Convert the configuration to a YAML string.

        Args:
            strict: Raise IncompleteConfigError on an incomplete document

        Returns:
            YAML string representation
        """
        return dump_yaml(self._document(strict))


RootConfig = KeaConfig
