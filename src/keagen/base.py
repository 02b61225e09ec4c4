"""Base class for Kea configuration components."""

import json
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict


def dump_json(data: Any, indent: int = 2) -> str:
    """Render serialized data as JSON, keeping key order."""
    return json.dumps(data, indent=indent, ensure_ascii=False)


def dump_yaml(data: Any) -> str:
    """Render serialized data as block-style YAML, keeping key order."""
    return yaml.dump(data, default_flow_style=False, sort_keys=False)


class KeaSection(BaseModel):
    """Base class for Kea configuration sections using Pydantic."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    def is_empty(self) -> bool:
        """Check whether this section has nothing to emit."""
        return False

    # Serialization methods
    def to_dict(self) -> Dict[str, Any]:
        """
        Convert this section to the dictionary the daemon expects.

        Field aliases carry the daemon's hyphenated key names.

        Returns:
            Dictionary representation
        """
        return self.model_dump(by_alias=True)

    def to_json(self, indent: int = 2) -> str:
        """
        Convert this section to a JSON string.

        Args:
            indent: Indentation level for pretty printing

        Returns:
            JSON string representation
        """
        return dump_json(self.to_dict(), indent)

    def to_yaml(self) -> str:
        """
        Convert this section to a YAML string.

        Returns:
            YAML string representation
        """
        return dump_yaml(self.to_dict())
