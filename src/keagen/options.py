"""DHCP option assignments."""

import bisect
from typing import Any, Dict, Iterator, List, Optional

from pydantic import Field

from .base import KeaSection


class Option(KeaSection):
    """A single option-data entry."""

    name: str = Field(..., description="Option name, e.g. routers")
    data: str = Field(..., description="Option value as the daemon expects it")
    always_send: bool = Field(default=False, alias="always-send")


class OptionData(KeaSection):
    """
    The option-data section.

    Options are kept sorted by name. Adding an option whose name is
    already present keeps the first one unchanged.
    """

    options: List[Option] = Field(default_factory=list)

    def add_option(self, name: str, data: str, always_send: bool) -> None:
        """Add an option unless one with this name exists."""
        names = [option.name for option in self.options]
        index = bisect.bisect_left(names, name)
        if index < len(names) and names[index] == name:
            return
        self.options.insert(index, Option(name=name, data=data, always_send=always_send))

    def add_option_always(self, name: str, data: str) -> None:
        """Add an option that is sent whether or not the client asked for it."""
        self.add_option(name, data, True)

    def get(self, name: str) -> Optional[Option]:
        """Return the option with this name, if any."""
        for option in self.options:
            if option.name == name:
                return option
        return None

    def is_empty(self) -> bool:
        """Check if no options have been added."""
        return not self.options

    def __len__(self) -> int:
        return len(self.options)

    def __iter__(self) -> Iterator[Option]:  # type: ignore[override]
        return iter(self.options)

    def to_dict(self) -> List[Dict[str, Any]]:  # type: ignore[override]
        """Serialize options as a list ordered by name."""
        return [option.to_dict() for option in self.options]
