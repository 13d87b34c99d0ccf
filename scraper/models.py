from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class ScrapedItem:
    """One record pulled out of the page."""

    title: str
    description: str
    url: str
    timestamp: str

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "ScrapedItem":
        """Build an item from the plain object returned by the page script."""
        return cls(
            title=raw.get("title") or "",
            description=raw.get("description") or "",
            url=raw.get("url") or "",
            timestamp=raw.get("timestamp") or "",
        )

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
