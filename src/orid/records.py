"""The structured form of an ORID.

An ORID carries these fields, in wire order:
    provider, custom1, custom2, custom3, service, resourceId, [resourceRider]

Example:
    OridRecord(provider="aws", service="sqs", resource_id="q1", resource_rider="msg1")

Design notes:
- custom1..3 and resource_rider are optional; None means "absent".
- use_slash_separator only matters to generate() and is never produced by parse().
- Mappings may use either the snake_case names below or the camelCase
  names of the wire documentation (resourceId, resourceRider, useSlashSeparator).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


_ALIASES = {
    "resourceId": "resource_id",
    "resourceRider": "resource_rider",
    "useSlashSeparator": "use_slash_separator",
}


@dataclass(frozen=True, kw_only=True)
class OridRecord:
    provider: str
    custom1: Optional[str] = None
    custom2: Optional[str] = None
    custom3: Optional[str] = None
    service: str
    resource_id: str
    resource_rider: Optional[str] = None
    use_slash_separator: bool = field(default=False, compare=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "OridRecord":
        """Build a record from a plain mapping.

        Missing keys become None, including the required ones: generate()
        is lenient and renders them as empty segments. When both spellings
        of a key are given, the snake_case one wins.
        """
        values: dict[str, Any] = {k: v for k, v in data.items() if k in _FIELD_NAMES}
        for alias, name in _ALIASES.items():
            if alias in data and name not in values:
                values[name] = data[alias]
        values.setdefault("provider", None)
        values.setdefault("service", None)
        values.setdefault("resource_id", None)
        values["use_slash_separator"] = bool(values.get("use_slash_separator"))
        return cls(**values)

    def as_dict(self) -> dict[str, Optional[str]]:
        """Render the record with camelCase keys, e.g. for JSON output."""
        out: dict[str, Optional[str]] = {
            "provider": self.provider,
            "custom1": self.custom1,
            "custom2": self.custom2,
            "custom3": self.custom3,
            "service": self.service,
            "resourceId": self.resource_id,
        }
        if self.resource_rider is not None:
            out["resourceRider"] = self.resource_rider
        return out


_FIELD_NAMES = frozenset(OridRecord.__dataclass_fields__)
