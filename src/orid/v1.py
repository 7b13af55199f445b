"""Version 1 of the ORID wire format.

    orid:1:<provider>:<custom1>:<custom2>:<custom3>:<service>:<resourceId>[<sep><resourceRider>]

<sep> is either "/" (rider packed into the resourceId segment, 8 segments)
or ":" (rider in its own segment, 9 segments).

generate() is lenient and never validates its input; parse() is strict.
"""

from __future__ import annotations
import logging
from typing import Any, Mapping, Union

from .errors import OridFormatError, OridTypeError
from .records import OridRecord

logger = logging.getLogger(__name__)

PREFIX = "orid:1:"

_SEGMENT_COUNTS = (8, 9)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def generate(data: Union[OridRecord, Mapping[str, Any]]) -> str:
    """Generate a V1 ORID from a record or an equivalent mapping.

    Absent optional fields keep their slot as an empty segment. Missing
    required fields are not rejected; they render as empty segments too.
    """
    if not isinstance(data, OridRecord):
        data = OridRecord.from_mapping(data)

    suffix = _text(data.resource_id)
    if data.resource_rider:
        separator = "/" if data.use_slash_separator else ":"
        suffix = f"{suffix}{separator}{data.resource_rider}"

    return ":".join(
        [
            "orid",
            "1",
            _text(data.provider),
            _text(data.custom1),
            _text(data.custom2),
            _text(data.custom3),
            _text(data.service),
            suffix,
        ]
    )


def is_valid(value: Any) -> bool:
    """Return True if value is structurally a V1 ORID. Never raises."""
    if not isinstance(value, str) or not value.startswith(PREFIX):
        return False
    return len(value.split(":")) in _SEGMENT_COUNTS


def parse(orid: str) -> OridRecord:
    """Parse a V1 ORID into an OridRecord.

    Raises:
        OridTypeError: if orid is not a string.
        OridFormatError: if the prefix or segment count is wrong.
    """
    if not isinstance(orid, str):
        raise OridTypeError(f"orid must be of type str, got {type(orid).__name__}")

    if not orid.startswith(PREFIX):
        logger.debug("rejecting %r: missing %r prefix", orid, PREFIX)
        raise OridFormatError(f"provided string does not appear to be an orid: {orid!r}")

    parts = orid.split(":")
    if len(parts) not in _SEGMENT_COUNTS:
        logger.debug("rejecting %r: %d segments", orid, len(parts))
        raise OridFormatError(
            f"expected 8 or 9 segments separated by ':', got {len(parts)}: {orid!r}"
        )

    provider, custom1, custom2, custom3, service = parts[2:7]

    # Colon form wins; the rider is never re-split on "/".
    if len(parts) == 9:
        resource_id, resource_rider = parts[7], parts[8]
    elif "/" in parts[7]:
        resource_id, resource_rider = parts[7].split("/", 1)
    else:
        resource_id, resource_rider = parts[7], None

    return OridRecord(
        provider=provider,
        custom1=custom1,
        custom2=custom2,
        custom3=custom3,
        service=service,
        resource_id=resource_id,
        resource_rider=resource_rider,
    )
