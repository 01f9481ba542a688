"""Timestamp layouts used by the Esendex API.

Different endpoints (and API versions) disagree on how they write times:

  accounts        2012-01-01T12:00:05
  messageheaders  2012-01-01T12:00:05.000   or   2012-01-01T12:00:01.05Z
  messagebatches  2012-01-01T12:00:00Z      (RFC3339)

None of them carry a real offset in practice and the API reports UTC, so
every parsed value is an aware ``datetime`` in UTC. Fractions finer than a
microsecond (the API may send up to nine digits) are truncated.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

_DATE_TIME = r"(?P<date>\d{4}-\d{2}-\d{2})T(?P<time>\d{2}:\d{2}:\d{2})"
_FRACTION = r"\.(?P<fraction>\d{1,9})"
_OFFSET = r"(?P<sign>[+-])(?P<hh>\d{2}):(?P<mm>\d{2})"

# Tried in this order; the first layout that matches wins.
LAYOUTS = (
    ("fraction_z", re.compile(rf"^{_DATE_TIME}{_FRACTION}Z$")),
    ("fraction", re.compile(rf"^{_DATE_TIME}{_FRACTION}$")),
    ("seconds_z", re.compile(rf"^{_DATE_TIME}Z$")),
    ("seconds", re.compile(rf"^{_DATE_TIME}$")),
    ("rfc3339_offset", re.compile(rf"^{_DATE_TIME}(?:{_FRACTION})?{_OFFSET}$")),
)


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(text: str) -> datetime:
    """Parse any of the known layouts into an aware UTC datetime.

    Raises:
        ValueError: when no layout matches, or the fields are out of range.
    """
    s = (text or "").strip()

    for _name, pattern in LAYOUTS:
        m = pattern.match(s)
        if not m:
            continue

        parsed = datetime.strptime(f"{m.group('date')}T{m.group('time')}", "%Y-%m-%dT%H:%M:%S")

        fraction = m.groupdict().get("fraction")
        if fraction:
            parsed = parsed.replace(microsecond=int(fraction[:6].ljust(6, "0")))

        sign = m.groupdict().get("sign")
        if sign:
            offset = timedelta(hours=int(m.group("hh")), minutes=int(m.group("mm")))
            if sign == "-":
                offset = -offset
            return parsed.replace(tzinfo=timezone(offset)).astimezone(timezone.utc)

        return parsed.replace(tzinfo=timezone.utc)

    raise ValueError(f"unrecognised timestamp: {text!r}")


def parse_optional_timestamp(text: Optional[str]) -> Optional[datetime]:
    """Like parse_timestamp, but a missing/blank value means "not applicable"."""
    if text is None or not text.strip():
        return None
    return parse_timestamp(text)


def format_timestamp(value: datetime) -> str:
    """Canonical request layout (``sendat``): UTC, trimmed fraction, trailing Z.

    2015-11-11T11:11:11.111111Z, 2015-11-11T11:11:11.5Z, 2015-11-11T11:11:11Z
    """
    v = _to_utc(value)
    out = v.strftime("%Y-%m-%dT%H:%M:%S")
    if v.microsecond:
        out += "." + f"{v.microsecond:06d}".rstrip("0")
    return out + "Z"


def format_query_timestamp(value: datetime) -> str:
    """RFC3339 to the second, in UTC: 2012-01-01T00:00:00Z (used by ``between``)."""
    return _to_utc(value).strftime("%Y-%m-%dT%H:%M:%SZ")
