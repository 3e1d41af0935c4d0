"""
Parsing of human-readable durations such as ``"1h"`` or ``"1h30m"``.

Meters carry their polling interval as text; the bind step converts it
into a :class:`datetime.timedelta` with :func:`parse_duration`.  The
accepted grammar is a sequence of ``<number><unit>`` groups with an
optional leading sign::

    "1h"  "90s"  "1.5h"  "1h30m"  "300ms"  "-2m"  "0"

Valid units are ``ns``, ``us`` (also ``µs``/``μs``), ``ms``, ``s``,
``m`` and ``h``.  A unit is required on every group; the only unit-less
value is a bare ``"0"``.
"""

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation

# Nanoseconds per unit.  Multi-letter units come first so that "ms" is
# not read as "m" followed by a stray "s".
_UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_MAX_NANOSECONDS = 2**63 - 1

# ASCII digits only; "\d" would also match other scripts' digits.
_GROUP_RE = re.compile(r"([0-9]*(?:\.[0-9]*)?)(" + "|".join(re.escape(u) for u in _UNITS) + r")")


def parse_duration(text: str) -> timedelta:
    """Parse ``text`` into a timedelta.

    Raises ``ValueError`` when ``text`` does not follow the grammar in
    the module docstring or its magnitude does not fit in a signed
    64-bit count of nanoseconds (about 2562047h47m16.85s).
    Sub-microsecond parts are rounded to the nearest microsecond.
    """
    if not isinstance(text, str):
        raise ValueError(f"invalid duration {text!r}")
    rest = text
    negative = False
    if rest[:1] in {"-", "+"}:
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f"invalid duration {text!r}")

    # A negative value may reach one nanosecond further than a positive one.
    limit = _MAX_NANOSECONDS + 1 if negative else _MAX_NANOSECONDS
    total_ns = Decimal(0)
    pos = 0
    while pos < len(rest):
        match = _GROUP_RE.match(rest, pos)
        if match is None:
            raise ValueError(f"invalid duration {text!r}")
        number, unit = match.groups()
        # The number may be written as "5", "5." or ".5" but needs a digit.
        if not any(ch.isdigit() for ch in number):
            raise ValueError(f"invalid duration {text!r}")
        try:
            total_ns += Decimal(number) * _UNITS[unit]
        except InvalidOperation as exc:
            raise ValueError(f"invalid duration {text!r}") from exc
        if total_ns > limit:
            raise ValueError(f"invalid duration {text!r}")
        pos = match.end()

    nanoseconds = int(total_ns)
    if negative:
        nanoseconds = -nanoseconds
    return timedelta(microseconds=round(Decimal(nanoseconds) / 1000))
