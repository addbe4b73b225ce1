"""Duration strings such as "30s", "5m" or "1h30m".

The accepted grammar is an optional sign followed by one or more
``<decimal><unit>`` groups. Units are ns, us (or µs), ms, s, m and h.
A bare "0" is also accepted.
"""

import re
from datetime import timedelta
from decimal import ROUND_HALF_EVEN, Decimal

# Nanoseconds per unit. "ms" must be tried before "m".
_UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

# Largest magnitude a duration may have, in nanoseconds (signed 64-bit)
MAX_DURATION_NS = 2**63 - 1

_UNIT_PATTERN = "|".join(re.escape(u) for u in _UNITS)
_GROUP = re.compile(rf"(\d+\.?\d*|\.\d+)({_UNIT_PATTERN})")
_DURATION = re.compile(rf"([-+]?)((?:(?:\d+\.?\d*|\.\d+)(?:{_UNIT_PATTERN}))+)")


def parse_duration(text: str) -> timedelta:
    """Parse a duration string into a timedelta.

    Args:
        text: Duration such as "30s", "5m", "1h30m" or "1.5h"

    Returns:
        The parsed duration, rounded to microseconds

    Raises:
        ValueError: If the text is not a valid duration or is out of range
    """
    if not isinstance(text, str):
        raise ValueError(f"Invalid duration: {text!r}")

    if text in ("0", "+0", "-0"):
        return timedelta(0)

    match = _DURATION.fullmatch(text)
    if not match:
        raise ValueError(f"Invalid duration: {text!r}")

    total_ns = Decimal(0)
    try:
        for number, unit in _GROUP.findall(match.group(2)):
            total_ns += Decimal(number) * _UNITS[unit]
    except ArithmeticError as e:
        raise ValueError(f"Invalid duration: {text!r} is out of range") from e

    if total_ns > MAX_DURATION_NS:
        raise ValueError(f"Invalid duration: {text!r} is out of range")

    micros = int((total_ns / 1000).to_integral_value(rounding=ROUND_HALF_EVEN))
    if match.group(1) == "-":
        micros = -micros
    return timedelta(microseconds=micros)


def _trim(value: int, unit: int) -> str:
    """Render value/unit as a decimal with trailing zeros removed."""
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(value: timedelta) -> str:
    """Format a timedelta in the compact form parse_duration accepts.

    Examples: 30s, 5m0s, 1h30m0s, 1.5s, 250ms.
    """
    micros = (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        return f"{sign}{_trim(micros, 1_000)}ms"

    hours, rem = divmod(micros, 3_600_000_000)
    minutes, rem = divmod(rem, 60_000_000)

    out = sign
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return f"{out}{_trim(rem, 1_000_000)}s"
