"""Item name normalization shared by the list engine and its callers.

Speech transcripts often carry pack sizes glued to a number ("amul milk 1l",
"500g paneer"). Those tokens are dropped before names are compared, so
"milk 1l" and "Milk" land on the same list entry. Only mass and volume units
are stripped; "7up" or "100s" stay as spoken.
"""

import re
from functools import lru_cache

import pint

_ureg = pint.UnitRegistry()
_PACK_UNITS = (_ureg.gram, _ureg.liter)

_SIZE_TOKEN_RE = re.compile(r"\b\d+([a-z]+)\b", re.IGNORECASE)
_SPACES_RE = re.compile(r"\s+")


@lru_cache(maxsize=256)
def _is_pack_unit(token):
    """True if token names a mass or volume unit ("l", "kg", "g", "ml", ...)."""
    try:
        unit = _ureg.parse_units(token.lower())
    except (pint.UndefinedUnitError, ValueError):
        return False
    return any(unit.is_compatible_with(u) for u in _PACK_UNITS)


def _strip_size(m):
    return "" if _is_pack_unit(m.group(1)) else m.group(0)


def normalize_name(raw):
    """Strip number+unit size tokens and collapse whitespace."""
    name = _SIZE_TOKEN_RE.sub(_strip_size, raw)
    return _SPACES_RE.sub(" ", name).strip()


def display_name(name):
    """Capitalize the first letter, leaving the rest as spoken."""
    return name[:1].upper() + name[1:]


def same_item(a, b):
    return a.lower() == b.lower()
