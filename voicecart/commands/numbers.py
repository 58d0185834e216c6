"""Quantity tokens: decimal digits or a spelled-out number from one to ten.

Whisper and browser speech engines both produce "two apples" as often as
"2 apples", so every quantity slot accepts either form.
"""

_WORD_NUMS = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
}

# Regex fragment for a quantity token (used by the #name template slot)
QUANTITY_PATTERN = r"(?:\d+|" + "|".join(_WORD_NUMS) + r")\b"


def to_number(token, default=1):
    """Resolve a quantity token to an int.

    Missing, unrecognized, or zero tokens resolve to `default` rather than
    failing; a spoken "add zero apples" still adds one.
    """
    if not token:
        return default
    token = token.strip().lower()
    if token.isdigit():
        n = int(token)
        return n if n >= 1 else default
    return _WORD_NUMS.get(token, default)


def to_price(token):
    """Resolve a price-ceiling token. Returns an int >= 0, or None if absent."""
    if not token:
        return None
    token = token.strip().lower()
    if token.isdigit():
        return int(token)
    return _WORD_NUMS.get(token)
