"""Shopping command parser: turns one finalized utterance into a Command.

Handles:
    "find toothpaste under 5"         -> Search(item="toothpaste", max_price=5)
    "look for basmati rice"           -> Search(item="basmati rice")
    "add 2 apples" / "i need milk"    -> Add(item=..., qty=...)
    "remove milk" / "take off bread"  -> Remove(item=...)
    "set apples to five"              -> Modify(item="apples", qty=5)
    "adding 2 bottles of water"       -> Add(item="water", qty=2)

Patterns are tried in table order and the first match wins, so a leading
"add"/"buy" is always claimed by the verb + quantity form before the
mid-phrase quantity form gets a look.
"""

from voicecart.commands.command import Add, Modify, Remove, Search, Unknown
from voicecart.commands.numbers import to_number, to_price
from voicecart.commands.template import TemplatePattern, match_any

_UNDER = "[ under #max|]"

# (TemplatePattern, action) in precedence order
_PATTERNS = [
    (TemplatePattern(f"find [me |]$item{_UNDER}"), "search"),
    (TemplatePattern(f"[search [for |]|look for ]$item{_UNDER}"), "search"),
    (TemplatePattern("[add|buy|i need|i want to buy|put|include] [#qty |]$item"), "add"),
    (TemplatePattern("[remove|delete|take off|take out] $item"), "remove"),
    (TemplatePattern("[change|set|update] $item to #qty"), "modify"),
    (TemplatePattern("[add|buy]$lead #qty [$unit of |]$item"), "add"),
]


def _build(action, fields):
    item = fields["item"]
    if action == "search":
        return Search(item=item, max_price=to_price(fields.get("max")))
    if action == "add":
        return Add(item=item, qty=to_number(fields.get("qty")))
    if action == "remove":
        return Remove(item=item)
    return Modify(item=item, qty=to_number(fields.get("qty")))


def parse_command(text):
    """Interpret an utterance. Never raises; unmatched input gives Unknown()."""
    if not text or not text.strip():
        return Unknown()
    result = match_any(_PATTERNS, text)
    if result is None:
        return Unknown()
    action, fields = result
    return _build(action, fields)


# --- Standalone test ---

if __name__ == "__main__":
    tests = [
        "find toothpaste under 5",
        "find me apples",
        "search for shampoo under 10",
        "look for bread",
        "add 2 apples",
        "buy three milk",
        "I want to buy 5 bananas",
        "put Brown Bread",
        "remove milk",
        "take out the trash bags",
        "change apples to 4",
        "update orange juice to ten",
        "adding 2 bottles of water",
        "xyz not a command",
        "",
    ]
    for t in tests:
        print(f"  {t!r:40s} => {parse_command(t)}")
