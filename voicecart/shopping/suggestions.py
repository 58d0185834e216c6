"""Smart suggestions: frequently added items plus a few seasonal picks.

The seasonal list assumes India in August/September (mangoes ending,
festive staples).
"""

from voicecart.shopping.items import display_name

SEASONAL = ["Mangoes", "Brown Bread", "Toothpaste"]
MAX_FREQUENT = 6


def frequent_items(history, limit=MAX_FREQUENT):
    """Up to `limit` distinct lowercase names, most frequent first.

    Equal counts keep the order each name first appears in the history
    (which is most recent first).
    """
    counts = {}
    for name in history:
        key = name.lower()
        counts[key] = counts.get(key, 0) + 1
    ranked = sorted(counts.items(), key=lambda kv: -kv[1])
    return [name for name, _ in ranked[:limit]]


def suggest(history, seasonal=SEASONAL, limit=MAX_FREQUENT):
    """Frequent items followed by seasonal ones, deduplicated, display-cased."""
    seen = []
    for name in frequent_items(history, limit) + [s.lower() for s in seasonal]:
        if name and name not in seen:
            seen.append(name)
    return [display_name(n) for n in seen]
