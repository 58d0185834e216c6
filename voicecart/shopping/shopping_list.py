"""The shopping list: named, quantified, categorized entries plus add history.

Entries are unique by case-insensitive name and kept in the order they were
first added. Removing or modifying an item that isn't on the list is a quiet
no-op; the caller decides what (if anything) to tell the user.
"""

import re
from collections import deque
from dataclasses import dataclass

from voicecart.shopping.categories import categorize
from voicecart.shopping.items import display_name, normalize_name, same_item

HISTORY_LIMIT = 200

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


@dataclass
class ListEntry:
    name: str
    qty: int
    category: str


class HistoryLog:
    """Names added to the list, most recent first, capped at HISTORY_LIMIT."""

    def __init__(self, limit=HISTORY_LIMIT):
        self._names = deque(maxlen=limit)

    def record(self, name):
        self._names.appendleft(name)

    def __iter__(self):
        return iter(self._names)

    def __len__(self):
        return len(self._names)


def parse_quantity_input(raw):
    """Read a typed quantity: leading integer, or 1 if there isn't a usable one.

    "3 packs" -> 3, "" -> 1, "lots" -> 1, "0" -> 1, "-2" -> -2.
    """
    m = _LEADING_INT_RE.match(raw or "")
    if m is None:
        return 1
    return int(m.group(1)) or 1


class ShoppingList:
    """Shopping list state for one session."""

    def __init__(self, history=None):
        self.entries = []
        self.history = history if history is not None else HistoryLog()

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def find(self, name):
        """Return the entry matching name (case-insensitive), or None."""
        name = normalize_name(name)
        for entry in self.entries:
            if same_item(entry.name, name):
                return entry
        return None

    def add(self, raw_name, qty=1):
        """Add qty of an item, merging into an existing entry. Returns the entry."""
        name = normalize_name(raw_name)
        entry = self.find(name)
        if entry is not None:
            entry.qty += qty
        else:
            entry = ListEntry(display_name(name), qty, categorize(name))
            self.entries.append(entry)
        self.history.record(name)
        return entry

    def remove(self, raw_name):
        """Drop the matching entry. Returns True if one was removed."""
        entry = self.find(raw_name)
        if entry is None:
            return False
        self.entries.remove(entry)
        return True

    def modify(self, raw_name, qty):
        """Set an entry's quantity outright. Returns the entry, or None if absent."""
        entry = self.find(raw_name)
        if entry is not None:
            entry.qty = qty
        return entry

    def entry_at(self, index):
        """Entry by zero-based position; raises IndexError when out of range."""
        if not 0 <= index < len(self.entries):
            raise IndexError(f"no item at position {index + 1}")
        return self.entries[index]

    def set_quantity_at(self, index, raw_value):
        """Direct edit of a quantity from typed input (see parse_quantity_input)."""
        entry = self.entry_at(index)
        entry.qty = parse_quantity_input(raw_value)
        return entry

    def increment_at(self, index):
        entry = self.entry_at(index)
        return self.modify(entry.name, entry.qty + 1)

    def decrement_at(self, index):
        entry = self.entry_at(index)
        return self.modify(entry.name, max(1, entry.qty - 1))
