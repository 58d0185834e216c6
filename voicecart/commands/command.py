"""Command objects produced by the parser.

parse_command(text) always returns one of these; the router dispatches on
the concrete class and never on the raw utterance.
"""

from dataclasses import dataclass, fields
from typing import Optional


@dataclass(frozen=True)
class Command:
    action = "unknown"    # tag shown in logs and test_cases.txt

    @property
    def args(self):
        """Field values as a dict, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class Add(Command):
    item: str
    qty: int = 1
    action = "add"


@dataclass(frozen=True)
class Remove(Command):
    item: str
    action = "remove"


@dataclass(frozen=True)
class Modify(Command):
    item: str
    qty: int = 1
    action = "modify"


@dataclass(frozen=True)
class Search(Command):
    item: str
    max_price: Optional[float] = None
    action = "search"


@dataclass(frozen=True)
class Unknown(Command):
    pass
