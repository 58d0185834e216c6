"""Per-user session state.

Everything a conversation mutates (list, add history, last search results,
transcript, last status message, language) lives on one Session object.
Front ends keep one Session per user in a SessionStore; nothing is shared
between sessions.
"""

from dataclasses import dataclass

from voicecart.shopping.catalog import default_index
from voicecart.shopping.shopping_list import HistoryLog, ShoppingList
from voicecart.shopping.suggestions import suggest

OK = "ok"
ERROR = "error"

# Speech locale tags offered to the user, with their display names
SUPPORTED_LANGS = {
    "en-IN": "English (India)",
    "en-US": "English (US)",
    "hi-IN": "हिंदी (भारत)",
}
DEFAULT_LANG = "en-IN"


@dataclass
class StatusMessage:
    text: str
    severity: str = OK

    @property
    def ok(self):
        return self.severity == OK


def ok(text):
    return StatusMessage(text, OK)


def error(text):
    return StatusMessage(text, ERROR)


class Session:
    def __init__(self, index=None, lang=DEFAULT_LANG):
        self.history = HistoryLog()
        self.items = ShoppingList(self.history)
        self.index = index if index is not None else default_index()
        self.search_results = []
        self.transcript = ""
        self._heard = ""
        self.message = None
        self.lang = lang

    @property
    def suggestions(self):
        return suggest(self.history)

    def hear(self, chunk, is_final):
        """Update the live transcript with a speech chunk.

        Final chunks are appended to what was heard so far; an interim chunk
        is shown after it until its final version arrives.
        """
        if is_final:
            self._heard = (self._heard + " " + chunk).strip()
            self.transcript = self._heard
        else:
            self.transcript = (self._heard + " " + chunk).strip()

    def clear_transcript(self):
        self._heard = ""
        self.transcript = ""


class SessionStore:
    """Sessions keyed by user/chat id, created on first use."""

    def __init__(self, factory=Session):
        self._factory = factory
        self._sessions = {}

    def get(self, key):
        session = self._sessions.get(key)
        if session is None:
            session = self._sessions[key] = self._factory()
        return session

    def drop(self, key):
        self._sessions.pop(key, None)

    def __len__(self):
        return len(self._sessions)
