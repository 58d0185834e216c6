"""Command router: applies a parsed Command to a session and reports back.

Entry points:
    dispatch(session, command) -> StatusMessage
    handle_text(session, text, source)              # parse + dispatch + log
    handle_transcript(session, text, is_final, source)

Every utterance is appended to the request log as a compact 2-line entry.
"""

import os
from datetime import datetime

from voicecart.commands.command import Add, Modify, Remove, Search
from voicecart.commands.parser import parse_command
from voicecart.session import error, ok
from voicecart.shopping.items import normalize_name

HINT = ("Didn't catch that. Try: \"add 2 apples\", \"remove milk\", "
        "\"find toothpaste under 5\".")

# Log file: lives next to the voicecart package directory
_LOG_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "voicecart.log")


def _log_request(text, command, source):
    """Append a compact 2-line entry to the log file."""
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    parts = [command.action]
    for k, v in command.args.items():
        parts.append(f"{k}={v!r}")
    try:
        with open(_LOG_PATH, "a", encoding="utf-8") as f:
            f.write(f"{ts} {source}  {text}\n  -> {', '.join(parts)}\n")
    except OSError:
        pass


def format_price(n):
    """5 -> "5", 4.5 -> "4.5"."""
    if n == int(n):
        return str(int(n))
    return f"{n:g}"


def add_item(session, raw_name, qty=1):
    """Add to the list and report it; shared by voice commands and controls."""
    session.items.add(raw_name, qty)
    return ok(f"Added {qty} × {normalize_name(raw_name)}.")


def remove_item(session, raw_name):
    session.items.remove(raw_name)
    return ok(f"Removed {normalize_name(raw_name)}.")


def modify_item(session, raw_name, qty):
    session.items.modify(raw_name, qty)
    return ok(f"Set {normalize_name(raw_name)} to {qty}.")


def search(session, query, max_price=None):
    session.search_results = session.index.search(query, max_price)
    under = f" under ${format_price(max_price)}" if max_price is not None else ""
    return ok(f"Search results for \"{query}\"{under}.")


def _apply(session, command):
    if isinstance(command, Add):
        return add_item(session, command.item, command.qty)
    if isinstance(command, Remove):
        return remove_item(session, command.item)
    if isinstance(command, Modify):
        return modify_item(session, command.item, command.qty)
    if isinstance(command, Search):
        return search(session, command.item, command.max_price)
    return error(HINT)


def dispatch(session, command):
    """Run a command against the session. Returns (and stores) the status message."""
    session.message = _apply(session, command)
    return session.message


def handle_text(session, text, source="[console]"):
    """Parse one finalized utterance and dispatch it."""
    command = parse_command(text)
    _log_request(text, command, source)
    return dispatch(session, command)


def handle_transcript(session, text, is_final, source="[voice]"):
    """Feed one speech event. Only final text is parsed; interim returns None."""
    session.hear(text, is_final)
    if not is_final or not text.strip():
        return None
    return handle_text(session, text, source)
