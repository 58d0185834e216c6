"""Non-voice controls: the buttons and inputs around the list.

Front ends expose these as ":name args" (console) or "/name args" (Telegram).
Positions are 1-based as shown by the list view.

    list                show the shopping list
    suggest             show suggestions
    results             show the last search results
    qty N VALUE         type a quantity for item N
    inc N / dec N       +1 / -1 on item N (never below 1)
    del N               remove item N
    pick N              add suggestion N
    add N               add search result N
    lang [TAG]          show or choose the speech language
    clear               clear the transcript
    help                list controls
"""

from voicecart.commands import router
from voicecart.session import SUPPORTED_LANGS, error, ok


def render_list(session):
    if not session.items.entries:
        return "Your list is empty. Try a voice command or pick a suggestion."
    lines = []
    for i, entry in enumerate(session.items.entries, 1):
        lines.append(f"{i}. {entry.name} × {entry.qty}  [{entry.category}]")
    return "\n".join(lines)


def render_suggestions(session):
    return "\n".join(f"{i}. {s}" for i, s in enumerate(session.suggestions, 1))


def render_results(session):
    if not session.search_results:
        return "No results yet."
    return "\n".join(f"{i}. {p.name} ({p.brand}) ${router.format_price(p.price)}"
                     for i, p in enumerate(session.search_results, 1))


def _position(args, count):
    """Parse a 1-based position argument. Returns a 0-based index or None."""
    if not args or not args[0].isdigit():
        return None
    n = int(args[0])
    if not 1 <= n <= count:
        return None
    return n - 1


def _list_position(session, args):
    return _position(args, len(session.items))


def _bad_position(what, args):
    if not args:
        return error(f"Which {what}? Give its number from the list.")
    return error(f"There's no {what} number {args[0]}.")


def _qty(session, args):
    i = _list_position(session, args)
    if i is None:
        return _bad_position("item", args)
    entry = session.items.set_quantity_at(i, " ".join(args[1:]))
    return ok(f"Set {entry.name} to {entry.qty}.")


def _inc(session, args):
    i = _list_position(session, args)
    if i is None:
        return _bad_position("item", args)
    entry = session.items.increment_at(i)
    return ok(f"Set {entry.name} to {entry.qty}.")


def _dec(session, args):
    i = _list_position(session, args)
    if i is None:
        return _bad_position("item", args)
    entry = session.items.decrement_at(i)
    return ok(f"Set {entry.name} to {entry.qty}.")


def _del(session, args):
    i = _list_position(session, args)
    if i is None:
        return _bad_position("item", args)
    return router.remove_item(session, session.items.entry_at(i).name)


def _pick(session, args):
    suggestions = session.suggestions
    i = _position(args, len(suggestions))
    if i is None:
        return _bad_position("suggestion", args)
    return router.add_item(session, suggestions[i], 1)


def _add_result(session, args):
    i = _position(args, len(session.search_results))
    if i is None:
        return _bad_position("search result", args)
    return router.add_item(session, session.search_results[i].name, 1)


def _lang(session, args):
    if not args:
        choices = ", ".join(f"{tag} ({name})" for tag, name in SUPPORTED_LANGS.items())
        return ok(f"Language: {session.lang}. Available: {choices}.")
    tag = args[0]
    for supported in SUPPORTED_LANGS:
        if supported.lower() == tag.lower():
            session.lang = supported
            return ok(f"Language set to {SUPPORTED_LANGS[supported]}.")
    return error(f"Unsupported language {tag!r}.")


def _clear(session, args):
    session.clear_transcript()
    return ok("Transcript cleared.")


def _help(session, args):
    return ok(__doc__.split("\n\n", 2)[2].rstrip())


_CONTROLS = {
    "list": lambda s, a: ok(render_list(s)),
    "suggest": lambda s, a: ok(render_suggestions(s)),
    "results": lambda s, a: ok(render_results(s)),
    "qty": _qty,
    "inc": _inc,
    "dec": _dec,
    "del": _del,
    "pick": _pick,
    "add": _add_result,
    "lang": _lang,
    "clear": _clear,
    "help": _help,
}

NAMES = list(_CONTROLS)


def run_control(session, name, args=()):
    """Run a named control. Returns (and stores) a StatusMessage."""
    fn = _CONTROLS.get(name.lower())
    if fn is None:
        message = error(f"Unknown control {name!r}. Try help.")
    else:
        message = fn(session, list(args))
    session.message = message
    return message
