"""voicecart console loop.

Each line typed is treated as one finalized utterance ("add 2 apples",
"find toothpaste under 5"). Lines starting with ":" run a control
(":list", ":qty 1 4", ":pick 2", ":help"); ":quit" exits. The Telegram bot,
when configured, runs in the background with its own per-chat sessions.

Usage:
    python -m voicecart
"""

import time

from voicecart import controls
from voicecart.commands import router
from voicecart.session import Session, SUPPORTED_LANGS
from voicecart.shopping.catalog import default_index


def log(msg):
    print(msg, flush=True)


def _show(session, message):
    marker = "ok" if message.ok else "!!"
    log(f"  [{marker}] {message.text}")
    if message.ok and message.text.startswith("Search results"):
        log("  " + controls.render_results(session).replace("\n", "\n  "))


def main():
    log("Loading catalog...")
    t0 = time.time()
    index = default_index()
    log(f"  {len(index)} products ready ({time.time() - t0:.1f}s)")

    # Start Telegram bot (if token is configured)
    try:
        from voicecart.telegram_bot import start_telegram
        start_telegram()
    except Exception as e:
        log(f"Telegram bot failed to start: {e}")

    session = Session(index)
    log(f"Language: {SUPPORTED_LANGS[session.lang]}")
    log("Say a command... try \"add 2 apples\", \"remove milk\", \"find toothpaste under 5\".\n")

    try:
        while True:
            try:
                text = input("> ").strip()
            except EOFError:
                break
            if not text:
                continue
            if text.startswith(":"):
                name, *args = text[1:].split() or ["help"]
                if name == "quit":
                    break
                _show(session, controls.run_control(session, name, args))
                continue

            _show(session, router.handle_transcript(session, text, True, source="[console]"))

    except KeyboardInterrupt:
        pass
    log("\nShutting down.")


if __name__ == "__main__":
    main()
