"""Telegram bot interface for voicecart.

Runs alongside the console loop in a background thread. Each chat gets its
own Session: text messages are utterances, voice notes are transcribed with
whisper, and /list, /qty, /pick, ... map to the controls.

Requires telegram_credentials.py with TELEGRAM_TOKEN from @BotFather.
If not configured, start_telegram() logs a message and returns without error.
"""

import asyncio
import io
import threading

from telegram import Update
from telegram.ext import ApplicationBuilder, CommandHandler, ContextTypes, MessageHandler, filters

from voicecart import controls
from voicecart.commands import router
from voicecart.session import SessionStore, error
from voicecart.stt import whisper

_sessions = SessionStore()


def _log(msg):
    print(msg, flush=True)


def _source(update):
    user = update.message.from_user
    return f"[Telegram:{user.first_name or user.username or 'unknown'}]"


def _reply_text(session, message):
    """Status line, plus the results when the message came from a search."""
    text = message.text
    if message.ok and text.startswith("Search results"):
        text += "\n" + controls.render_results(session)
    return text


async def _handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle an incoming text message as one finalized utterance."""
    text = update.message.text
    if not text:
        return

    source = _source(update)
    _log(f"  {source} \"{text}\"")

    session = _sessions.get(update.effective_chat.id)
    message = router.handle_text(session, text, source=source)
    _log(f"  Response: \"{message.text}\"")
    await update.message.reply_text(_reply_text(session, message))


def _transcribe_voice(session, audio, source):
    """Run whisper over a voice note, feeding each event to the router."""
    message = None
    for text, is_final in whisper.transcript_events(audio, session.lang):
        result = router.handle_transcript(session, text, is_final, source=source)
        if result is not None:
            message = result
    return message


async def _handle_voice(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle a voice note: download, transcribe off the event loop, dispatch."""
    source = _source(update)
    session = _sessions.get(update.effective_chat.id)
    try:
        voice_file = await update.message.voice.get_file()
        audio = io.BytesIO()
        await voice_file.download_to_memory(audio)
        audio.seek(0)
        message = await asyncio.to_thread(_transcribe_voice, session, audio, source)
    except Exception as e:
        message = session.message = error(f"Voice error: {e}")

    if message is None:
        message = session.message = error("Voice error: no speech detected")
    _log(f"  {source} heard \"{session.transcript}\" -> \"{message.text}\"")
    await update.message.reply_text(_reply_text(session, message))


async def _handle_control(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /list, /qty 2 5, /pick 1, ..."""
    name = update.message.text.split()[0].lstrip("/").split("@")[0]
    session = _sessions.get(update.effective_chat.id)
    message = controls.run_control(session, name, context.args or [])
    await update.message.reply_text(message.text)


async def _run_bot_async(token):
    """Run the Telegram bot polling loop (async)."""
    app = ApplicationBuilder().token(token).build()
    app.add_handler(CommandHandler(controls.NAMES, _handle_control))
    app.add_handler(MessageHandler(filters.VOICE, _handle_voice))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, _handle_message))

    await app.initialize()
    await app.updater.start_polling(drop_pending_updates=True)
    await app.start()
    print("Telegram bot started.", flush=True)

    # Block forever (until thread is killed as daemon)
    stop_event = asyncio.Event()
    await stop_event.wait()


def _run_bot(token):
    """Run the Telegram bot (blocking). Meant to be called in a thread."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    loop.run_until_complete(_run_bot_async(token))


def start_telegram():
    """Start the Telegram bot in a background daemon thread.

    Returns True if started, False if skipped (no token).
    """
    try:
        from voicecart.telegram_credentials import TELEGRAM_TOKEN as token
    except ImportError:
        print("No telegram_credentials.py — Telegram disabled.", flush=True)
        return False

    t = threading.Thread(target=_run_bot, args=(token,), daemon=True)
    t.start()
    return True
