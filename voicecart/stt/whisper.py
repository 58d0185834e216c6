"""Speech-to-text using faster-whisper.

Transcribes recorded audio (a file path or binary file object, e.g. a
Telegram voice note) and reports it as transcript events: one interim
(text, False) event per recognized segment, then a single (full_text, True)
event. Only the final event should be parsed as a command.

Usage (standalone test, transcribes an audio file):
    python -m voicecart.stt.whisper recording.ogg [en-IN]
"""

import os

# Workaround for OpenMP duplicate library conflict (torch + ctranslate2 on macOS)
os.environ.setdefault("KMP_DUPLICATE_LIB_OK", "TRUE")

from faster_whisper import WhisperModel

DEFAULT_MODEL_SIZE = "small"
DEFAULT_COMPUTE_TYPE = "int8"

_model = None


def load_model(model_size=DEFAULT_MODEL_SIZE, compute_type=DEFAULT_COMPUTE_TYPE):
    """Load the Whisper model. Caches on first call.

    Returns:
        A faster_whisper.WhisperModel instance.
    """
    global _model
    if _model is None:
        _model = WhisperModel(model_size, device="cpu", compute_type=compute_type)
    return _model


def whisper_language(lang_tag):
    """Map a locale tag like "en-IN" or "hi-IN" to whisper's language code."""
    return lang_tag.split("-")[0].lower()


def transcript_events(audio, lang_tag="en-IN", model=None):
    """Transcribe audio, yielding (text, is_final) events.

    Args:
        audio: path or binary file object holding any format PyAV can decode.
        lang_tag: speech locale tag selected by the user.
        model: WhisperModel instance, or None to use the cached default.
    """
    if model is None:
        model = load_model()

    segments, _ = model.transcribe(
        audio,
        language=whisper_language(lang_tag),
        vad_filter=True,  # filter out non-speech segments
    )
    texts = []
    for s in segments:
        chunk = s.text.strip()
        if chunk:
            texts.append(chunk)
            yield chunk, False
    yield " ".join(texts), True


def transcribe(audio, lang_tag="en-IN", model=None):
    """Transcribe audio to text (stripped), or empty string if nothing detected."""
    text = ""
    for text, is_final in transcript_events(audio, lang_tag, model):
        pass
    return text


if __name__ == "__main__":
    import sys
    import time

    if len(sys.argv) < 2:
        print("usage: python -m voicecart.stt.whisper AUDIO_FILE [LANG_TAG]")
        sys.exit(1)

    print("Loading model...")
    whisper_model = load_model()
    t0 = time.time()
    for text, is_final in transcript_events(sys.argv[1], *sys.argv[2:3], model=whisper_model):
        print(f"  [{'final' if is_final else 'interim'}] \"{text}\"")
    print(f"  ({time.time() - t0:.1f}s)")
