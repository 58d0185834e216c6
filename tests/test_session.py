from types import SimpleNamespace

from voicecart.commands import router
from voicecart.session import Session, SessionStore, StatusMessage, error, ok
from voicecart.shopping.catalog import SubstringIndex
from voicecart.stt import whisper


def test_status_message_severity():
    assert ok("fine").ok
    assert not error("bad").ok
    assert StatusMessage("x").severity == "ok"


def test_transcript_interim_then_final():
    session = Session(SubstringIndex([]))
    session.hear("add", False)
    assert session.transcript == "add"
    session.hear("add milk", True)
    session.hear("remove", False)
    assert session.transcript == "add milk remove"
    session.hear("remove bread", True)
    assert session.transcript == "add milk remove bread"
    session.clear_transcript()
    assert session.transcript == ""
    session.hear("find soap", True)
    assert session.transcript == "find soap"


def test_suggestions_follow_history():
    session = Session(SubstringIndex([]))
    assert session.suggestions == ["Mangoes", "Brown bread", "Toothpaste"]
    session.items.add("paneer")
    assert session.suggestions[0] == "Paneer"


def test_session_store_isolates_keys():
    store = SessionStore(lambda: Session(SubstringIndex([])))
    a = store.get(1)
    assert store.get(1) is a
    b = store.get(2)
    assert b is not a
    a.items.add("milk")
    assert len(b.items) == 0
    store.drop(1)
    assert len(store) == 1
    assert store.get(1) is not a


# --- Speech events ---

class _FakeModel:
    def __init__(self, *texts):
        self.texts = texts
        self.calls = []

    def transcribe(self, audio, **kwargs):
        self.calls.append(kwargs)
        return (SimpleNamespace(text=t) for t in self.texts), None


def test_whisper_language():
    assert whisper.whisper_language("en-IN") == "en"
    assert whisper.whisper_language("hi-IN") == "hi"


def test_transcript_events_interim_then_final():
    model = _FakeModel(" add two", " apples ", "  ")
    events = list(whisper.transcript_events(b"", "hi-IN", model=model))
    assert events == [("add two", False), ("apples", False), ("add two apples", True)]
    assert model.calls[0]["language"] == "hi"


def test_transcribe_returns_final_text():
    assert whisper.transcribe(b"", model=_FakeModel(" find soap")) == "find soap"
    assert whisper.transcribe(b"", model=_FakeModel()) == ""


def test_speech_events_drive_the_router(tmp_path, monkeypatch):
    monkeypatch.setattr(router, "_LOG_PATH", str(tmp_path / "voicecart.log"))
    session = Session(SubstringIndex([]))
    messages = []
    for text, is_final in whisper.transcript_events(b"", model=_FakeModel("add two", "apples")):
        messages.append(router.handle_transcript(session, text, is_final, source="[test]"))
    assert messages[:2] == [None, None]
    assert messages[2].text == "Added 2 × apples."
    assert session.transcript == "add two apples"
