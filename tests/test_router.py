import pytest

from voicecart.commands import Add, Modify, Remove, Search, Unknown
from voicecart.commands import router
from voicecart.session import Session
from voicecart.shopping.catalog import CatalogProduct, SubstringIndex

CATALOG = [
    CatalogProduct("Strong Teeth Toothpaste", "Colgate", 2.49),
    CatalogProduct("Sensitive Toothpaste", "Sensodyne", 6.5),
    CatalogProduct("Whitening Toothpaste", "Crest", 5.0),
    CatalogProduct("Toothbrush", "Colgate", 1.99),
    CatalogProduct("Shampoo", "Head & Shoulders", 4.5),
]


@pytest.fixture(autouse=True)
def request_log(tmp_path, monkeypatch):
    path = tmp_path / "voicecart.log"
    monkeypatch.setattr(router, "_LOG_PATH", str(path))
    return path


@pytest.fixture
def session():
    return Session(SubstringIndex(CATALOG))


def test_dispatch_add(session):
    message = router.dispatch(session, Add("apples", 2))
    assert message.text == "Added 2 × apples."
    assert message.severity == "ok"
    assert session.message is message
    assert [(e.name, e.qty, e.category) for e in session.items] == [("Apples", 2, "Produce")]


def test_dispatch_remove(session):
    router.dispatch(session, Add("milk"))
    message = router.dispatch(session, Remove("Milk"))
    assert message.text == "Removed Milk."
    assert len(session.items) == 0


def test_remove_missing_item_still_reports_success(session):
    message = router.dispatch(session, Remove("bread"))
    assert message.ok
    assert message.text == "Removed bread."


def test_dispatch_modify(session):
    router.dispatch(session, Add("apples", 2))
    message = router.dispatch(session, Modify("apples", 6))
    assert message.text == "Set apples to 6."
    assert session.items.find("apples").qty == 6


def test_modify_missing_item_still_reports_success(session):
    router.dispatch(session, Add("apples", 2))
    message = router.dispatch(session, Modify("bananas", 6))
    assert message.ok
    assert message.text == "Set bananas to 6."
    assert [(e.name, e.qty) for e in session.items] == [("Apples", 2)]


def test_dispatch_search_replaces_results(session):
    router.dispatch(session, Search("colgate"))
    assert len(session.search_results) == 2
    message = router.dispatch(session, Search("shampoo"))
    assert message.text == "Search results for \"shampoo\"."
    assert [p.name for p in session.search_results] == ["Shampoo"]


def test_search_message_formats_price(session):
    assert router.dispatch(session, Search("soap", 4.5)).text == "Search results for \"soap\" under $4.5."
    assert router.dispatch(session, Search("soap", 0)).text == "Search results for \"soap\" under $0."


def test_dispatch_unknown(session):
    router.dispatch(session, Add("milk"))
    message = router.dispatch(session, Unknown())
    assert message.severity == "error"
    assert message.text == router.HINT
    assert [e.name for e in session.items] == ["Milk"]


def test_find_toothpaste_under_5(session):
    message = router.handle_text(session, "find toothpaste under 5")
    assert message.text == "Search results for \"toothpaste\" under $5."
    assert [p.brand for p in session.search_results] == ["Colgate", "Crest"]
    assert all(p.price <= 5 for p in session.search_results)


def test_handle_text_add_merge(session):
    router.handle_text(session, "add 2 Apples")
    router.handle_text(session, "buy three apples")
    assert [(e.name, e.qty) for e in session.items] == [("Apples", 5)]


def test_handle_text_strips_pack_size(session):
    message = router.handle_text(session, "add 2 milk 1l")
    assert message.text == "Added 2 × milk."
    assert session.items.find("milk").qty == 2


def test_handle_text_writes_request_log(session, request_log):
    router.handle_text(session, "add 2 apples", source="[test]")
    router.handle_text(session, "xyz not a command", source="[test]")
    lines = request_log.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 4
    assert lines[0].endswith("[test]  add 2 apples")
    assert lines[1] == "  -> add, item='apples', qty=2"
    assert lines[3] == "  -> unknown"


def test_unwritable_log_is_ignored(session, monkeypatch, tmp_path):
    monkeypatch.setattr(router, "_LOG_PATH", str(tmp_path / "missing" / "voicecart.log"))
    assert router.handle_text(session, "add milk").ok


def test_interim_transcript_is_not_parsed(session):
    assert router.handle_transcript(session, "add 2", False) is None
    assert session.transcript == "add 2"
    assert len(session.items) == 0

    message = router.handle_transcript(session, "add 2 apples", True)
    assert message.text == "Added 2 × apples."
    assert session.transcript == "add 2 apples"


def test_sessions_are_isolated():
    index = SubstringIndex(CATALOG)
    a, b = Session(index), Session(index)
    router.handle_text(a, "add apples")
    router.handle_text(b, "find shampoo")
    assert len(a.items) == 1 and len(b.items) == 0
    assert a.search_results == [] and len(b.search_results) == 1
    assert list(b.history) == []
