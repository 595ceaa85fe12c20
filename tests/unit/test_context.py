import pytest

from app.core.context import ContextError, ContextStore, StudyContext, require_text


def test_new_store_has_no_text():
    store = ContextStore()
    assert not store.current().has_text
    with pytest.raises(ContextError, match="Please ingest some text first."):
        require_text(store.current())


def test_ingest_replaces_context_without_mutating_snapshots():
    store = ContextStore()
    before = store.current()
    after = store.ingest("Mitochondria make ATP.")
    assert require_text(after) == "Mitochondria make ATP."
    assert before.ingested_text is None
    assert store.current() is after


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_blank_text_is_not_ingested(text):
    store = ContextStore()
    with pytest.raises(ContextError):
        store.ingest(text)
    assert not store.current().has_text


def test_whitespace_only_context_has_no_text():
    assert not StudyContext(ingested_text="   ").has_text


def test_clear_keeps_model_and_language():
    store = ContextStore()
    store.configure(model_id="gemini-2.5-pro", language="French")
    store.ingest("text")
    ctx = store.clear()
    assert ctx.ingested_text is None
    assert ctx.model_id == "gemini-2.5-pro"
    assert ctx.language == "French"


def test_configure_ignores_empty_values():
    store = ContextStore(StudyContext(model_id="m1", language="German"))
    ctx = store.configure(model_id="", language=None)
    assert (ctx.model_id, ctx.language) == ("m1", "German")
    ctx = store.configure(language="Hindi")
    assert (ctx.model_id, ctx.language) == ("m1", "Hindi")


def test_context_is_frozen():
    ctx = StudyContext(ingested_text="x")
    with pytest.raises(Exception):
        ctx.ingested_text = "y"
