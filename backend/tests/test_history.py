# Name: test_history.py
# Description: Tests for the bounded history store

import pytest

from phishguard.models.analysis import AnalysisResult, HistoryItem
from phishguard.services.history import HistoryStore

from conftest import LEGITIMATE_PAYLOAD, PHISHING_PAYLOAD


def _item(text: str, payload=PHISHING_PAYLOAD) -> HistoryItem:
    return HistoryItem.create(text, AnalysisResult.model_validate(payload))


def test_records_newest_first():
    store = HistoryStore()
    first, second = _item("first"), _item("second")
    store.record(first)
    store.record(second)
    assert store.items() == (second, first)


def test_eleventh_item_evicts_the_oldest():
    store = HistoryStore()
    items = [_item(f"email {i}") for i in range(11)]
    for item in items:
        store.record(item)
    
    assert len(store) == 10
    assert store.items() == tuple(reversed(items[1:]))
    assert store.select(items[0].id) is None


def test_length_never_exceeds_limit():
    store = HistoryStore(limit=3)
    for i in range(7):
        store.record(_item(f"email {i}"))
        assert len(store) <= 3


def test_select_by_id():
    store = HistoryStore()
    wanted = _item("wanted")
    store.record(wanted)
    store.record(_item("other"))
    assert store.select(wanted.id) is wanted
    assert store.select("missing") is None


def test_phishing_count():
    store = HistoryStore()
    store.record(_item("bad"))
    store.record(_item("good", LEGITIMATE_PAYLOAD))
    store.record(_item("bad again"))
    assert store.phishing_count() == 2


def test_items_is_a_snapshot():
    store = HistoryStore()
    snapshot = store.items()
    store.record(_item("later"))
    assert snapshot == ()


def test_invalid_limit():
    with pytest.raises(ValueError):
        HistoryStore(limit=0)
