"""
Tests for the message deduplicator
"""
from core.deduplicator import Deduplicator, DedupState
from core.parser.base import RawMessage


def test_first_message_is_admitted_and_remembered():
    state = DedupState()
    dedup = Deduplicator(state)

    assert dedup.admit(RawMessage("buy eur/usd 5m", "101"))
    assert state.last_seen_message_id == "101"


def test_repeat_of_last_id_is_suppressed():
    dedup = Deduplicator()
    message = RawMessage("buy eur/usd 5m", "101")

    assert dedup.admit(message)
    for _ in range(3):
        assert not dedup.admit(message)
    assert dedup.last_seen_message_id == "101"


def test_only_the_immediately_preceding_id_is_remembered():
    dedup = Deduplicator()

    assert dedup.admit(RawMessage("a", "1"))
    assert dedup.admit(RawMessage("b", "2"))
    # "1" is no longer the last seen id
    assert dedup.admit(RawMessage("a", "1"))


def test_empty_text_or_id_is_discarded_without_state_change():
    state = DedupState(last_seen_message_id="7")
    dedup = Deduplicator(state)

    assert not dedup.admit(RawMessage("", "8"))
    assert not dedup.admit(RawMessage("   ", "8"))
    assert not dedup.admit(RawMessage("buy eur/usd 5m", ""))
    assert state.last_seen_message_id == "7"


def test_injected_state_is_shared():
    state = DedupState(last_seen_message_id="42")
    dedup = Deduplicator(state)

    assert not dedup.admit(RawMessage("anything", "42"))
    assert dedup.admit(RawMessage("anything", "43"))
    assert state.last_seen_message_id == "43"
