"""Undo/redo behaviour of the staged/committed history."""

from rotacrop.history import History, HistorySnapshot
from rotacrop.models import CropperState, ExplicitCrop, Point, Size


def test_initialises_with_the_given_state() -> None:
    h = History({"count": 0})
    assert h.state == {"count": 0}
    assert h.committed == {"count": 0}
    assert not h.can_undo
    assert not h.can_redo


def test_stage_updates_live_state_without_history_entry() -> None:
    h = History({"count": 0})
    h.stage({"count": 5})
    assert h.state == {"count": 5}
    assert h.committed == {"count": 0}
    assert not h.can_undo


def test_commit_creates_history_entry() -> None:
    h = History({"count": 0})
    h.stage({"count": 5})
    assert h.commit()
    assert h.state == {"count": 5}
    assert h.committed == {"count": 5}
    assert h.can_undo
    assert not h.can_redo


def test_commit_with_explicit_value_stages_and_commits() -> None:
    h = History({"count": 0})
    h.commit({"count": 7})
    assert h.state == {"count": 7}
    assert h.committed == {"count": 7}
    assert h.can_undo


def test_commit_ignores_equal_state() -> None:
    h = History({"count": 0})
    assert not h.commit({"count": 0})
    assert not h.can_undo


def test_commit_compares_dataclass_values() -> None:
    h = History(CropperState())
    assert not h.commit(CropperState(offset=Point(0.0, 0.0)))
    assert h.commit(CropperState(crop=ExplicitCrop(Size(300, 200))))
    assert not h.commit(CropperState(crop=ExplicitCrop(Size(300, 200))))
    assert len(h.get_history().past) == 1


def test_undo_reverts_to_previous_committed_state() -> None:
    h = History({"count": 0})
    h.commit({"count": 1})
    h.commit({"count": 2})
    assert h.undo()
    assert h.state == {"count": 1}
    assert h.committed == {"count": 1}
    assert h.can_undo
    assert h.can_redo


def test_undo_discards_staged_value() -> None:
    h = History({"count": 0})
    h.commit({"count": 1})
    h.stage({"count": 9})
    h.undo()
    assert h.state == {"count": 0}


def test_redo_reapplies_the_undone_state() -> None:
    h = History({"count": 0})
    h.commit({"count": 1})
    h.commit({"count": 2})
    h.undo()
    assert h.redo()
    assert h.state == {"count": 2}
    assert h.committed == {"count": 2}
    assert not h.can_redo


def test_new_commit_clears_redo_stack() -> None:
    h = History({"count": 0})
    h.commit({"count": 1})
    h.commit({"count": 2})
    h.undo()
    h.commit({"count": 3})
    assert not h.can_redo
    assert h.get_history().future == []
    assert h.state == {"count": 3}


def test_undo_and_redo_without_history_do_nothing() -> None:
    h = History({"count": 0})
    assert not h.undo()
    assert not h.redo()
    assert h.state == {"count": 0}
    assert not h.can_undo
    assert not h.can_redo


def test_get_history_returns_past_present_future() -> None:
    h = History({"count": 0})
    h.commit({"count": 1})
    h.commit({"count": 2})
    h.undo()
    snap = h.get_history()
    assert isinstance(snap, HistorySnapshot)
    assert snap.past == [{"count": 0}]
    assert snap.present == {"count": 1}
    assert snap.future == [{"count": 2}]


def test_get_history_is_a_copy() -> None:
    h = History({"count": 0})
    h.commit({"count": 1})
    snap = h.get_history()
    h.commit({"count": 2})
    assert snap.past == [{"count": 0}]


def test_reset_clears_history_and_restores_initial_state() -> None:
    h = History({"count": 0})
    h.commit({"count": 1})
    h.commit({"count": 2})
    h.undo()
    h.reset({"count": 0})
    assert h.state == {"count": 0}
    assert h.committed == {"count": 0}
    assert not h.can_undo
    assert not h.can_redo


def test_commit_can_store_none_explicitly() -> None:
    h = History(1)
    h.stage(2)
    assert h.commit(None)
    assert h.committed is None
    assert h.state is None
    assert h.get_history().past == [1]


def test_commit_without_value_uses_staged() -> None:
    h = History(None)
    h.stage(3)
    assert h.commit()
    assert h.committed == 3
