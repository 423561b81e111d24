"""Tests for SelectionTracker."""
from src.services.selection import SelectionTracker


def _tracker(*pages):
    tracker = SelectionTracker()
    for ids in pages:
        tracker.show_page(ids)
    return tracker


def test_toggle_all_only_touches_visible_rows():
    tracker = _tracker(["a", "b"], ["1", "2", "3", "4", "5", "6"])
    tracker._selected["a"] = True
    tracker.toggle_all(True)
    assert tracker.selected_ids() == {"a", "1", "2", "3", "4", "5", "6"}
    assert tracker.all_on_page_selected

    tracker.toggle_all(False)
    assert tracker.selected_ids() == {"a"}
    assert tracker.is_selected("a")


def test_selection_survives_page_navigation():
    tracker = _tracker(["1", "2"])
    tracker.toggle_one("1", True)
    tracker.show_page(["3", "4"])
    assert tracker.is_selected("1")
    assert not tracker.all_on_page_selected
    assert tracker.bulk_ids() == ["1"]


def test_unknown_id_is_ignored():
    tracker = _tracker(["1"])
    tracker.toggle_one("99", True)
    assert tracker.count == 0
    assert not tracker.is_selected("99")


def test_toggle_one_off_and_clear():
    tracker = _tracker(["1", "2"])
    tracker.toggle_one("1", True)
    tracker.toggle_one("2", True)
    tracker.toggle_one("2", False)
    assert tracker.bulk_ids() == ["1"]
    assert tracker.as_dict() == {"1": True, "2": False}

    tracker.clear()
    assert tracker.count == 0
    assert tracker.visible_ids == ["1", "2"]


def test_empty_page_is_never_all_selected():
    tracker = _tracker([])
    tracker.toggle_all(True)
    assert not tracker.all_on_page_selected
    assert tracker.count == 0
