import pytest

from dunstkit.status import DunstStatus, StatusField, StatusTracker, version_message


def test_initial_status_is_all_false():
    assert StatusTracker().get() == DunstStatus(fullscreen=False, running=False, idle=False)


@pytest.mark.parametrize(
    "field, attribute",
    [(StatusField.FULLSCREEN, "fullscreen"),
     (StatusField.IDLE, "idle"),
     (StatusField.RUNNING, "running")],
)
def test_set_changes_only_one_field(field, attribute):
    tracker = StatusTracker()
    tracker.set(field, True)
    status = tracker.get()
    assert getattr(status, attribute) is True
    others = [a for a in ("fullscreen", "idle", "running") if a != attribute]
    assert all(getattr(status, a) is False for a in others)


def test_set_back_to_false():
    tracker = StatusTracker()
    tracker.set(StatusField.RUNNING, True)
    tracker.set(StatusField.RUNNING, False)
    assert tracker.get().running is False


def test_snapshot_is_not_changed_later():
    tracker = StatusTracker()
    before = tracker.get()
    tracker.set(StatusField.IDLE, True)
    assert before.idle is False
    assert tracker.get().idle is True


def test_invalid_field_raises():
    tracker = StatusTracker()
    with pytest.raises(ValueError):
        tracker.set("idle", True)


def test_version_message():
    assert version_message("1.4.1") == (
        "Dunst - A customizable and lightweight notification-daemon 1.4.1"
    )