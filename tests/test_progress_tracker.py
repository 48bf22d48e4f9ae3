"""
Tests for the in-process progress tracker
"""

import logging

import pytest

from vibe_builder.core.progress_tracker import ProgressTracker


@pytest.fixture
def started(tracker):
    tracker.start_operation("op-1", {"name": "Build", "total_steps": 4})
    return tracker


class TestOperations:
    def test_start_operation(self, tracker):
        operation = tracker.start_operation("op-1", {"name": "Build", "total_steps": 4})

        assert operation["status"] == "running"
        assert operation["progress"] == 0.0
        assert tracker.get_operation_status("op-1")["is_active"] is True

    def test_defaults(self, tracker):
        operation = tracker.start_operation("op-2")
        assert operation["name"] == "Operation"
        assert operation["total_steps"] == 1

    def test_update_progress(self, started):
        started.update_progress("op-1", 2, "halfway")

        operation = started.get_operation_status("op-1")
        assert operation["current_step"] == 2
        assert operation["progress"] == 50.0
        assert operation["details"][-1]["message"] == "halfway"

    def test_progress_is_capped(self, started):
        started.update_progress("op-1", 6, "beyond the total")
        assert started.get_operation_status("op-1")["progress"] == 100.0

    def test_detail_limit(self):
        tracker = ProgressTracker(detail_limit=3)
        tracker.start_operation("op", {"total_steps": 10})
        for step in range(1, 8):
            tracker.update_progress("op", step, f"step {step}")

        details = tracker.get_operation_status("op")["details"]
        assert [d["step"] for d in details] == [5, 6, 7]

    def test_unknown_operation_is_ignored(self, tracker, caplog):
        with caplog.at_level(logging.WARNING, logger="vibe_builder"):
            tracker.update_progress("missing", 1, "nothing")
        assert "Operation not found" in caplog.text

    def test_complete_operation(self, started):
        started.complete_operation("op-1", {"message": "done"})

        assert started.get_active_operations() == []
        operation = started.get_operation_status("op-1")
        assert operation["is_active"] is False
        assert operation["status"] == "completed"
        assert operation["result"] == {"message": "done"}
        assert operation["duration"] >= 0

    def test_fail_operation(self, started, caplog):
        with caplog.at_level(logging.ERROR, logger="vibe_builder"):
            started.fail_operation("op-1", RuntimeError("exploded"))

        operation = started.get_completed_operations(1)[0]
        assert operation["status"] == "failed"
        assert operation["error"] == "exploded"
        assert "exploded" in caplog.text

    def test_completed_history_is_bounded(self):
        tracker = ProgressTracker(completed_history=2)
        for i in range(3):
            tracker.start_operation(f"op-{i}")
            tracker.complete_operation(f"op-{i}")

        assert [op["id"] for op in tracker.get_completed_operations(10)] == ["op-1", "op-2"]

    def test_completed_limit(self, tracker):
        for i in range(3):
            tracker.start_operation(f"op-{i}")
            tracker.complete_operation(f"op-{i}")

        assert [op["id"] for op in tracker.get_completed_operations(2)] == ["op-1", "op-2"]
        assert tracker.get_completed_operations(0) == []


class TestListeners:
    def test_operation_and_global_listeners(self, tracker):
        own, every = [], []
        tracker.on_progress("op-1", lambda update, op_id: own.append(update["status"]))
        tracker.on_progress("all", lambda update, op_id: every.append(op_id))

        tracker.start_operation("op-1")
        tracker.start_operation("op-2")
        tracker.complete_operation("op-1")

        assert own == ["started", "completed"]
        assert every == ["op-1", "op-2", "op-1"]

    def test_off_progress(self, tracker):
        seen = []
        listener = lambda update, op_id: seen.append(update)  # noqa: E731
        tracker.on_progress("all", listener)
        tracker.off_progress("all", listener)

        tracker.start_operation("op-1")
        assert seen == []

    def test_failing_listener_does_not_break_tracking(self, tracker, caplog):
        def broken(update, op_id):
            raise ValueError("listener bug")

        tracker.on_progress("all", broken)
        with caplog.at_level(logging.ERROR, logger="vibe_builder"):
            tracker.start_operation("op-1")
            tracker.update_progress("op-1", 1, "still works")

        assert tracker.get_operation_status("op-1")["current_step"] == 1
        assert "listener bug" in caplog.text

    def test_progress_reporter(self, started):
        report = started.create_progress_reporter("op-1")
        report(3, "almost", {"files": 2})

        detail = started.get_operation_status("op-1")["details"][-1]
        assert detail["step"] == 3
        assert detail["details"] == {"files": 2}


class TestStats:
    def test_stats(self, tracker):
        tracker.start_operation("ok")
        tracker.complete_operation("ok")
        tracker.start_operation("bad")
        tracker.fail_operation("bad", "error")
        tracker.start_operation("running")

        stats = tracker.get_stats()
        assert stats["active_operations"] == 1
        assert stats["completed_operations"] == 2
        assert stats["total_operations"] == 3
        assert stats["success_rate"] == 0.5
        assert stats["longest_running_operation"]["id"] == "running"
        assert stats["recent_activity"]["failed_operations"] == 1

    def test_empty_stats(self, tracker):
        stats = tracker.get_stats()
        assert stats["success_rate"] == 0
        assert stats["longest_running_operation"] is None

    def test_cleanup(self, tracker):
        tracker.start_operation("old")
        tracker.complete_operation("old")
        tracker.completed_operations[0]["end_time"] = 0

        assert tracker.cleanup() == 1
        assert tracker.get_completed_operations() == []

    def test_health(self, tracker):
        tracker.start_operation("op")
        assert tracker.get_health_status()["status"] == "healthy"

        tracker.active_operations["op"]["start_time"] = 0
        health = tracker.get_health_status()
        assert health["status"] == "warning"
        assert health["stuck_operations"] == 1

    def test_export_and_reset(self, started):
        exported = started.export_data()
        assert len(exported["active_operations"]) == 1
        assert started.export_data("op-1")["id"] == "op-1"

        started.reset()
        assert started.get_stats()["total_operations"] == 0
