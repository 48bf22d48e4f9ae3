"""
Progress Tracker - Tracks long-running operations

Keeps active operations keyed by id and a bounded history of finished
ones (completed and failed). Listeners can subscribe to one operation id
or to "all"; a failing listener is logged and never breaks tracking.
"""

import time
from typing import Any, Callable, Dict, List, Optional

from ..config import Config
from ..utils.logger import get_logger

logger = get_logger(__name__)

ProgressCallback = Callable[[Dict[str, Any], str], None]

ALL_OPERATIONS = "all"
STUCK_AFTER_MS = 10 * 60 * 1000


def _now_ms() -> float:
    return time.time() * 1000


class ProgressTracker:
    """
    In-process progress tracker.

    Operations are plain dicts so they can be handed straight to the CLI
    or serialized.
    """

    def __init__(
        self,
        completed_history: Optional[int] = None,
        detail_limit: Optional[int] = None,
    ):
        self.completed_history = completed_history or Config.COMPLETED_HISTORY
        self.detail_limit = detail_limit or Config.PROGRESS_DETAIL_LIMIT
        self.active_operations: Dict[str, Dict[str, Any]] = {}
        self.completed_operations: List[Dict[str, Any]] = []
        self.callbacks: Dict[str, List[ProgressCallback]] = {}

    def start_operation(self, operation_id: str, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Start tracking a new operation.

        Args:
            operation_id: Unique operation identifier
            config: Optional name, description, total_steps and metadata

        Returns:
            The operation record
        """
        config = config or {}
        operation = {
            "id": operation_id,
            "name": config.get("name", "Operation"),
            "description": config.get("description", "Processing..."),
            "start_time": _now_ms(),
            "current_step": 0,
            "total_steps": config.get("total_steps") or 1,
            "status": "running",
            "progress": 0.0,
            "details": [],
            "metadata": config.get("metadata", {}),
        }
        self.active_operations[operation_id] = operation
        logger.debug(f"Started operation {operation_id} ({operation['name']})")

        self._emit(operation_id, {
            "step": 0,
            "message": f"Starting {operation['name']}...",
            "progress": 0.0,
            "status": "started",
        })
        return operation

    def update_progress(
        self,
        operation_id: str,
        step: int,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        operation = self.active_operations.get(operation_id)
        if operation is None:
            logger.warning(f"Operation not found: {operation_id}")
            return

        operation["current_step"] = step
        operation["progress"] = min(step / operation["total_steps"] * 100, 100.0)

        update = {
            "step": step,
            "message": message,
            "progress": operation["progress"],
            "status": "running",
            "timestamp": _now_ms(),
            "details": details or {},
        }
        operation["details"].append(update)
        if len(operation["details"]) > self.detail_limit:
            operation["details"] = operation["details"][-self.detail_limit:]

        logger.debug(f"[{operation_id}] step {step}: {message}")
        self._emit(operation_id, update)

    def complete_operation(self, operation_id: str, result: Optional[Dict[str, Any]] = None) -> None:
        operation = self.active_operations.get(operation_id)
        if operation is None:
            logger.warning(f"Operation not found: {operation_id}")
            return

        result = result or {}
        end_time = _now_ms()
        operation.update({
            "status": "completed",
            "progress": 100.0,
            "end_time": end_time,
            "duration": end_time - operation["start_time"],
            "result": result,
        })

        update = {
            "step": operation["total_steps"],
            "message": result.get("message") or f"{operation['name']} completed successfully",
            "progress": 100.0,
            "status": "completed",
            "timestamp": end_time,
            "duration": operation["duration"],
        }
        operation["details"].append(update)

        self._finish(operation_id, operation)
        self._emit(operation_id, update)

    def fail_operation(self, operation_id: str, error: Any) -> None:
        """Mark an operation failed; failed operations join the completed history."""
        operation = self.active_operations.get(operation_id)
        if operation is None:
            logger.warning(f"Operation not found: {operation_id}")
            return

        error_text = str(error)
        end_time = _now_ms()
        operation.update({
            "status": "failed",
            "end_time": end_time,
            "duration": end_time - operation["start_time"],
            "error": error_text,
        })

        update = {
            "step": operation["current_step"],
            "message": f"{operation['name']} failed: {error_text}",
            "progress": operation["progress"],
            "status": "failed",
            "timestamp": end_time,
            "error": error_text,
        }
        operation["details"].append(update)

        logger.error(f"Operation {operation_id} failed: {error_text}")
        self._finish(operation_id, operation)
        self._emit(operation_id, update)

    def _finish(self, operation_id: str, operation: Dict[str, Any]) -> None:
        self.completed_operations.append(operation)
        del self.active_operations[operation_id]
        if len(self.completed_operations) > self.completed_history:
            self.completed_operations = self.completed_operations[-self.completed_history:]

    def get_operation_status(self, operation_id: str) -> Optional[Dict[str, Any]]:
        operation = self.active_operations.get(operation_id)
        if operation is not None:
            return {**operation, "is_active": True}

        for operation in self.completed_operations:
            if operation["id"] == operation_id:
                return {**operation, "is_active": False}

        return None

    def get_active_operations(self) -> List[Dict[str, Any]]:
        return list(self.active_operations.values())

    def get_completed_operations(self, limit: int = 10) -> List[Dict[str, Any]]:
        """Most recent finished operations, oldest first."""
        if limit <= 0:
            return []
        return self.completed_operations[-limit:]

    # Listeners

    def on_progress(self, operation_id: str, callback: ProgressCallback) -> None:
        self.callbacks.setdefault(operation_id, []).append(callback)

    def off_progress(self, operation_id: str, callback: ProgressCallback) -> None:
        callbacks = self.callbacks.get(operation_id)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)

    def _emit(self, operation_id: str, update: Dict[str, Any]) -> None:
        listeners = list(self.callbacks.get(operation_id, [])) + list(self.callbacks.get(ALL_OPERATIONS, []))
        for callback in listeners:
            try:
                callback(update, operation_id)
            except Exception as e:
                logger.error(f"Progress callback error for {operation_id}: {e}")

    def create_progress_reporter(self, operation_id: str) -> Callable[..., None]:
        def report(step: int, message: str, details: Optional[Dict[str, Any]] = None) -> None:
            self.update_progress(operation_id, step, message, details)
        return report

    # Statistics

    def get_stats(self) -> Dict[str, Any]:
        active = self.get_active_operations()
        completed = self.completed_operations

        with_duration = [op for op in completed if op.get("duration")]
        average_duration = (
            sum(op["duration"] for op in with_duration) / len(with_duration)
            if with_duration else 0
        )
        successful = len([op for op in completed if op["status"] == "completed"])
        success_rate = successful / len(completed) if completed else 0

        return {
            "active_operations": len(active),
            "completed_operations": len(completed),
            "total_operations": len(active) + len(completed),
            "success_rate": success_rate,
            "average_duration": average_duration,
            "longest_running_operation": self.get_longest_running_operation(),
            "recent_activity": self.get_recent_activity(),
        }

    def get_longest_running_operation(self) -> Optional[Dict[str, Any]]:
        active = self.get_active_operations()
        if not active:
            return None
        return min(active, key=lambda op: op["start_time"])

    def get_recent_activity(self, time_window_ms: float = 60 * 60 * 1000) -> Dict[str, Any]:
        cutoff = _now_ms() - time_window_ms
        recent = [op for op in self.completed_operations if op.get("end_time", 0) > cutoff]

        return {
            "total_operations": len(recent),
            "successful_operations": len([op for op in recent if op["status"] == "completed"]),
            "failed_operations": len([op for op in recent if op["status"] == "failed"]),
            "average_duration": (
                sum(op.get("duration", 0) for op in recent) / len(recent) if recent else 0
            ),
        }

    def cleanup(self, max_age_ms: float = 24 * 60 * 60 * 1000) -> int:
        """Drop finished operations older than max_age_ms. Returns how many were dropped."""
        cutoff = _now_ms() - max_age_ms
        before = len(self.completed_operations)
        self.completed_operations = [op for op in self.completed_operations if op.get("end_time", 0) > cutoff]
        return before - len(self.completed_operations)

    def export_data(self, operation_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
        if operation_id:
            return self.get_operation_status(operation_id)

        return {
            "active_operations": self.get_active_operations(),
            "completed_operations": self.get_completed_operations(50),
            "stats": self.get_stats(),
            "export_timestamp": _now_ms(),
        }

    def get_health_status(self) -> Dict[str, Any]:
        now = _now_ms()
        stuck = [op for op in self.get_active_operations() if now - op["start_time"] > STUCK_AFTER_MS]

        return {
            "status": "healthy" if not stuck else "warning",
            "active_operations": len(self.active_operations),
            "stuck_operations": len(stuck),
            "callbacks_registered": sum(len(cbs) for cbs in self.callbacks.values()),
        }

    def reset(self) -> None:
        self.active_operations.clear()
        self.completed_operations = []
        self.callbacks.clear()
