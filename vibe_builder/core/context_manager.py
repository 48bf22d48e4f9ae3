"""
Session Context Manager

Holds per-session context and the commands run in each session.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from ..utils.logger import get_logger

logger = get_logger(__name__)


class SessionContextManager:
    """In-memory session store"""

    def __init__(self, history_limit: int = 50):
        self.history_limit = history_limit
        self.sessions: Dict[str, Dict[str, Any]] = {}

    def get_session(self, session_id: str, initial_context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Return the session, creating it on first use."""
        session = self.sessions.get(session_id)
        if session is None:
            session = {
                "session_id": session_id,
                "created_at": datetime.now().isoformat(),
                "context": dict(initial_context or {}),
                "commands": [],
            }
            self.sessions[session_id] = session
        return session

    def update_context(self, session_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        session = self.get_session(session_id)
        session["context"].update(updates)
        return session["context"]

    def add_command(self, session_id: str, command: str, status: str) -> None:
        session = self.get_session(session_id)
        session["commands"].append({
            "command": command,
            "status": status,
            "timestamp": datetime.now().isoformat(),
        })
        if len(session["commands"]) > self.history_limit:
            session["commands"] = session["commands"][-self.history_limit:]

    def get_history(self, session_id: str, limit: int = 10) -> List[Dict[str, Any]]:
        session = self.sessions.get(session_id)
        if session is None:
            return []
        return session["commands"][-limit:]

    def reset(self) -> None:
        """Drop every session."""
        logger.info(f"Resetting {len(self.sessions)} session(s)")
        self.sessions.clear()
