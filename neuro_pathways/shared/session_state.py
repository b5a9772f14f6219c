"""
Neuro Pathways - Session State Management

Holds wizard sessions in memory. A session owns the caller's InputState,
the active section and the last answered field. Sessions idle for longer
than SESSION_TTL_MINUTES are dropped on the next access.
"""

import uuid
import asyncio
from datetime import datetime, timedelta, timezone
from typing import Optional

from neuro_pathways.engines.evt_pathway_engine.field_resolver import Section
from neuro_pathways.engines.evt_pathway_engine.state_updates import reset_state
from neuro_pathways import config


class SessionManager:
    """
    Handles EVT pathway sessions stored in process memory.
    Structure:
        sessions[session_id] -> {
            "session_id", "created_at", "updated_at",
            "state": InputState, "active_section": Section, "last_field": str | None,
        }
    """

    def __init__(self, ttl_minutes: int = None):
        self.sessions = {}  # session_id -> session_state
        self.locks = {}     # Concurrency locks
        self.ttl = timedelta(minutes=ttl_minutes if ttl_minutes is not None else config.SESSION_TTL_MINUTES)

    def create_session(self) -> str:
        session_id = str(uuid.uuid4())
        now = datetime.now(timezone.utc)
        self.sessions[session_id] = {
            "session_id": session_id,
            "created_at": now.isoformat(),
            "updated_at": now,
            "state": reset_state(),
            "active_section": Section.TRIAGE,
            "last_field": None,
        }
        print(f"  [SessionManager] Created session {session_id}")
        return session_id

    def get_lock(self, session_id: str) -> asyncio.Lock:
        """Get or create a per-session lock for safe concurrent access."""
        if session_id not in self.locks:
            self.locks[session_id] = asyncio.Lock()
        return self.locks[session_id]

    def _is_expired(self, session_state: dict) -> bool:
        return datetime.now(timezone.utc) - session_state["updated_at"] > self.ttl

    def get_session(self, session_id: str) -> Optional[dict]:
        """Session dict, or None when missing or expired."""
        session_state = self.sessions.get(session_id)
        if session_state is None:
            return None
        if self._is_expired(session_state):
            print(f"  [SessionManager] Session {session_id} expired")
            self.end_session(session_id)
            return None
        return session_state

    def touch(self, session_state: dict):
        session_state["updated_at"] = datetime.now(timezone.utc)

    def end_session(self, session_id: str):
        self.sessions.pop(session_id, None)
        self.locks.pop(session_id, None)

    def purge_expired(self) -> int:
        expired = [sid for sid, s in self.sessions.items() if self._is_expired(s)]
        for sid in expired:
            self.end_session(sid)
        if expired:
            print(f"  [SessionManager] Purged {len(expired)} expired sessions")
        return len(expired)
