from __future__ import annotations

import logging
import secrets
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class SessionRecord:
    user_id: int
    expires_at: float


class MemorySessionStore:
    """
    Login sessions held in process memory.

    Expired entries read as absent straight away; the sweep that actually
    drops them runs on access, at most once per ``check_period_seconds``.
    """

    def __init__(
        self,
        ttl_seconds: int = 86400,
        check_period_seconds: int = 86400,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.check_period_seconds = check_period_seconds
        self._clock = clock
        self._sessions: Dict[str, SessionRecord] = {}
        self._last_prune = clock()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, user_id: int) -> str:
        self._maybe_prune()
        sid = secrets.token_urlsafe(32)
        self._sessions[sid] = SessionRecord(user_id=user_id, expires_at=self._clock() + self.ttl_seconds)
        return sid

    def get(self, sid: str) -> Optional[int]:
        self._maybe_prune()
        record = self._sessions.get(sid)
        if record is None or record.expires_at <= self._clock():
            return None
        return record.user_id

    def destroy(self, sid: str) -> None:
        self._sessions.pop(sid, None)

    def prune(self) -> int:
        now = self._clock()
        expired = [sid for sid, record in self._sessions.items() if record.expires_at <= now]
        for sid in expired:
            del self._sessions[sid]
        self._last_prune = now
        if expired:
            logger.debug("Pruned %s expired sessions", len(expired))
        return len(expired)

    def _maybe_prune(self) -> None:
        if self._clock() - self._last_prune >= self.check_period_seconds:
            self.prune()
