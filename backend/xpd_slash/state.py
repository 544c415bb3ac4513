"""Application State — process-wide handles shared by every request.

Invariants:
    - Built once in the lifespan; never recreated per request
    - Frozen: request handling reads it, nothing mutates it

Design Decisions:
    - Stored on app.state and injected with a FastAPI dependency, so tests can
      swap in an AppState backed by SQLite and a fake notifier
"""

from dataclasses import dataclass

from fastapi import Request
from nacl.signing import VerifyKey

from xpd_slash.config import Settings
from xpd_slash.infrastructure.database import DatabaseSessionManager
from xpd_slash.infrastructure.discord_client import FollowupNotifier


@dataclass(frozen=True)
class AppState:
    settings: Settings
    verify_key: VerifyKey
    db: DatabaseSessionManager
    notifier: FollowupNotifier


def get_app_state(request: Request) -> AppState:
    """FastAPI dependency: the AppState installed by the lifespan."""
    return request.app.state.xpd
