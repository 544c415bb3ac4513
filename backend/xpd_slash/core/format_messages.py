"""Level Message Formatting — pure functions composing the rank reply text.

Invariants:
    - All functions are pure (no IO, no async, no DB)
    - Zero experience never prints a rank, level, or percentage
    - Self and other phrasing differ only in pronoun/name

Design Decisions:
    - Extracted from the level handler (shell) to core (pure) for testability
      without shell dependencies (SQLAlchemy, FastAPI)
"""

from xpd_slash.core.domain_types import MemberDisplayInfo, UserStats
from xpd_slash.core.leveling import LevelInfo

NOT_RANKED_SELF = "You aren't ranked yet, because you haven't sent any messages!"


def format_level_message(
    target: MemberDisplayInfo, is_self: bool, stats: UserStats,
) -> str:
    """Compose the rank reply for `target` as seen by the invoker."""
    if stats.xp == 0:
        if is_self:
            return NOT_RANKED_SELF
        return (
            f"{target.display_name} isn't ranked yet, "
            "because they haven't sent any messages!"
        )
    info = LevelInfo.from_xp(stats.xp)
    if is_self:
        return (
            f"You are level {info.level} (rank #{stats.rank}), "
            f"and are {info.percentage}% of the way to level {info.next_level}."
        )
    return (
        f"{target.display_name} is level {info.level} (rank #{stats.rank}), "
        f"and is {info.percentage}% of the way to level {info.next_level}."
    )


def format_error_message(text: str) -> str:
    """Prefix for user-visible failures delivered through the follow-up."""
    return f"Oops! {text}"
