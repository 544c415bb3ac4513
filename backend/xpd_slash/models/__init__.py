"""ORM Models — SQLAlchemy declarative models for persisted leveling data.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every row is scoped by guild: values from different guilds are never compared

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / alembic
"""

from xpd_slash.models.level import ExperienceRecord  # noqa: F401
from xpd_slash.models.guild_config import GuildConfigRecord  # noqa: F401
from xpd_slash.models.custom_card import CustomCardRecord  # noqa: F401
