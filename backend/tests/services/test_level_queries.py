"""Level Queries — experience lookup and rank counting against the levels table.

Tests cover:
    - Missing row → None, and zero-XP stats with rank after everyone who has XP
    - Rank counts only strictly greater XP in the same guild
    - Ties share a rank
    - Other guilds never affect rank
"""

from xpd_slash.core.domain_types import GuildId, UserId, UserStats
from xpd_slash.services.level_queries import (
    count_ranked_above,
    get_experience,
    get_user_stats,
)

GUILD = GuildId(1)
OTHER_GUILD = GuildId(2)


async def test_missing_row_returns_none(test_db):
    assert await get_experience(test_db, UserId(1), GUILD) is None


async def test_stored_xp_returned(test_db, seed_levels):
    await seed_levels((1, GUILD, 340))
    assert await get_experience(test_db, UserId(1), GUILD) == 340


async def test_rank_is_one_plus_strictly_higher(test_db, seed_levels):
    await seed_levels((1, GUILD, 500), (2, GUILD, 300), (3, GUILD, 100))
    assert await get_user_stats(test_db, UserId(2), GUILD) == UserStats(xp=300, rank=2)
    assert await get_user_stats(test_db, UserId(1), GUILD) == UserStats(xp=500, rank=1)


async def test_ties_share_rank(test_db, seed_levels):
    await seed_levels((1, GUILD, 500), (2, GUILD, 300), (3, GUILD, 300))
    assert (await get_user_stats(test_db, UserId(2), GUILD)).rank == 2
    assert (await get_user_stats(test_db, UserId(3), GUILD)).rank == 2


async def test_other_guilds_ignored(test_db, seed_levels):
    await seed_levels((1, OTHER_GUILD, 10_000), (2, GUILD, 50))
    assert await count_ranked_above(test_db, GUILD, 50) == 0
    assert (await get_user_stats(test_db, UserId(2), GUILD)).rank == 1


async def test_unranked_user_counts_everyone_with_xp(test_db, seed_levels):
    await seed_levels((1, GUILD, 10), (2, GUILD, 20), (3, GUILD, 0))
    stats = await get_user_stats(test_db, UserId(99), GUILD)
    assert stats == UserStats(xp=0, rank=3)


async def test_same_user_separate_per_guild(test_db, seed_levels):
    await seed_levels((1, GUILD, 100), (1, OTHER_GUILD, 900))
    assert await get_experience(test_db, UserId(1), GUILD) == 100
    assert await get_experience(test_db, UserId(1), OTHER_GUILD) == 900
