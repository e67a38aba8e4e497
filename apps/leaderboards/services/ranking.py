"""
Ranking service - orders group members by their tracking stats.

Members with data (total_units > 0) come first, by cost per unit
ascending, then efficiency score descending. Members without data follow
in join order. Exact ties keep their input order (sorted() is stable).
NaN values sort after every real number and never raise.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence
from uuid import UUID

from django.conf import settings
from django.db import connections

from apps.leaderboards.models import LeaderboardMembership
from apps.tracking.services.statistics import UserStats, get_user_stats

from .membership_management import list_members

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberWithStats:
    membership: LeaderboardMembership
    stats: UserStats


@dataclass(frozen=True)
class Ranking:
    rank: int
    member: MemberWithStats


def _is_nan(value) -> bool:
    # NaN is the only value not equal to itself
    return value != value


def _has_data(member: MemberWithStats) -> bool:
    units = member.stats.total_units
    return not _is_nan(units) and units > 0


def _performance_key(member: MemberWithStats):
    cost = member.stats.cost_per_unit
    score = member.stats.efficiency_score
    cost_nan = _is_nan(cost)
    score_nan = _is_nan(score)
    return (
        cost_nan,
        0 if cost_nan else cost,
        score_nan,
        0 if score_nan else -score,
    )


def calculate_rankings(members: Iterable[MemberWithStats]) -> List[Ranking]:
    """
    Rank members. Pure; the input is not modified.

    Example:
        >>> rankings = calculate_rankings([alice, bob, carol])
        >>> [r.rank for r in rankings]
        [1, 2, 3]
    """
    members = list(members)
    with_data = sorted((m for m in members if _has_data(m)), key=_performance_key)
    without_data = sorted(
        (m for m in members if not _has_data(m)),
        key=lambda m: m.membership.joined_at,
    )
    return [
        Ranking(rank=index + 1, member=member)
        for index, member in enumerate(with_data + without_data)
    ]


def _stats_in_worker(user_id: UUID) -> UserStats:
    try:
        return get_user_stats(user_id=user_id)
    finally:
        # Worker threads open their own connections
        connections.close_all()


def _collect_stats_inline(user_ids: Sequence[UUID], timeout: float) -> List[UserStats]:
    deadline = time.monotonic() + timeout
    stats = []
    for user_id in user_ids:
        stats.append(get_user_stats(user_id=user_id))
        if time.monotonic() > deadline:
            raise FuturesTimeoutError()
    return stats


def _collect_stats(user_ids: Sequence[UUID], timeout: float) -> List[UserStats]:
    """Fetch stats for every user, in order, within one overall deadline."""
    max_workers = getattr(settings, 'LEADERBOARD_STATS_MAX_WORKERS', 8)
    if max_workers <= 1 or len(user_ids) <= 1:
        return _collect_stats_inline(user_ids, timeout)

    executor = ThreadPoolExecutor(
        max_workers=min(max_workers, len(user_ids)),
        thread_name_prefix='leaderboard-stats',
    )
    try:
        return list(executor.map(_stats_in_worker, user_ids, timeout=timeout))
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


def get_group_rankings(*, group_id: UUID, timeout: Optional[float] = None) -> List[Ranking]:
    """
    Rank every member of a group by their current stats.

    Stats are fetched concurrently. Never raises: an unknown group, a
    storage failure or a missed deadline all yield an empty list.

    Args:
        group_id: UUID of the group
        timeout: Overall deadline in seconds for fetching stats
            (default: settings.LEADERBOARD_RANKING_TIMEOUT)

    Returns:
        List of Ranking, rank 1 first
    """
    result = list_members(group_id=group_id)
    if not result.ok:
        logger.warning("Cannot rank group %s: %s", group_id, result.error)
        return []

    memberships = result.data
    if timeout is None:
        timeout = getattr(settings, 'LEADERBOARD_RANKING_TIMEOUT', 10)

    try:
        stats = _collect_stats([m.user_id for m in memberships], timeout)
    except FuturesTimeoutError:
        logger.warning("Ranking group %s timed out after %ss", group_id, timeout)
        return []
    except Exception:
        logger.exception("Failed to collect stats for group %s", group_id)
        return []

    return calculate_rankings(
        MemberWithStats(membership=membership, stats=member_stats)
        for membership, member_stats in zip(memberships, stats)
    )
