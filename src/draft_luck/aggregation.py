"""Per-member draft totals and the attending population.

For every member the aggregator walks the whole draft history and sums up:

- drafts attended,
- 1-based draft positions (``position + 1``),
- the number of attendees in each attended draft.

From those totals it derives the member's average draft position and draft
percentile, and collects both into :class:`PopulationArrays` for scoring.
"""

import logging
from typing import List, Sequence, Tuple

from src.draft_luck.config import PERCENT_SCALE
from src.draft_luck.models import (
    DraftEvent,
    Member,
    PopulationArrays,
    RawMemberStatistics,
)
from src.draft_luck.rounding import decimal_scale, round_half_up, round_to_places

logger = logging.getLogger(__name__)


def calculate_average_draft_position(raw_stats: RawMemberStatistics) -> float:
    """Average 1-based draft position, rounded to ``ROUND_DECIMALS`` places."""
    return round_to_places(raw_stats.draft_position_total / raw_stats.drafts_attended)


def calculate_draft_percentile(raw_stats: RawMemberStatistics) -> float:
    """Cumulative draft percentile, rounded to ``ROUND_DECIMALS`` places. Lower is better.

    Formula::

        percentile = (position_total - 1) / total_picks_in_drafts_attended * 100

    ``position_total - 1`` is the zero-based rank for a single draft. Over
    several drafts it is an approximation, kept because published numbers
    already depend on it.
    """
    ratio = (
        (raw_stats.draft_position_total - 1)
        / raw_stats.total_picks_in_drafts_attended
    )
    scale = decimal_scale()
    return round_half_up(ratio * (PERCENT_SCALE * scale)) / scale


class MemberStatsAggregator:
    """Accumulates raw draft statistics for every member."""

    def aggregate_member(
        self,
        member: Member,
        drafts: Sequence[DraftEvent],
    ) -> RawMemberStatistics:
        """Sum *member*'s results across every draft in *drafts*.

        Drafts the member did not attend are ignored. A member who attended
        nothing gets zero totals and no derived values.
        """
        raw = RawMemberStatistics(id=member.id, name=member.name)

        for draft in drafts:
            attendance = draft.find_attendee(member.id)
            if attendance is None:
                continue

            raw.drafts_attended += 1
            raw.draft_position_total += attendance.position + 1
            raw.total_picks_in_drafts_attended += draft.size

        if raw.has_attended:
            raw.average_draft_position = calculate_average_draft_position(raw)
            raw.draft_percentile = calculate_draft_percentile(raw)

        return raw

    def aggregate(
        self,
        members: Sequence[Member],
        drafts: Sequence[DraftEvent],
    ) -> Tuple[List[RawMemberStatistics], PopulationArrays]:
        """Aggregate all members and collect the attending population.

        Returns:
            ``(raw_stats, population)`` where *raw_stats* follows the order
            of *members* and *population* only holds members who attended
            at least one draft.
        """
        population = PopulationArrays()
        raw_stats: List[RawMemberStatistics] = []

        for member in members:
            raw = self.aggregate_member(member, drafts)
            if raw.has_attended:
                population.add(raw.draft_percentile, raw.average_draft_position)
            else:
                logger.debug("Member %s attended no drafts", member.id)
            raw_stats.append(raw)

        logger.info(
            "Aggregated %d members over %d drafts (%d attending)",
            len(raw_stats), len(drafts), len(population),
        )
        return raw_stats, population
