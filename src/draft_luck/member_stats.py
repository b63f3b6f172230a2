"""Member draft statistics: the public entry point.

Ties together aggregation, population statistics and the shaft-o-meter to
produce one :class:`MemberStatistics` per member, in roster order.
"""

import logging
from typing import Iterable, List

import pandas as pd

from src.draft_luck.aggregation import (
    MemberStatsAggregator,
    calculate_average_draft_position,
)
from src.draft_luck.config import PERCENT_SCALE
from src.draft_luck.ingestion import DraftLike, MemberLike, parse_history
from src.draft_luck.luck_score import get_shaft_o_meter_score
from src.draft_luck.models import MemberStatistics
from src.draft_luck.rounding import format_percentage

logger = logging.getLogger(__name__)

# Output record keys mapped to display column names
_FRAME_COLUMNS = {
    "id": "Id",
    "name": "Name",
    "draftsAttended": "Drafts",
    "averageDraftPosition": "Avg_Position",
    "averagePercentilePerDraft": "Avg_Percentile",
    "shaftOMeter": "Shaft_O_Meter",
}


def get_member_stats(
    members: Iterable[MemberLike],
    drafts: Iterable[DraftLike],
) -> List[MemberStatistics]:
    """Compute draft statistics for every member.

    Args:
        members: Roster of :class:`Member` objects or ``{"id", "name"}``
            mappings.
        drafts: Draft history as :class:`DraftEvent` objects or mappings
            with an ``attendees`` list.

    Returns:
        One :class:`MemberStatistics` per member, in the order given.
        Members who never attended get ``None`` for the average position,
        percentile and shaft-o-meter.
    """
    members, drafts = parse_history(members, drafts)

    aggregator = MemberStatsAggregator()
    raw_stats, population = aggregator.aggregate(members, drafts)

    results: List[MemberStatistics] = []
    for raw in raw_stats:
        stats = MemberStatistics(
            id=raw.id,
            name=raw.name,
            drafts_attended=raw.drafts_attended,
        )

        if raw.has_attended:
            stats.average_draft_position = calculate_average_draft_position(raw)
            # A high percentile reads as good news, so invert it for display.
            stats.average_percentile_per_draft = format_percentage(
                PERCENT_SCALE - raw.draft_percentile
            )
            stats.shaft_o_meter = get_shaft_o_meter_score(
                raw, population.percentiles, population.average_positions
            )

        results.append(stats)

    logger.info("Computed draft statistics for %d members", len(results))
    return results


def stats_to_frame(stats: Iterable[MemberStatistics]) -> pd.DataFrame:
    """Tabulate member statistics, with "N/A" where nothing applies."""
    records = [s.to_dict() for s in stats]
    df = pd.DataFrame(records, columns=list(_FRAME_COLUMNS))
    return df.rename(columns=_FRAME_COLUMNS)
