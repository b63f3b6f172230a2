"""Shaft-o-meter: a 0-5 scale of how lucky a member's draws have been.

0 = unluckiest, 5 = luckiest. The score combines two standard scores
against the attending population:

* the member's draft percentile (lower is better), and
* the member's average draft position (lower is better).

Deviations are measured as mean minus value, so both come out positive
when the member drew *better* than the mean. Their average is added to the
centre of the scale, pushing lucky members towards 5 and unlucky members
towards 0.
"""

import logging
import math
from typing import Sequence

from src.draft_luck.config import LUCK_SCORE_CENTER, LUCK_SCORE_MAX, LUCK_SCORE_MIN
from src.draft_luck.models import RawMemberStatistics
from src.draft_luck.stats_engine import get_member_deviation

logger = logging.getLogger(__name__)


def clamp_number(num: float, minimum: float, maximum: float) -> float:
    """Limit *num* to the closed range ``[minimum, maximum]``."""
    return max(min(num, maximum), minimum)


def combine_deviations(percentile_deviation: float, position_deviation: float) -> int:
    """Turn two member deviations into a bounded shaft-o-meter score.

    Formula::

        combined = (percentile_deviation + position_deviation) / 2
        score = clamp(ceil(2.5 + combined), 0, 5)
    """
    combined = (percentile_deviation + position_deviation) / 2
    return int(
        clamp_number(
            math.ceil(LUCK_SCORE_CENTER + combined), LUCK_SCORE_MIN, LUCK_SCORE_MAX
        )
    )


def get_shaft_o_meter_score(
    raw_stats: RawMemberStatistics,
    all_percentiles: Sequence[float],
    all_average_positions: Sequence[float],
) -> int:
    """Score a single attending member against the whole population.

    The member's own values are expected to be part of both populations.

    Raises:
        ValueError: if *raw_stats* has no derived values (member never
            attended a draft).
    """
    if raw_stats.draft_percentile is None or raw_stats.average_draft_position is None:
        raise ValueError(
            f"Member {raw_stats.id!r} has not attended any drafts; "
            "no shaft-o-meter score can be computed"
        )

    percentile_deviation = get_member_deviation(
        raw_stats.draft_percentile, all_percentiles
    ).member_deviation
    position_deviation = get_member_deviation(
        raw_stats.average_draft_position, all_average_positions
    ).member_deviation

    score = combine_deviations(percentile_deviation, position_deviation)

    logger.debug(
        "Shaft-o-meter %s: percentile dev=%.3f, position dev=%.3f -> %d",
        raw_stats.id, percentile_deviation, position_deviation, score,
    )
    return score
