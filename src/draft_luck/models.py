"""Data models for draft luck statistics.

Inputs (``Member``, ``DraftEvent``) come from whatever storage the host
application uses; everything else is built fresh for each call to
:func:`src.draft_luck.member_stats.get_member_stats` and thrown away after.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from src.draft_luck.config import NOT_APPLICABLE


@dataclass(frozen=True)
class Member:
    """A house member taking part in draws."""

    id: str
    name: str


@dataclass(frozen=True)
class AttendanceEntry:
    """One attendee's slot in a single draft."""

    position: int  # Zero-based, 0 is the best draw
    user_id: str


@dataclass(frozen=True)
class DraftEvent:
    """A single draft and the positions handed out in it."""

    attendees: List[AttendanceEntry] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.attendees)

    def find_attendee(self, member_id: str) -> Optional[AttendanceEntry]:
        """Return the attendance record for *member_id*, or None if absent."""
        for attendee in self.attendees:
            if attendee.user_id == member_id:
                return attendee
        return None


@dataclass
class RawMemberStatistics:
    """Accumulated totals for one member before scoring."""

    id: str
    name: str
    drafts_attended: int = 0
    draft_position_total: int = 0
    total_picks_in_drafts_attended: int = 0
    draft_percentile: Optional[float] = None
    average_draft_position: Optional[float] = None

    @property
    def has_attended(self) -> bool:
        return self.drafts_attended > 0


@dataclass
class PopulationArrays:
    """Percentiles and average positions of every member who attended."""

    percentiles: List[float] = field(default_factory=list)
    average_positions: List[float] = field(default_factory=list)

    def add(self, percentile: float, average_position: float):
        self.percentiles.append(percentile)
        self.average_positions.append(average_position)

    def __len__(self) -> int:
        return len(self.percentiles)


@dataclass(frozen=True)
class MemberDeviation:
    """Standard deviation of a population and one member's deviation from it."""

    standard_deviation: float
    member_deviation: float


@dataclass
class MemberStatistics:
    """Final per-member statistics.

    The three derived fields are ``None`` when the member attended no
    drafts; :meth:`to_dict` renders them as ``"N/A"``.
    """

    id: str
    name: str
    drafts_attended: int
    average_draft_position: Optional[float] = None
    average_percentile_per_draft: Optional[str] = None
    shaft_o_meter: Optional[int] = None

    @property
    def is_applicable(self) -> bool:
        return self.drafts_attended > 0

    def to_dict(self) -> Dict[str, Union[str, int, float]]:
        """Convert to the camelCase record consumed by the web front end."""

        def _or_na(value):
            return NOT_APPLICABLE if value is None else value

        return {
            "id": self.id,
            "name": self.name,
            "draftsAttended": self.drafts_attended,
            "averageDraftPosition": _or_na(self.average_draft_position),
            "averagePercentilePerDraft": _or_na(self.average_percentile_per_draft),
            "shaftOMeter": _or_na(self.shaft_o_meter),
        }
