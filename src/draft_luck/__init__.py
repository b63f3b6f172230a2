from src.draft_luck.ingestion import HistoryIngester, IngestionError
from src.draft_luck.member_stats import get_member_stats, stats_to_frame
from src.draft_luck.models import (
    AttendanceEntry,
    DraftEvent,
    Member,
    MemberStatistics,
)

__all__ = [
    "AttendanceEntry",
    "DraftEvent",
    "HistoryIngester",
    "IngestionError",
    "Member",
    "MemberStatistics",
    "get_member_stats",
    "stats_to_frame",
]
