"""Shared fixtures for the draft luck test suite."""

import pytest

from src.draft_luck.aggregation import MemberStatsAggregator
from src.draft_luck.models import AttendanceEntry, DraftEvent, Member


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

def _make_draft(*user_ids: str) -> DraftEvent:
    """Build a draft where *user_ids* drew positions 0, 1, 2, ... in order."""
    return DraftEvent(
        attendees=[
            AttendanceEntry(position=i, user_id=uid)
            for i, uid in enumerate(user_ids)
        ]
    )


@pytest.fixture
def aggregator():
    return MemberStatsAggregator()


@pytest.fixture
def house_members():
    """Four members; ``dana`` never shows up to a draft."""
    return [
        Member(id="alex", name="Alex"),
        Member(id="blair", name="Blair"),
        Member(id="casey", name="Casey"),
        Member(id="dana", name="Dana"),
    ]


@pytest.fixture
def draft_history():
    """Three drafts among alex, blair and casey.

    alex:  positions 0, 1, 0 -> total 1+2+1 = 4 over 3 drafts (8 picks)
    blair: positions 1, 0    -> total 2+1   = 3 over 2 drafts (6 picks)
    casey: positions 2, 2, 1 -> total 3+3+2 = 8 over 3 drafts (8 picks)
    """
    return [
        _make_draft("alex", "blair", "casey"),
        _make_draft("blair", "alex", "casey"),
        _make_draft("alex", "casey"),
    ]
