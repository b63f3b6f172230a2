"""Build draft luck models from plain data.

The host application hands over members and drafts however its storage
returns them. Two attendee shapes are accepted:

- Flat: ``{"position": 0, "userId": "abc"}`` (``user_id`` also works)
- Nested: ``{"position": 0, "user": {"id": "abc"}}``

Already-built model objects pass through untouched.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Tuple, Union

from src.draft_luck.models import AttendanceEntry, DraftEvent, Member

logger = logging.getLogger(__name__)

MemberLike = Union[Member, Mapping[str, Any]]
DraftLike = Union[DraftEvent, Mapping[str, Any], Iterable[Any]]


class IngestionError(Exception):
    """Raised when member or draft data cannot be parsed."""


def _require(record: Mapping[str, Any], key: str, kind: str):
    """Fetch *key* from *record*, raising IngestionError if missing."""
    try:
        return record[key]
    except (KeyError, TypeError):
        raise IngestionError(f"{kind} record is missing {key!r}: {record!r}") from None


def parse_member(record: MemberLike) -> Member:
    """Convert a ``{"id", "name"}`` mapping into a :class:`Member`."""
    if isinstance(record, Member):
        return record
    return Member(
        id=str(_require(record, "id", "Member")),
        name=str(_require(record, "name", "Member")),
    )


def parse_attendee(record: Union[AttendanceEntry, Mapping[str, Any]]) -> AttendanceEntry:
    """Convert a flat or nested attendee mapping into an :class:`AttendanceEntry`."""
    if isinstance(record, AttendanceEntry):
        return record

    position = _require(record, "position", "Attendee")
    # bool is an int subclass but never a valid position
    if isinstance(position, bool) or not isinstance(position, int):
        raise IngestionError(f"Attendee position must be an integer, got {position!r}")

    if "userId" in record:
        user_id = record["userId"]
    elif "user_id" in record:
        user_id = record["user_id"]
    else:
        user = _require(record, "user", "Attendee")
        user_id = _require(user, "id", "Attendee user")

    return AttendanceEntry(position=position, user_id=str(user_id))


def parse_draft(record: DraftLike) -> DraftEvent:
    """Convert a draft mapping (or a bare attendee list) into a :class:`DraftEvent`."""
    if isinstance(record, DraftEvent):
        return record
    if isinstance(record, Mapping):
        attendees = _require(record, "attendees", "Draft")
    else:
        attendees = record
    return DraftEvent(attendees=[parse_attendee(a) for a in attendees])


def parse_history(
    members: Iterable[MemberLike],
    drafts: Iterable[DraftLike],
) -> Tuple[List[Member], List[DraftEvent]]:
    """Parse a full member roster and draft history."""
    return (
        [parse_member(m) for m in members],
        [parse_draft(d) for d in drafts],
    )


class HistoryIngester:
    """Reads a JSON draft history export.

    Expected layout::

        {
            "members": [{"id": "...", "name": "..."}, ...],
            "drafts": [{"attendees": [{"position": 0, "userId": "..."}]}, ...]
        }
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def read(self) -> Tuple[List[Member], List[DraftEvent]]:
        """Load and parse the history file.

        Raises:
            FileNotFoundError: if the file does not exist.
            IngestionError: if the file is not valid JSON or is missing
                the ``members``/``drafts`` keys.
        """
        if not self.path.exists():
            raise FileNotFoundError(f"History file not found: {self.path}")

        logger.info("Reading draft history: %s", self.path.name)
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise IngestionError(f"Corrupt history file {self.path}: {e}") from e

        if not isinstance(data, Mapping):
            raise IngestionError(
                f"History file {self.path} must contain a JSON object"
            )

        members, drafts = parse_history(
            _require(data, "members", "History"),
            _require(data, "drafts", "History"),
        )
        logger.info("Loaded %d members and %d drafts", len(members), len(drafts))
        return members, drafts
