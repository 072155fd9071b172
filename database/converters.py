"""Conversion between stored club records and the ClubSet model.

Stored data is a JSON list of {name, minDistance, maxDistance,
averageDistance}. Anything else reads back as absent, never as an error.
"""

import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from models import ClubSet

logger = logging.getLogger(__name__)


def club_set_from_json(raw: Any) -> Optional[ClubSet]:
    """Stored payload (JSON text or already-decoded list) -> ClubSet.

    Returns None for missing or malformed data.
    """
    if raw is None:
        return None
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except ValueError as e:
            logger.warning("Ignoring unreadable club data: %s", e)
            return None
    if not isinstance(raw, list):
        logger.warning("Ignoring club data of type %s, expected a list", type(raw).__name__)
        return None
    try:
        return ClubSet.from_records(raw)
    except (ValidationError, TypeError) as e:
        logger.warning("Ignoring invalid club data: %s", e)
        return None


def club_set_to_json(clubs: ClubSet) -> str:
    """ClubSet -> JSON text for storage."""
    return json.dumps(clubs.to_records())


# ================================================================
# Row <-> Model
# ================================================================

def club_set_from_row(row) -> Optional[ClubSet]:
    """caddie.club_sets row -> ClubSet (None if the stored clubs are bad)."""
    return club_set_from_json(row["clubs"])


def club_set_to_row(user_id: str, clubs: ClubSet) -> dict:
    """ClubSet -> dict for caddie.club_sets UPSERT."""
    return {
        "user_id": user_id,
        "clubs": club_set_to_json(clubs),
    }
