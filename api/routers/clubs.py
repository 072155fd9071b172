"""Club configuration API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from typing import List

from api.dependencies import get_club_store
from api.schemas import ClubSetResponse, DistanceBandResponse
from caddie.club_config import (
    MIN_CONFIGURED_CLUBS,
    DistanceBand,
    apply_band,
    apply_manual_entry,
    configured_count,
    distance_bands,
    is_usable,
    range_warnings,
)
from database.exceptions import NotFoundError
from database.store import ClubSetStore, load_club_set_or_default
from models import Club, ClubSet

router = APIRouter()


class SaveClubsRequest(BaseModel):
    clubs: List[Club]


class BandRequest(BaseModel):
    min_yards: int = Field(..., ge=0)
    max_yards: int = Field(..., gt=0)


class ManualEntryRequest(BaseModel):
    min_distance: float = Field(..., ge=0)
    max_distance: float = Field(..., ge=0)
    average_distance: float = Field(..., ge=0)


def describe(clubs: ClubSet) -> ClubSetResponse:
    return ClubSetResponse(
        clubs=clubs.clubs,
        usable=is_usable(clubs),
        configured=configured_count(clubs),
        warnings=range_warnings(clubs),
    )


@router.get("/bands", response_model=List[DistanceBandResponse])
async def get_bands():
    """Quick-select distance ranges."""
    return [
        DistanceBandResponse(
            label=b.label, min_yards=b.min_yards,
            max_yards=b.max_yards, average_yards=b.midpoint,
        )
        for b in distance_bands()
    ]


@router.get("/{user_id}", response_model=ClubSetResponse)
async def get_clubs(user_id: str, store: ClubSetStore = Depends(get_club_store)):
    return describe(await load_club_set_or_default(store, user_id))


@router.put("/{user_id}", response_model=ClubSetResponse)
async def save_clubs(
    user_id: str,
    req: SaveClubsRequest,
    store: ClubSetStore = Depends(get_club_store),
):
    """Save the active club set. Rejected until enough clubs are configured."""
    clubs = ClubSet(clubs=req.clubs)
    if not is_usable(clubs):
        raise HTTPException(
            422, f"Configure at least {MIN_CONFIGURED_CLUBS} clubs before saving"
        )
    return describe(await store.save_clubs(user_id, clubs))


@router.delete("/{user_id}", status_code=204)
async def delete_clubs(user_id: str, store: ClubSetStore = Depends(get_club_store)):
    try:
        await store.delete_clubs(user_id)
    except NotFoundError:
        raise HTTPException(404, "No clubs saved for this user")


async def _edit_club(store: ClubSetStore, user_id: str, index: int, edit) -> ClubSetResponse:
    """Apply `edit` to one club. Edits are kept even while the set is under-configured."""
    clubs = await load_club_set_or_default(store, user_id)
    if not 0 <= index < len(clubs):
        raise HTTPException(404, f"No club at position {index}")
    updated = clubs.replace(index, edit(clubs[index]))
    return describe(await store.save_clubs(user_id, updated))


@router.post("/{user_id}/{index}/band", response_model=ClubSetResponse)
async def select_band(
    user_id: str,
    index: int,
    req: BandRequest,
    store: ClubSetStore = Depends(get_club_store),
):
    """Set one club's range from a 10-yard band."""
    band = DistanceBand(min_yards=req.min_yards, max_yards=req.max_yards)
    return await _edit_club(store, user_id, index, lambda club: apply_band(club, band))


@router.post("/{user_id}/{index}/manual", response_model=ClubSetResponse)
async def manual_entry(
    user_id: str,
    index: int,
    req: ManualEntryRequest,
    store: ClubSetStore = Depends(get_club_store),
):
    """Set one club's distances as typed. Inconsistent ranges come back as warnings."""
    return await _edit_club(
        store, user_id, index,
        lambda club: apply_manual_entry(
            club, req.min_distance, req.max_distance, req.average_distance
        ),
    )
