"""Round-in-progress API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from typing import List, Optional

from analytics.stats import round_summary
from api.dependencies import get_club_store, get_rounds
from api.schemas import (
    PlaceResponse,
    RecommendationResponse,
    RoundResponse,
    RoundStateResponse,
    ScorecardResponse,
)
from api.sessions import RoundRegistry
from caddie.catalog import DEFAULT_HOLES
from caddie.club_config import MIN_CONFIGURED_CLUBS, is_usable
from caddie.recommender import suggest_for_state
from caddie.scorecard import score_label
from caddie.session import RoundSession
from database.store import ClubSetStore, load_club_set_or_default
from models import Coordinate, Hole, InvalidModeRequest, PlacementMode

logger = logging.getLogger(__name__)

router = APIRouter()


class StartRoundRequest(BaseModel):
    holes: Optional[List[Hole]] = None


class ModeRequest(BaseModel):
    mode: PlacementMode


class PlaceRequest(BaseModel):
    coordinate: Coordinate


def summarize_round(session: RoundSession) -> RoundResponse:
    """Project a RoundSession into the response for its active hole."""
    state = session.state
    return RoundResponse(
        id=session.id,
        current_index=session.current_index,
        hole=session.current_hole,
        state=RoundStateResponse(
            tee=state.tee,
            flag=state.flag,
            shots=list(state.shots),
            mode=state.mode,
            can_add_shot=state.can_add_shot,
        ),
        score=score_label(session.strokes_for(session.current_hole), session.current_hole.par),
    )


def _get_session(rounds: RoundRegistry, round_id: str) -> RoundSession:
    session = rounds.get(round_id)
    if session is None:
        raise HTTPException(404, "Round not found")
    return session


@router.post("", response_model=RoundResponse, status_code=201)
async def start_round(
    req: Optional[StartRoundRequest] = None,
    rounds: RoundRegistry = Depends(get_rounds),
):
    holes = req.holes if req and req.holes else DEFAULT_HOLES
    session = rounds.create(list(holes))
    logger.info("Started round %s over %d holes", session.id, len(session.holes))
    return summarize_round(session)


@router.get("/{round_id}", response_model=RoundResponse)
async def get_round(round_id: str, rounds: RoundRegistry = Depends(get_rounds)):
    return summarize_round(_get_session(rounds, round_id))


@router.delete("/{round_id}", status_code=204)
async def delete_round(round_id: str, rounds: RoundRegistry = Depends(get_rounds)):
    if not rounds.delete(round_id):
        raise HTTPException(404, "Round not found")


@router.post("/{round_id}/mode", response_model=RoundResponse)
async def request_mode(
    round_id: str,
    req: ModeRequest,
    rounds: RoundRegistry = Depends(get_rounds),
):
    """Arm the next map tap (tee, flag, shot) or disarm with none."""
    session = _get_session(rounds, round_id)
    try:
        session.state.request_mode(req.mode)
    except InvalidModeRequest as e:
        raise HTTPException(409, str(e))
    return summarize_round(session)


@router.post("/{round_id}/place", response_model=PlaceResponse)
async def place(
    round_id: str,
    req: PlaceRequest,
    rounds: RoundRegistry = Depends(get_rounds),
):
    """Map tap. Ignored (placed=false) when no mode is armed."""
    session = _get_session(rounds, round_id)
    placed = session.state.place(req.coordinate)
    return PlaceResponse(placed=placed, round=summarize_round(session))


@router.post("/{round_id}/shots", response_model=RoundResponse)
async def add_shot(
    round_id: str,
    req: PlaceRequest,
    rounds: RoundRegistry = Depends(get_rounds),
):
    session = _get_session(rounds, round_id)
    session.state.add_shot(req.coordinate)
    return summarize_round(session)


@router.post("/{round_id}/reset", response_model=RoundResponse)
async def reset_hole(round_id: str, rounds: RoundRegistry = Depends(get_rounds)):
    session = _get_session(rounds, round_id)
    session.reset_hole()
    return summarize_round(session)


@router.post("/{round_id}/holes/{index}", response_model=RoundResponse)
async def select_hole(
    round_id: str,
    index: int,
    rounds: RoundRegistry = Depends(get_rounds),
):
    """Move to another hole; its placements start empty."""
    session = _get_session(rounds, round_id)
    try:
        session.select_hole(index)
    except IndexError as e:
        raise HTTPException(404, str(e))
    return summarize_round(session)


@router.get("/{round_id}/recommendation", response_model=RecommendationResponse)
async def get_recommendation(
    round_id: str,
    user_id: str = Query(...),
    rounds: RoundRegistry = Depends(get_rounds),
    store: ClubSetStore = Depends(get_club_store),
):
    session = _get_session(rounds, round_id)
    clubs = await load_club_set_or_default(store, user_id)
    if not is_usable(clubs):
        raise HTTPException(
            409, f"Configure your clubs: at least {MIN_CONFIGURED_CLUBS} need distances"
        )
    suggestion = suggest_for_state(session.state, clubs)
    if suggestion is None:
        raise HTTPException(409, "Set the tee and flag first")
    return RecommendationResponse(
        distance_yards=round(suggestion.distance_yards, 1),
        club=suggestion.club,
    )


@router.get("/{round_id}/scorecard", response_model=ScorecardResponse)
async def get_scorecard(round_id: str, rounds: RoundRegistry = Depends(get_rounds)):
    session = _get_session(rounds, round_id)
    summary = round_summary(session)
    return ScorecardResponse(
        rows=session.scorecard(),
        holes_played=summary["holes_played"],
        total_strokes=summary["total_strokes"],
        to_par=summary["to_par"],
    )
