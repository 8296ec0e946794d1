"""REST endpoints for live draft sessions."""

import logging
import threading
import time
import uuid
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from storm_draft.config import settings
from storm_draft.exceptions import DraftError
from storm_draft.models.draft import DraftAction, Team
from storm_draft.models.session import DraftSession
from storm_draft.services.draft_controller import DraftController
from storm_draft.services.draft_sequence import serialize_turn
from storm_draft.services.draft_service import DraftService
from storm_draft.services.synergy_service import SynergyService
from storm_draft.utils.hero_roles import HeroCatalog
from storm_draft.utils.role_normalizer import sort_by_role

logger = logging.getLogger(__name__)

SESSION_CLEANUP_INTERVAL_SECONDS = 60

router = APIRouter(prefix="/api/draft", tags=["draft"])

# In-memory session storage with thread-safe access
_sessions: dict[str, DraftSession] = {}
_sessions_lock = threading.Lock()
_session_locks: dict[str, threading.Lock] = {}
_cleanup_lock = threading.Lock()
_last_cleanup = 0.0


def _is_session_expired(session: DraftSession, now: float) -> bool:
    return (now - session.last_access) >= settings.session_ttl_seconds


def _touch_session(session: DraftSession, now: float) -> None:
    session.last_access = now


def _prune_expired_sessions(now: float | None = None) -> None:
    """Remove expired sessions opportunistically."""
    global _last_cleanup
    now = now or time.time()
    if now - _last_cleanup < SESSION_CLEANUP_INTERVAL_SECONDS:
        return

    with _cleanup_lock:
        if now - _last_cleanup < SESSION_CLEANUP_INTERVAL_SECONDS:
            return

        with _sessions_lock:
            expired = [
                session_id
                for session_id, session in _sessions.items()
                if not (_session_locks.get(session_id) and _session_locks[session_id].locked())
                and _is_session_expired(session, now)
            ]
            for session_id in expired:
                _sessions.pop(session_id, None)
                _session_locks.pop(session_id, None)

        if expired:
            logger.info(f"Pruned {len(expired)} expired draft sessions")
        _last_cleanup = now


def _get_session_with_lock(session_id: str) -> tuple[DraftSession, threading.Lock]:
    """Fetch session and its lock, creating the lock if needed."""
    _prune_expired_sessions()
    with _sessions_lock:
        session = _sessions.get(session_id)
        if not session:
            raise HTTPException(status_code=404, detail="Session not found")
        lock = _session_locks.get(session_id)
        if lock is None:
            lock = threading.Lock()
            _session_locks[session_id] = lock

    return session, lock


def _enter_session(session: DraftSession) -> None:
    """Reject expired sessions and refresh the access time. Call under the session lock."""
    now = time.time()
    if _is_session_expired(session, now):
        raise HTTPException(status_code=404, detail="Session expired")
    _touch_session(session, now)


def _get_or_create_services(request: Request) -> tuple[HeroCatalog, DraftService]:
    """Get or create services from app state."""
    if not hasattr(request.app.state, "draft_service"):
        knowledge_dir = getattr(request.app.state, "knowledge_dir", None)
        hero_catalog = HeroCatalog(knowledge_dir)
        request.app.state.hero_catalog = hero_catalog
        request.app.state.draft_service = DraftService(
            hero_catalog=hero_catalog,
            synergy_service=SynergyService(knowledge_dir),
            repository=getattr(request.app.state, "repository", None),
        )

    return request.app.state.hero_catalog, request.app.state.draft_service


class CreateSessionRequest(BaseModel):
    our_team: Team = Team.BLUE
    map_name: Optional[str] = None
    battletags: list[str] = Field(default_factory=list)


class SelectionRequest(BaseModel):
    hero: str
    team: Optional[Team] = None
    action: Optional[DraftAction] = None


class AssignmentRequest(BaseModel):
    turn_index: int
    battletag: str


class UpdateSessionRequest(BaseModel):
    map_name: Optional[str] = None
    battletags: Optional[list[str]] = None


def _serialize_session(session: DraftSession, draft_service: DraftService) -> dict:
    controller = session.controller
    our_team = controller.our_team
    state = controller.state
    return {
        "session_id": session.session_id,
        "our_team": our_team.value,
        "map_name": session.map_name,
        "battletags": session.battletags,
        "current_turn_index": state.current_turn_index,
        "current_turn": serialize_turn(controller.current_turn(), our_team),
        "is_our_turn": controller.is_our_turn(),
        "is_complete": controller.is_complete(),
        "blue_picks": controller.picks_for_team(Team.BLUE),
        "red_picks": controller.picks_for_team(Team.RED),
        "blue_bans": controller.bans_for_team(Team.BLUE),
        "red_bans": controller.bans_for_team(Team.RED),
        "history": [
            {
                "turn": serialize_turn(entry.turn),
                "hero": entry.hero,
                "timestamp": entry.timestamp,
            }
            for entry in state.history
        ],
        "player_assignments": {str(k): v for k, v in state.player_assignments.items()},
        "our_team_evaluation": draft_service.evaluate_team(controller.our_picks()),
        "enemy_team_evaluation": draft_service.evaluate_team(controller.enemy_picks()),
    }


@router.get("/heroes")
async def list_heroes(request: Request):
    """All known heroes with their roles."""
    hero_catalog, _ = _get_or_create_services(request)
    heroes = [{"name": h.name, "role": h.role.value} for h in hero_catalog.identities()]
    return {"heroes": sort_by_role(heroes)}


@router.get("/maps")
async def list_maps(request: Request):
    """Maps with statistics, empty when no database is configured."""
    _, draft_service = _get_or_create_services(request)
    if draft_service.repository is None:
        return {"maps": []}
    return {"maps": draft_service.repository.list_maps()}


@router.post("/sessions", status_code=201)
async def create_session(request: Request, body: CreateSessionRequest):
    """Create a new draft session."""
    _prune_expired_sessions()
    _, draft_service = _get_or_create_services(request)

    session_id = f"draft_{uuid.uuid4().hex[:12]}"
    session = DraftSession(
        session_id=session_id,
        controller=DraftController(body.our_team),
        map_name=body.map_name,
        battletags=[b.strip() for b in body.battletags if b.strip()],
    )

    with _sessions_lock:
        _sessions[session_id] = session
        _session_locks[session_id] = threading.Lock()

    logger.info(f"Created draft session {session_id} ({body.our_team.value}, map={body.map_name})")
    return _serialize_session(session, draft_service)


@router.get("/sessions/{session_id}")
async def get_session(request: Request, session_id: str):
    """Current draft state, turn and team evaluations."""
    _, draft_service = _get_or_create_services(request)
    session, lock = _get_session_with_lock(session_id)
    with lock:
        _enter_session(session)
        return _serialize_session(session, draft_service)


@router.patch("/sessions/{session_id}")
async def update_session(request: Request, session_id: str, body: UpdateSessionRequest):
    """Change the selected map or tracked players."""
    _, draft_service = _get_or_create_services(request)
    session, lock = _get_session_with_lock(session_id)
    with lock:
        _enter_session(session)
        if body.map_name is not None:
            session.map_name = body.map_name or None
        if body.battletags is not None:
            session.battletags = [b.strip() for b in body.battletags if b.strip()]
        return _serialize_session(session, draft_service)


@router.delete("/sessions/{session_id}")
async def delete_session(session_id: str):
    """End a draft session."""
    with _sessions_lock:
        if _sessions.pop(session_id, None) is None:
            raise HTTPException(status_code=404, detail="Session not found")
        _session_locks.pop(session_id, None)
    return {"status": "deleted", "session_id": session_id}


@router.post("/sessions/{session_id}/selections")
async def apply_selection(request: Request, session_id: str, body: SelectionRequest):
    """Apply a pick or ban for the current turn."""
    hero_catalog, draft_service = _get_or_create_services(request)
    session, lock = _get_session_with_lock(session_id)
    with lock:
        _enter_session(session)
        hero = body.hero.strip()
        if not hero_catalog.is_known(hero):
            raise HTTPException(status_code=400, detail=f"Unknown hero '{hero}'")
        try:
            session.controller.apply_selection(hero, team=body.team, action=body.action)
        except DraftError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _serialize_session(session, draft_service)


@router.post("/sessions/{session_id}/undo")
async def undo_selection(request: Request, session_id: str):
    """Revert the most recent selection."""
    _, draft_service = _get_or_create_services(request)
    session, lock = _get_session_with_lock(session_id)
    with lock:
        _enter_session(session)
        try:
            session.controller.undo()
        except DraftError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _serialize_session(session, draft_service)


@router.post("/sessions/{session_id}/reset")
async def reset_draft(request: Request, session_id: str):
    """Clear all selections and return to the first turn."""
    _, draft_service = _get_or_create_services(request)
    session, lock = _get_session_with_lock(session_id)
    with lock:
        _enter_session(session)
        session.controller.reset()
        return _serialize_session(session, draft_service)


@router.post("/sessions/{session_id}/assignments")
async def assign_player(request: Request, session_id: str, body: AssignmentRequest):
    """Record which tracked player took one of our picks."""
    _, draft_service = _get_or_create_services(request)
    session, lock = _get_session_with_lock(session_id)
    with lock:
        _enter_session(session)
        battletag = body.battletag.strip()
        if battletag not in session.battletags:
            raise HTTPException(status_code=400, detail=f"{battletag} is not a tracked player")
        try:
            session.controller.assign_player(body.turn_index, battletag)
        except DraftError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _serialize_session(session, draft_service)


@router.get("/sessions/{session_id}/recommendations")
async def get_recommendations(request: Request, session_id: str, limit: Optional[int] = None):
    """Ranked hero recommendations for the current turn."""
    _, draft_service = _get_or_create_services(request)
    if limit is None:
        limit = settings.recommendation_limit
    if limit < 1:
        raise HTTPException(status_code=400, detail="limit must be positive")

    session, lock = _get_session_with_lock(session_id)
    with lock:
        _enter_session(session)
        controller = session.controller
        recommendations = draft_service.get_recommendations(
            controller, session.map_name, session.battletags, limit=limit
        )
        return {
            "session_id": session_id,
            "current_turn": serialize_turn(controller.current_turn(), controller.our_team),
            "map_name": session.map_name,
            "recommendations": [r.to_dict() for r in recommendations],
        }
