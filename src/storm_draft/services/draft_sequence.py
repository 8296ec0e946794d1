"""Storm League draft sequence.

16 turns across 3 phases, 3 bans and 5 picks per team:
- Phase 1: Opening bans + first picks (turns 0-4)
- Phase 2: Middle bans + flex picks (turns 5-9)
- Phase 3: Final bans + last picks (turns 10-15)
"""

from storm_draft.models.draft import DraftAction, DraftTurn, Team

_R, _B = Team.RED, Team.BLUE
_BAN, _PICK = DraftAction.BAN, DraftAction.PICK

DRAFT_SEQUENCE: tuple[DraftTurn, ...] = (
    # Phase 1: Opening
    DraftTurn(_R, _BAN, phase=1, number=1, turn_index=0),
    DraftTurn(_B, _BAN, phase=1, number=1, turn_index=1),
    DraftTurn(_B, _PICK, phase=1, number=1, turn_index=2, pick_slot=0),
    DraftTurn(_R, _PICK, phase=1, number=1, turn_index=3, pick_slot=0),
    DraftTurn(_R, _PICK, phase=1, number=2, turn_index=4, pick_slot=1),
    # Phase 2: Middle
    DraftTurn(_B, _BAN, phase=2, number=2, turn_index=5),
    DraftTurn(_R, _BAN, phase=2, number=2, turn_index=6),
    DraftTurn(_R, _PICK, phase=2, number=3, turn_index=7, pick_slot=2),
    DraftTurn(_B, _PICK, phase=2, number=2, turn_index=8, pick_slot=1),
    DraftTurn(_B, _PICK, phase=2, number=3, turn_index=9, pick_slot=2),
    # Phase 3: Final
    DraftTurn(_R, _BAN, phase=3, number=3, turn_index=10),
    DraftTurn(_B, _BAN, phase=3, number=3, turn_index=11),
    DraftTurn(_B, _PICK, phase=3, number=4, turn_index=12, pick_slot=3),
    DraftTurn(_R, _PICK, phase=3, number=4, turn_index=13, pick_slot=3),
    DraftTurn(_R, _PICK, phase=3, number=5, turn_index=14, pick_slot=4),
    DraftTurn(_B, _PICK, phase=3, number=5, turn_index=15, pick_slot=4),
)

TOTAL_TURNS = len(DRAFT_SEQUENCE)
PICKS_PER_TEAM = 5

PHASE_NAMES = {1: "Opening", 2: "Middle", 3: "Final"}


def get_turn(turn_index: int) -> DraftTurn | None:
    """Turn at the given index, None when out of range (draft complete)."""
    if turn_index < 0 or turn_index >= TOTAL_TURNS:
        return None
    return DRAFT_SEQUENCE[turn_index]


def get_next_turn(turn_index: int) -> DraftTurn | None:
    return get_turn(turn_index + 1)


def is_draft_complete(turn_index: int) -> bool:
    return turn_index >= TOTAL_TURNS


def get_phase_name(phase: int) -> str:
    return PHASE_NAMES[phase]


def ban_turns(team: Team) -> list[DraftTurn]:
    return [t for t in DRAFT_SEQUENCE if t.team is team and t.action is DraftAction.BAN]


def pick_turns(team: Team) -> list[DraftTurn]:
    return [t for t in DRAFT_SEQUENCE if t.team is team and t.action is DraftAction.PICK]


def describe_turn(turn: DraftTurn, our_team: Team) -> str:
    """Human-readable turn label, e.g. "YOUR BAN #1" or "OPPONENT PICK #2"."""
    team_label = "YOUR" if turn.team is our_team else "OPPONENT"
    return f"{team_label} {turn.action.value.upper()} #{turn.number}"


def serialize_turn(turn: DraftTurn | None, our_team: Team | None = None) -> dict | None:
    """JSON-friendly view of a turn."""
    if turn is None:
        return None
    data = {
        "turn_index": turn.turn_index,
        "team": turn.team.value,
        "action": turn.action.value,
        "phase": turn.phase,
        "phase_name": get_phase_name(turn.phase),
        "number": turn.number,
        "pick_slot": turn.pick_slot,
    }
    if our_team is not None:
        data["is_our_turn"] = turn.team is our_team
        data["description"] = describe_turn(turn, our_team)
    return data
