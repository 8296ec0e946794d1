"""Models for API draft sessions."""

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storm_draft.services.draft_controller import DraftController


@dataclass
class DraftSession:
    """State for an active draft session."""

    session_id: str
    controller: "DraftController"
    map_name: str | None = None
    battletags: list[str] = field(default_factory=list)
    created_at: float = field(default_factory=time.time)
    last_access: float = field(default_factory=time.time)
