"""Lightweight data models shared by the simulation, the host and the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class GameState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class MovementMode(Enum):
    KEYS = "keys"      # held direction keys give a velocity
    SEEK = "seek"      # pointer sets a point the avatar walks to


class HazardKind(Enum):
    LINEAR = "linear"
    AREA_EFFECT = "area_effect"


class AreaPhase(Enum):
    WARNING = "warning"
    ACTIVE = "active"


class HazardShape(Enum):
    ORB = "orb"
    BOLT = "bolt"


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class InputSnapshot:
    """
    Normalized input for exactly one simulation update.

    Attributes
    ----------
    held_keys : frozenset[str]
        Lowercase identifiers of the keys held this frame.
    pointer_x, pointer_y : float
        Pointer position in arena coordinates.
    pointer_down : bool
        Whether the primary pointer button is held.
    primary_click : bool
        True only on the frame the primary button went down.
    """
    held_keys: frozenset[str] = frozenset()
    pointer_x: float = 0.0
    pointer_y: float = 0.0
    pointer_down: bool = False
    primary_click: bool = False


@dataclass(frozen=True)
class AvatarView:
    x: float
    y: float
    width: float
    height: float
    health_ratio: float
    dashing: bool
    color: tuple[int, int, int]


@dataclass(frozen=True)
class HazardView:
    kind: HazardKind
    x: float
    y: float
    radius: float
    color: tuple[int, int, int]
    alpha: float = 1.0
    shape: HazardShape = HazardShape.ORB
    orientation: float = 0.0           # degrees, angle of the velocity vector
    length: float = 0.0
    phase: AreaPhase | None = None


@dataclass(frozen=True)
class AbilityView:
    key: str
    ready: bool
    remaining: float                   # seconds, rounded to 0.1


@dataclass(frozen=True)
class TextCommand:
    text: str
    x: float
    y: float
    size: int
    color: tuple[int, int, int]
    align: str = "center"


@dataclass(frozen=True)
class RenderFrame:
    """Everything the renderer needs to paint one frame."""
    state: GameState
    texts: list[TextCommand] = field(default_factory=list)
    avatar: AvatarView | None = None
    hazards: list[HazardView] = field(default_factory=list)
    abilities: list[AbilityView] = field(default_factory=list)
    score: int = 0
    high_score: int = 0
