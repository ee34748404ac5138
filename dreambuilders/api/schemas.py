"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between HTTP clients and the engine.
Every route declares its response model so the OpenAPI document is complete.

Error Codes:
- SESSION_NOT_FOUND: unknown or already ended session id
- INVALID_HERO: Unknown hero id in a create-session request
- INVALID_MOVE: The engine rejected the move
- VALIDATION_ERROR: Malformed request
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Lifecycle of a session as reported over HTTP."""
    CREATED = "created"
    ACTIVE = "active"
    WAITING_CHOICE = "waiting_choice"
    GAME_OVER = "game_over"
    ABANDONED = "abandoned"


class MoveType(str, Enum):
    """Moves accepted by POST /moves. Mirrors engine ActionType values."""
    PLAY_CARD = "play_card"
    USE_HERO_ABILITY = "use_hero_ability"
    TRIGGER_MIDNIGHT_OIL_DISCARD = "trigger_midnight_oil_discard"
    TRIGGER_FAST_PIVOT_DESTROY = "trigger_fast_pivot_destroy"
    MAKE_CHOICE = "make_choice"
    SELL_PRODUCT = "sell_product"
    END_TURN = "end_turn"


class ErrorCode(str, Enum):
    """Machine-readable error_code values."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_HERO = "INVALID_HERO"
    INVALID_MOVE = "INVALID_MOVE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class CardSchema(BaseModel):
    """A card instance as the client sees it."""
    card_id: str
    instance_id: str = ""
    name: str
    cost: int
    card_type: str
    text: str = ""
    keywords: list[str] = Field(default_factory=list)
    effect: Optional[str] = None
    inventory: Optional[int] = None
    revenue_per_sale: Optional[int] = None
    appeal: int = 0
    is_active: bool = True
    overhead_cost: Optional[int] = None

    model_config = {"from_attributes": True}


class BoardSchema(BaseModel):
    """The three board zones."""
    tools: list[CardSchema] = Field(default_factory=list)
    products: list[CardSchema] = Field(default_factory=list)
    employees: list[CardSchema] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class PendingChoiceSchema(BaseModel):
    """The front of a player's pending-choice queue."""
    choice_type: str
    effect: str
    prompt: str = ""
    options: list[str] = Field(default_factory=list)
    cards: list[CardSchema] = Field(default_factory=list)
    allow_finish: bool = False
    queue_length: int = 1


class PlayerSchema(BaseModel):
    """One seat: resources, zones and its front pending choice."""
    player_id: str
    hero: str
    is_current_turn: bool = False
    capital: int = 0
    revenue: int = 0
    hero_ability_used: bool = False
    hand: list[CardSchema] = Field(default_factory=list)
    deck_size: int = 0
    board: BoardSchema = Field(default_factory=BoardSchema)
    pending_choice: Optional[PendingChoiceSchema] = None


class HeroPowerSchema(BaseModel):
    name: str
    description: str
    cost: int

    model_config = {"from_attributes": True}


class HeroSchema(BaseModel):
    """A playable hero."""
    hero_id: str
    name: str
    color: str
    power: HeroPowerSchema
    flavor_text: str = ""
    playstyle: str = ""

    model_config = {"from_attributes": True}


# =============================================================================
# Requests
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Heroes (one per seat) and an optional seed."""
    hero_ids: list[str] = Field(
        ..., min_length=1, description="One hero per seat, e.g. ['solo_hustler']"
    )
    random_seed: Optional[int] = Field(None, description="Seed for deterministic shuffling")


class MoveRequest(BaseModel):
    """A single move for the current player."""
    action_type: MoveType
    index: Optional[int] = Field(
        None, description="Hand index, board Product index or choice index (-1 finishes a multi-select)"
    )
    player_id: Optional[str] = Field(None, description="Defaults to the current player")


# =============================================================================
# Responses
# =============================================================================

class ErrorResponse(BaseModel):
    """Body of every non-2xx reply."""
    error: str
    error_code: ErrorCode
    details: Optional[dict] = None
    api_version: str = "v1"


class GameStateResponse(BaseModel):
    """Current game state."""
    session_id: str
    turn: int
    current_player: str
    game_over: bool = False
    winner: bool = False
    players: list[PlayerSchema]
    game_log: list[str] = Field(default_factory=list)
    api_version: str = "v1"


class SessionResponse(BaseModel):
    """Response after creating or fetching a session."""
    session_id: str
    status: SessionStatus
    hero_ids: list[str]
    random_seed: Optional[int] = None
    created_at: float
    game_state: Optional[GameStateResponse] = None
    api_version: str = "v1"


class MoveResponse(BaseModel):
    """Response after a move."""
    session_id: str
    success: bool
    status: SessionStatus
    changes: list[str] = Field(default_factory=list)
    pending_choice: Optional[PendingChoiceSchema] = None
    game_state: Optional[GameStateResponse] = None
    api_version: str = "v1"


class HeroListResponse(BaseModel):
    heroes: list[HeroSchema]


class SessionListResponse(BaseModel):
    """Ids of sessions still in play."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Acknowledges a DELETE."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
