"""
APIService - what the HTTP routes call.

Turns MoveRequests into engine Actions, runs them through the session's
GameLoop and renders the resulting GameState as pydantic responses.
No FastAPI imports here; app.py owns status codes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .schemas import (
    # Requests
    CreateSessionRequest,
    MoveRequest,
    # Responses
    SessionResponse,
    GameStateResponse,
    MoveResponse,
    ErrorResponse,
    # Shared
    BoardSchema,
    CardSchema,
    HeroSchema,
    PendingChoiceSchema,
    PlayerSchema,
    # Enums
    ErrorCode,
    SessionStatus,
)
from ..catalog import ALL_HEROES
from ..engine_core.action import Action, ActionPayload, ActionType
from ..engine_core.choices import peek_current
from ..session import GameLoop, Session, SessionManager, SessionState

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    One SessionManager plus a GameLoop per live session.

        service = APIService()
        created = service.create_session(CreateSessionRequest(hero_ids=["solo_hustler"]))
        service.submit_move(created.session_id, MoveRequest(action_type="end_turn"))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    # Game loops per session
    _game_loops: dict[str, GameLoop] = field(default_factory=dict)

    def list_heroes(self) -> list[HeroSchema]:
        return [HeroSchema.model_validate(hero) for hero in ALL_HEROES]

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """
        Create a new game session.

        Raises:
            ValueError: unknown hero id
        """
        session = self.session_manager.create_session(
            hero_ids=request.hero_ids,
            random_seed=request.random_seed,
        )
        self._game_loops[session.session_id] = GameLoop(session)
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        """
        Get session status.
        """
        session = self.session_manager.get_session(session_id)
        if not session:
            return _session_not_found(session_id)
        return self._session_to_response(session)

    def get_game_state(self, session_id: str) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session or session.game_state is None:
            return _session_not_found(session_id)
        return self._game_state_to_response(session)

    def submit_move(self, session_id: str, request: MoveRequest) -> MoveResponse | ErrorResponse:
        """
        Apply one move for a player (the current player by default).

        Engine rejections come back as ErrorResponse(INVALID_MOVE) with the
        engine's error code under details.
        """
        session = self.session_manager.get_session(session_id)
        game_loop = self._game_loops.get(session_id)
        if not session or not game_loop or session.game_state is None:
            return _session_not_found(session_id)

        player_id = request.player_id or session.game_state.current_player
        action = Action(
            action_type=ActionType(request.action_type.value),
            payload=ActionPayload(player_id=player_id, index=request.index),
        )
        result = game_loop.submit(action)
        if not result.success:
            logger.info("Session %s rejected %s: %s", session_id, action.describe(), result.errors)
            return ErrorResponse(
                error="; ".join(result.errors),
                error_code=ErrorCode.INVALID_MOVE,
                details={"engine_error_code": result.error_code},
            )

        return MoveResponse(
            session_id=session_id,
            success=True,
            status=self._status(session),
            changes=result.changes,
            pending_choice=self._choice_to_schema(result.pending_choice, session),
            game_state=self._game_state_to_response(session),
        )

    def end_session(self, session_id: str, reason: str = "user_ended") -> bool:
        """End a session."""
        self._game_loops.pop(session_id, None)
        session = self.session_manager.end_session(session_id, reason)
        return session is not None

    def list_sessions(self) -> list[str]:
        """List active session IDs."""
        return self.session_manager.list_active_sessions()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _status(self, session: Session) -> SessionStatus:
        if session.state == SessionState.ABANDONED:
            return SessionStatus.ABANDONED
        game_state = session.game_state
        if session.state == SessionState.GAME_OVER or (game_state and game_state.game_over):
            return SessionStatus.GAME_OVER
        if game_state and game_state.active_player.pending_choices:
            return SessionStatus.WAITING_CHOICE
        if session.state == SessionState.CREATED:
            return SessionStatus.CREATED
        return SessionStatus.ACTIVE

    def _session_to_response(self, session: Session) -> SessionResponse:
        return SessionResponse(
            session_id=session.session_id,
            status=self._status(session),
            hero_ids=session.hero_ids,
            random_seed=session.random_seed,
            created_at=session.created_at,
            game_state=(
                self._game_state_to_response(session)
                if session.game_state else None
            ),
        )

    def _game_state_to_response(self, session: Session) -> GameStateResponse:
        state = session.game_state
        players = []
        for player_id in state.play_order:
            player = state.players[player_id]
            players.append(PlayerSchema(
                player_id=player.player_id,
                hero=player.hero,
                is_current_turn=player_id == state.current_player,
                capital=player.capital,
                revenue=player.revenue,
                hero_ability_used=player.hero_ability_used,
                hand=[_card_to_schema(card) for card in player.hand],
                deck_size=len(player.deck),
                board=BoardSchema(
                    tools=[_card_to_schema(card) for card in player.board.tools],
                    products=[_card_to_schema(card) for card in player.board.products],
                    employees=[_card_to_schema(card) for card in player.board.employees],
                ),
                pending_choice=self._choice_to_schema(peek_current(player), session, player),
            ))

        return GameStateResponse(
            session_id=session.session_id,
            turn=state.turn,
            current_player=state.current_player,
            game_over=state.game_over,
            winner=state.winner,
            players=players,
            game_log=list(state.game_log),
        )

    def _choice_to_schema(self, choice, session: Session, player=None) -> PendingChoiceSchema | None:
        if choice is None:
            return None
        if player is None:
            player = session.game_state.active_player
        return PendingChoiceSchema(
            choice_type=choice.choice_type.value,
            effect=choice.effect,
            prompt=choice.prompt,
            options=list(choice.options),
            cards=[_card_to_schema(card) for card in choice.cards],
            allow_finish=choice.allow_finish,
            queue_length=len(player.pending_choices),
        )


def _session_not_found(session_id: str) -> ErrorResponse:
    return ErrorResponse(
        error=f"No session {session_id}",
        error_code=ErrorCode.SESSION_NOT_FOUND,
    )


def _card_to_schema(card) -> CardSchema:
    return CardSchema(
        card_id=card.card_id,
        instance_id=card.instance_id,
        name=card.name,
        cost=card.cost,
        card_type=card.card_type.value,
        text=card.text,
        keywords=list(card.keywords),
        effect=card.effect,
        inventory=card.inventory,
        revenue_per_sale=card.revenue_per_sale,
        appeal=card.appeal,
        is_active=card.is_active,
        overhead_cost=card.overhead_cost,
    )
