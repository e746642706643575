"""Engine call results and dialogue event codes."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DialogueEvent(str, Enum):
    """Discrete dialogue codes; the text behind them lives in the dialogue book."""

    AMBIENT = "ambient"
    TERMINAL = "terminal"
    GAMBLE_WIN = "gamble_win"
    GAMBLE_LOSE = "gamble_lose"
    MINIGAME_WIN = "minigame_win"
    MINIGAME_LOSE = "minigame_lose"
    LITERACY_SUCCESS = "literacy_success"
    LITERACY_TOO_EARLY = "literacy_too_early"


class Rejection(str, Enum):
    """Why an action, purchase or toggle was not applied."""

    DEAD = "dead"
    NOT_READY = "not_ready"
    UNKNOWN_ID = "unknown_id"
    OUT_OF_STOCK = "out_of_stock"
    SECURITY = "security"
    TOO_EARLY = "too_early"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    EXACT_BALANCE_REQUIRED = "exact_balance_required"
    ALREADY_OWNED = "already_owned"
    PURSE_REQUIRED = "purse_required"
    NOT_OWNED = "not_owned"


class EngineResult(BaseModel):
    """Outcome of a player-initiated engine call."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    accepted: bool = Field(description="Whether the call took its effect")
    rejection: Optional[Rejection] = Field(default=None, description="Reason when not accepted")
    events: list[DialogueEvent] = Field(default_factory=list, description="Dialogue events to show")

    @classmethod
    def ok(cls, *events: DialogueEvent) -> "EngineResult":
        return cls(accepted=True, events=list(events))

    @classmethod
    def rejected(cls, reason: Rejection, *events: DialogueEvent) -> "EngineResult":
        return cls(accepted=False, rejection=reason, events=list(events))


# Actions and purchases share one shape
ActionResult = EngineResult
PurchaseResult = EngineResult


class TickResult(BaseModel):
    """Outcome of one tick."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    events: list[DialogueEvent] = Field(default_factory=list, description="At most one ambient or terminal event")
    died: bool = Field(default=False, description="True only on the tick that killed the player")
