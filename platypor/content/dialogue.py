"""Dialogue lines and the lookup from event codes to text."""

from pydantic import BaseModel, ConfigDict, Field

from platypor.engine.rng import RandomSource
from platypor.models.results import DialogueEvent

UNKNOWN_MESSAGE = "Unknown message type"


class DialogueLine(BaseModel):
    """One ambient voice line."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    text: str = Field(description="Line text")


class DialogueData(BaseModel):
    """Contents of dialogues.json."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    voice_lines: list[DialogueLine] = Field(default_factory=list, description="Ambient lines picked at random")
    event_lines: dict[DialogueEvent, str] = Field(
        default_factory=dict, description="Fixed line per non-ambient event"
    )


class DialogueBook:
    """Turns dialogue events into display text."""

    def __init__(self, data: DialogueData, rng: RandomSource | None = None) -> None:
        self._data = data
        self._rng = rng or RandomSource()

    def line_for(self, event: DialogueEvent) -> str:
        """Text for an event; ambient events pick a random voice line."""
        if event == DialogueEvent.AMBIENT:
            if not self._data.voice_lines:
                return UNKNOWN_MESSAGE
            return self._rng.choice(self._data.voice_lines).text
        return self._data.event_lines.get(event, UNKNOWN_MESSAGE)

    def render(self, events: list[DialogueEvent]) -> list[dict[str, str]]:
        """Events paired with their text, for API responses."""
        return [{"event": event.value, "text": self.line_for(event)} for event in events]
