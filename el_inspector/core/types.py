from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

MIN_PLAYERS = 3
IMPOSTOR_COUNT = 2
MAX_NAME_LENGTH = 40


class Phase(str, Enum):
    SETUP = "setup"
    REVEAL = "reveal"
    END = "end"


# ---------------------------------------------------------------------------
# Role cards
# ---------------------------------------------------------------------------

class ImpostorCard(BaseModel):
    """A card with no secret word on it."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["impostor"] = "impostor"

    @property
    def is_impostor(self) -> bool:
        return True

    @property
    def label(self) -> str:
        return "IMPOSTOR"


class WordCard(BaseModel):
    """A card showing the round's shared secret word."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["word"] = "word"
    name: str

    @property
    def is_impostor(self) -> bool:
        return False

    @property
    def label(self) -> str:
        return self.name


RoleCard = Annotated[Union[ImpostorCard, WordCard], Field(discriminator="kind")]


# ---------------------------------------------------------------------------
# Round state
# ---------------------------------------------------------------------------

class RoundState(BaseModel):
    """
    Everything the reveal protocol tracks for one round.

    Transitions never mutate an instance in place; the state machine swaps in
    a fresh copy so a half-applied transition is never observable.
    """

    model_config = ConfigDict(frozen=True)

    phase: Phase = Phase.SETUP
    deck: tuple[RoleCard, ...] = ()
    cursor: int = 0
    revealed: bool = False

    @property
    def current_card(self) -> ImpostorCard | WordCard | None:
        if self.phase != Phase.REVEAL:
            return None
        return self.deck[self.cursor]


class RoundView(BaseModel):
    """Render-ready snapshot of a session."""

    phase: Phase
    round_number: int
    player_count: int
    impostor_count: int
    can_start: bool
    progress: str | None = None
    revealed: bool = False
    card_kind: str | None = None  # only set while the card is shown
    card_label: str | None = None
    error: str | None = None


class GameConfig(BaseModel):
    """Configuration for a pass-and-play session."""

    min_players: int = Field(default=MIN_PLAYERS, ge=1)
    impostor_count: int = Field(default=IMPOSTOR_COUNT, ge=0)
    max_name_length: int = Field(default=MAX_NAME_LENGTH, ge=1)
    seed: int | None = None
    verbose: bool = False
