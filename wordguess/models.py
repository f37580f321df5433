# Enums and pydantic models for engine results and API IO.

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class Tag(str, Enum):
    """Feedback for one position of a guess."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class LetterClass(str, Enum):
    """Best-known status of a letter across a game."""
    UNKNOWN = "unknown"
    ABSENT = "absent"
    PRESENT = "present"
    CORRECT = "correct"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @classmethod
    def from_tag(cls, tag: Tag) -> "LetterClass":
        return cls(tag.value)


_RANKS = {
    LetterClass.UNKNOWN: 0,
    LetterClass.ABSENT: 1,
    LetterClass.PRESENT: 2,
    LetterClass.CORRECT: 3,
}


class GameState(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class GuessFeedback(BaseModel):
    guess: str
    tags: List[Tag]


class ScoreView(BaseModel):
    points: int
    streak: int


class GuessResult(BaseModel):
    guess: str
    tags: List[Tag]
    classification: Dict[str, LetterClass]
    state: GameState
    guess_count: int
    guesses_remaining: int
    points_awarded: int = 0
    points: int
    streak: int
    # Only set once the game is over
    answer: Optional[str] = None


class HintResult(BaseModel):
    position: int
    letter: str
    points: int
    streak: int


class SessionView(BaseModel):
    state: GameState
    guess_count: int
    max_guesses: int
    word_length: int
    history: List[GuessFeedback]
    classification: Dict[str, LetterClass]
    # position -> letter
    hints: Dict[int, str]
    points: int
    streak: int
    degraded: bool = False
    answer: Optional[str] = None


class GuessRequest(BaseModel):
    guess: str = Field(..., description="5-letter guess")


class NewGameRequest(BaseModel):
    force: bool = Field(False, description="Abandon a game that is still in progress")


class ErrorResponse(BaseModel):
    error: str
    detail: str
