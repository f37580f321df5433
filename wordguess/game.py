# Core game logic for a single word-guessing session.
# Implements canonical marking rules:
# - Two-pass algorithm: first mark exact matches, consuming one occurrence of
#   the letter from the target's letter counts, then mark presents only while
#   the remaining count for that letter is above zero.
# - This caps correct + present tags for a letter at its count in the target.
# - Letter classifications only ever move up (unknown < absent < present <
#   correct) until a new game starts.

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set
import logging
import random
import string
import threading
from .config import MAX_GUESSES, WORD_LENGTH
from .errors import (
    GameAlreadyOver, GameInProgress, InsufficientPoints, InvalidCharacters,
    InvalidLength, NoHintsRemaining, NotInDictionary, NotReady,
)
from .models import (
    GameState, GuessFeedback, GuessResult, HintResult, LetterClass, ScoreView,
    SessionView, Tag,
)
from .scoring import ScoreKeeper
from .words import WordBank, is_well_formed

log = logging.getLogger(__name__)

ALPHABET = string.ascii_uppercase


def evaluate_guess(target: str, guess: str) -> List[Tag]:
    tags: List[Tag] = [Tag.ABSENT] * WORD_LENGTH
    remaining = Counter(target)

    # First pass: mark exact matches
    for i in range(WORD_LENGTH):
        if guess[i] == target[i]:
            tags[i] = Tag.CORRECT
            remaining[guess[i]] -= 1

    # Second pass: mark presents up to the remaining count of each letter
    for i in range(WORD_LENGTH):
        if tags[i] is Tag.CORRECT:
            continue
        ch = guess[i]
        if remaining[ch] > 0:
            tags[i] = Tag.PRESENT
            remaining[ch] -= 1

    return tags


def is_win(tags: List[Tag]) -> bool:
    return all(t is Tag.CORRECT for t in tags)


def upgrade(current: LetterClass, observed: LetterClass) -> LetterClass:
    return observed if observed.rank > current.rank else current


def classify_letters(guess: str, tags: List[Tag]) -> Dict[str, LetterClass]:
    """Best class seen for each letter of a single guess."""
    seen: Dict[str, LetterClass] = {}
    for ch, tag in zip(guess, tags):
        seen[ch] = upgrade(seen.get(ch, LetterClass.UNKNOWN), LetterClass.from_tag(tag))
    return seen


def blank_classification() -> Dict[str, LetterClass]:
    return {letter: LetterClass.UNKNOWN for letter in ALPHABET}


def normalize_guess(raw: str) -> str:
    guess = raw.strip()
    if len(guess) != WORD_LENGTH:
        raise InvalidLength()
    # upper() can change the length (ß -> SS)
    guess = guess.upper()
    if not is_well_formed(guess):
        raise InvalidCharacters()
    return guess


@dataclass
class GameSession:
    """
    One player's game against a hidden target.

    The session is not ready until a word bank is attached; until then every
    operation raises NotReady. Mutating calls are serialized on a lock so the
    guess count and classification map always move together.
    """
    score: ScoreKeeper
    bank: Optional[WordBank] = None
    rng: random.Random = field(default_factory=random.Random)
    max_guesses: int = MAX_GUESSES
    target: str = ""
    guess_count: int = 0
    state: GameState = GameState.IN_PROGRESS
    history: List[GuessFeedback] = field(default_factory=list)
    classification: Dict[str, LetterClass] = field(default_factory=blank_classification)
    revealed: Set[int] = field(default_factory=set)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.bank is not None and not self.target:
            self.target = self.bank.random_word(self.rng)

    @property
    def ready(self) -> bool:
        return self.bank is not None

    @property
    def game_over(self) -> bool:
        return self.state is not GameState.IN_PROGRESS

    def attach_bank(self, bank: WordBank) -> None:
        with self._lock:
            self.bank = bank
            self._reset()
        log.info("Word bank attached (%d words, degraded=%s)", len(bank), bank.degraded)

    def submit_guess(self, raw: str) -> GuessResult:
        with self._lock:
            self._require_ready()
            if self.game_over:
                raise GameAlreadyOver()

            guess = normalize_guess(raw)
            if not self.bank.contains(guess):
                raise NotInDictionary()

            tags = evaluate_guess(self.target, guess)
            for ch, seen in classify_letters(guess, tags).items():
                self.classification[ch] = upgrade(self.classification[ch], seen)
            self.history.append(GuessFeedback(guess=guess, tags=tags))
            self.guess_count += 1

            awarded = 0
            if is_win(tags):
                self.state = GameState.WON
                awarded = self.score.record_win(self.guess_count)
                log.info("Game won in %d guesses", self.guess_count)
            elif self.guess_count >= self.max_guesses:
                self.state = GameState.LOST
                self.score.record_loss()
                log.info("Game lost after %d guesses", self.guess_count)

            return GuessResult(
                guess=guess,
                tags=tags,
                classification=dict(self.classification),
                state=self.state,
                guess_count=self.guess_count,
                guesses_remaining=self.max_guesses - self.guess_count,
                points_awarded=awarded,
                points=self.score.points,
                streak=self.score.streak,
                answer=self.target if self.game_over else None,
            )

    def buy_hint(self) -> HintResult:
        with self._lock:
            self._require_ready()
            if self.game_over:
                raise GameAlreadyOver()
            if not self.score.can_afford_hint():
                raise InsufficientPoints()
            available = [i for i in range(WORD_LENGTH) if i not in self.revealed]
            if not available:
                raise NoHintsRemaining()

            position = self.rng.choice(available)
            if not self.score.spend_hint():
                raise InsufficientPoints()
            self.revealed.add(position)
            log.info("Hint bought for position %d", position)
            return HintResult(
                position=position,
                letter=self.target[position],
                points=self.score.points,
                streak=self.score.streak,
            )

    def new_game(self, force: bool = False) -> SessionView:
        with self._lock:
            self._require_ready()
            if not self.game_over and not force:
                raise GameInProgress("Game still in progress. Finish it or force a new game.")
            if not self.game_over:
                log.info("Game abandoned after %d guesses", self.guess_count)
            self._reset()
            return self._view()

    def reveal(self) -> str:
        with self._lock:
            self._require_ready()
            if not self.game_over:
                raise GameInProgress("Game not over yet.")
            return self.target

    def view(self) -> SessionView:
        with self._lock:
            return self._view()

    def reset_score(self) -> ScoreView:
        with self._lock:
            self.score.reset()
            log.info("Points and streak reset")
            return self.score.snapshot()

    def _require_ready(self) -> None:
        if self.bank is None:
            raise NotReady()

    def _reset(self) -> None:
        self.target = self.bank.random_word(self.rng)
        self.guess_count = 0
        self.state = GameState.IN_PROGRESS
        self.history = []
        self.classification = blank_classification()
        self.revealed = set()
        log.info("New game started")

    def _view(self) -> SessionView:
        return SessionView(
            state=self.state,
            guess_count=self.guess_count,
            max_guesses=self.max_guesses,
            word_length=WORD_LENGTH,
            history=list(self.history),
            classification=dict(self.classification),
            hints={i: self.target[i] for i in sorted(self.revealed)},
            points=self.score.points,
            streak=self.score.streak,
            degraded=bool(self.bank and self.bank.degraded),
            answer=self.target if self.game_over else None,
        )
