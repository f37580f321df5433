# Points and streak bookkeeping.
#
# Wins pay out according to a reward table keyed on guesses used; losses reset
# the streak. Hints cost a fixed number of points and can never take the total
# below zero. Every change is written straight through to the store.

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple
from .config import FLAT_REWARD, HINT_COST, REWARD_TABLE
from .models import ScoreView

log = logging.getLogger(__name__)

POINTS_KEY = "points"
STREAK_KEY = "streak"


class IntStore(Protocol):
    def get_int(self, key: str) -> Optional[int]: ...
    def set_int(self, key: str, value: int) -> None: ...
    def clear(self) -> None: ...


@dataclass(frozen=True)
class RewardTable:
    """
    Points for a win, chosen by the first tier whose limit covers the
    number of guesses used; `default` applies past the last tier.
    """
    tiers: Tuple[Tuple[int, int], ...] = ((2, 6),)
    default: int = 3

    def award(self, guesses_used: int) -> int:
        for limit, points in self.tiers:
            if guesses_used <= limit:
                return points
        return self.default

    @classmethod
    def tiered(cls) -> "RewardTable":
        return cls()

    @classmethod
    def flat(cls, points: int = FLAT_REWARD) -> "RewardTable":
        return cls(tiers=(), default=points)

    @classmethod
    def named(cls, name: str) -> "RewardTable":
        if name == "tiered":
            return cls.tiered()
        if name == "flat":
            return cls.flat()
        raise ValueError(f"Unknown reward table: {name!r}")


class ScoreKeeper:
    def __init__(self, store: IntStore, rewards: Optional[RewardTable] = None, hint_cost: int = HINT_COST):
        self.store = store
        self.rewards = rewards or RewardTable.named(REWARD_TABLE)
        self.hint_cost = hint_cost
        self._points = max(0, store.get_int(POINTS_KEY) or 0)
        self._streak = max(0, store.get_int(STREAK_KEY) or 0)

    @property
    def points(self) -> int:
        return self._points

    @property
    def streak(self) -> int:
        return self._streak

    def snapshot(self) -> ScoreView:
        return ScoreView(points=self._points, streak=self._streak)

    def record_win(self, guesses_used: int) -> int:
        awarded = self.rewards.award(guesses_used)
        self._points += awarded
        self._streak += 1
        self._save()
        log.info("Win in %d guesses: +%d points, streak %d", guesses_used, awarded, self._streak)
        return awarded

    def record_loss(self) -> None:
        self._streak = 0
        self._save()
        log.info("Loss: streak reset")

    def can_afford_hint(self) -> bool:
        return self._points >= self.hint_cost

    def spend_hint(self) -> bool:
        if not self.can_afford_hint():
            return False
        self._points -= self.hint_cost
        self.store.set_int(POINTS_KEY, self._points)
        return True

    def reset(self) -> None:
        # missing keys read back as 0
        self.store.clear()
        self._points = 0
        self._streak = 0

    def _save(self) -> None:
        self.store.set_int(POINTS_KEY, self._points)
        self.store.set_int(STREAK_KEY, self._streak)
