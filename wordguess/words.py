# Word list handling: parsing the newline-delimited source, random target
# selection and guess membership checks.
#
# Entries are kept only when they are exactly WORD_LENGTH letters A-Z after
# trimming and uppercasing. An empty result falls back to a single default
# word in "degraded" mode, where membership checks accept any well-formed word.

from __future__ import annotations
import logging
import random
import re
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union
from .config import FALLBACK_WORD, WORD_LENGTH
from .errors import EmptyDictionary

log = logging.getLogger(__name__)

_WORD_RE = re.compile(rf"[A-Z]{{{WORD_LENGTH}}}")


def is_well_formed(word: str) -> bool:
    return bool(_WORD_RE.fullmatch(word))


class WordBank:
    def __init__(self, words: Sequence[str], degraded: bool = False):
        # dict keeps first-seen order while dropping duplicates
        self._words = tuple(dict.fromkeys(words))
        self._lookup = frozenset(self._words)
        self.degraded = degraded

    @classmethod
    def load(cls, raw_text: str) -> "WordBank":
        words = []
        rejected = 0
        for line in raw_text.splitlines():
            w = line.strip().upper()
            if not w:
                continue
            if is_well_formed(w):
                words.append(w)
            else:
                rejected += 1
        if rejected:
            log.debug("Skipped %d malformed word list entries", rejected)
        if not words:
            raise EmptyDictionary()
        return cls(words)

    @classmethod
    def fallback(cls) -> "WordBank":
        return cls([FALLBACK_WORD], degraded=True)

    def random_word(self, rng: Optional[random.Random] = None) -> str:
        return (rng or random).choice(self._words)

    def contains(self, word: str) -> bool:
        if self.degraded:
            return is_well_formed(word)
        return word in self._lookup

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)


def load_word_bank(raw_text: str) -> WordBank:
    try:
        bank = WordBank.load(raw_text)
    except EmptyDictionary:
        log.warning("No usable words in word list, using default word %s", FALLBACK_WORD)
        return WordBank.fallback()
    log.info("Loaded %d words", len(bank))
    return bank


def read_word_source(path: Union[str, Path]) -> str:
    try:
        # undecodable bytes become U+FFFD and the entry is dropped by the A-Z filter
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        log.warning("Could not read word list %s: %s", path, e)
        return ""
