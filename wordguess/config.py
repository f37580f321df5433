# Configuration module for game constants and defaults.

import os
from pathlib import Path

# Letters per word.
WORD_LENGTH = 5

# Guesses allowed per game before it is lost.
MAX_GUESSES = 6

# Points deducted for each revealed letter.
HINT_COST = 5

# Target used when the word list is missing or has no usable entries.
FALLBACK_WORD = "APPLE"

# Reward table for a win: "tiered" (6 points for 1-2 guesses, 3 otherwise) or "flat".
REWARD_TABLE = os.getenv("WORDGUESS_REWARDS", "tiered")

# Award used by the flat table.
FLAT_REWARD = 10

# Path to the word list (one candidate per line).
WORDS_PATH = Path(__file__).parent / "words.txt"

# SQLite DB file path for points and streak.
DB_PATH = Path(os.getenv("WORDGUESS_DB", Path(__file__).parent / "wordguess.db"))

LOG_LEVEL = os.getenv("WORDGUESS_LOG_LEVEL", "INFO")

# CORS origins (if you serve the page from another origin, add it here).
CORS_ORIGINS = ["*"]
