# User-facing error conditions raised by the engine.
# All of them are recoverable: the caller shows the message and carries on.

from __future__ import annotations


class GameError(ValueError):
    code = "game_error"
    message = "Game error."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidLength(GameError):
    code = "invalid_length"
    message = "Guess must be exactly 5 letters."


class InvalidCharacters(GameError):
    code = "invalid_characters"
    message = "Guess must contain only letters A-Z."


class NotInDictionary(GameError):
    code = "not_in_dictionary"
    message = "Word not in word list."


class GameAlreadyOver(GameError):
    code = "game_already_over"
    message = "Game already over. Start a new game."


class GameInProgress(GameError):
    code = "game_in_progress"
    message = "Game still in progress."


class InsufficientPoints(GameError):
    code = "insufficient_points"
    message = "Not enough points!"


class NoHintsRemaining(GameError):
    code = "no_hints_remaining"
    message = "No more hints available!"


class EmptyDictionary(GameError):
    code = "empty_dictionary"
    message = "Word list is empty or missing."


class NotReady(GameError):
    code = "not_ready"
    message = "Word list is still loading."
