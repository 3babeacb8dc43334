from __future__ import annotations

import threading
from dataclasses import dataclass

DEFAULT_WORD = "snowman"
DEFAULT_MAX_GUESSES = 10


class InvalidGuessError(ValueError):
    """Raised when a guess is not exactly one character."""


@dataclass(frozen=True)
class GameSnapshot:
    word: str
    remaining_guesses: int


class SnowmanGame:
    """
    One melting-snowman game: a fixed word and a guess counter.

    Every guess costs one guess, hit or miss. The counter stops at zero and the
    game keeps answering guesses after that; deciding when a game is over is
    left to the caller.
    """

    def __init__(self, word: str = DEFAULT_WORD, max_guesses: int = DEFAULT_MAX_GUESSES) -> None:
        if not word:
            raise ValueError("word must not be empty")
        if max_guesses < 1:
            raise ValueError("max_guesses must be at least 1")
        self._word = word
        self._remaining_guesses = max_guesses
        self._lock = threading.Lock()

    @property
    def word(self) -> str:
        return self._word

    @property
    def remaining_guesses(self) -> int:
        return self._remaining_guesses

    def guess(self, letter: str) -> tuple[int, GameSnapshot]:
        """
        Return how often ``letter`` occurs in the word (case-sensitive), together
        with the game state right after this guess was counted.
        """
        if not isinstance(letter, str) or len(letter) != 1:
            raise InvalidGuessError(f"guess must be a single character, got {letter!r}")
        occurrences = self._word.count(letter)
        with self._lock:
            if self._remaining_guesses > 0:
                self._remaining_guesses -= 1
            snapshot = GameSnapshot(word=self._word, remaining_guesses=self._remaining_guesses)
        return occurrences, snapshot

    def describe(self) -> GameSnapshot:
        with self._lock:
            return GameSnapshot(word=self._word, remaining_guesses=self._remaining_guesses)
