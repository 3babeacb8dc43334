"""In-memory game registry. Keyed by integer game ID, append-only."""

from __future__ import annotations

import logging
import threading

from models.game import DEFAULT_MAX_GUESSES, DEFAULT_WORD, SnowmanGame

logger = logging.getLogger(__name__)


class GameNotFoundError(KeyError):
    def __init__(self, game_id: int) -> None:
        super().__init__(game_id)
        self.game_id = game_id

    def __str__(self) -> str:
        return f"Game {self.game_id} not found"


class GameRegistry:
    """
    Hands out game IDs and owns the games created under them.

    IDs start at 1 and are never reused. Creation is serialized by a lock, so
    concurrent callers (FastAPI runs sync endpoints on a threadpool) each get a
    distinct ID. There is no removal.
    """

    def __init__(self, *, word: str = DEFAULT_WORD, max_guesses: int = DEFAULT_MAX_GUESSES) -> None:
        self._word = word
        self._max_guesses = max_guesses
        self._lock = threading.Lock()
        self._last_id = 0
        self._games: dict[int, SnowmanGame] = {}

    def create(self) -> int:
        game = SnowmanGame(self._word, self._max_guesses)
        with self._lock:
            self._last_id += 1
            game_id = self._last_id
            self._games[game_id] = game
        logger.info("[store] Game created: game_id=%s max_guesses=%s", game_id, self._max_guesses)
        return game_id

    def get(self, game_id: int) -> SnowmanGame:
        with self._lock:
            game = self._games.get(game_id)
        if game is None:
            logger.warning("[store] Game %s not found", game_id)
            raise GameNotFoundError(game_id)
        return game

    def __contains__(self, game_id: object) -> bool:
        with self._lock:
            return game_id in self._games

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)
