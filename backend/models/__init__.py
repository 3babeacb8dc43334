from .game import DEFAULT_MAX_GUESSES, DEFAULT_WORD, GameSnapshot, InvalidGuessError, SnowmanGame

__all__ = [
    "SnowmanGame",
    "GameSnapshot",
    "InvalidGuessError",
    "DEFAULT_WORD",
    "DEFAULT_MAX_GUESSES",
]
