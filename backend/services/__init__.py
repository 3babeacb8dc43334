from .store import GameNotFoundError, GameRegistry

__all__ = ["GameRegistry", "GameNotFoundError"]
