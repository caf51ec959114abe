from .store import PreferencesStore
from .game_state import GameState

__all__ = ["PreferencesStore", "GameState"]
