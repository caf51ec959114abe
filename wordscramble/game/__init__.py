from .controller import GameController, GuessResult, Phase, RoundOutcome

__all__ = ["GameController", "GuessResult", "Phase", "RoundOutcome"]
