from .state_machine import GameState, GameStateMachine, TRANSITIONS, StateObserver
from .context       import GameContext
from .controller    import GameController

__all__ = [
    "GameState", "GameStateMachine", "TRANSITIONS", "StateObserver",
    "GameContext", "GameController",
]
