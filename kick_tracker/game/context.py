"""
Session context.

One object per session holding everything the game flow shares: the state
machine, the static scene geometry, the running stats and the current
kick's metrics. Components receive it explicitly.
"""
from __future__ import annotations
import logging
from typing import Optional

from ..models.kick import KickMetrics
from ..models.session import SessionStats
from ..scene import SceneCalibration
from ..settings import GameSettings
from .state_machine import GameState, GameStateMachine

logger = logging.getLogger(__name__)


class GameContext:

    def __init__(self, settings: Optional[GameSettings] = None):
        self.settings = settings or GameSettings()
        self.settings.validate()

        self.state_machine = GameStateMachine()
        self.scene: Optional[SceneCalibration] = None
        self.stats = self._new_stats()
        self.last_metrics = KickMetrics()

    def _new_stats(self) -> SessionStats:
        return SessionStats(max_kicks=self.settings.max_kicks,
                            pose_capacity=self.settings.pose_capacity)

    @property
    def state(self) -> GameState:
        return self.state_machine.state

    @property
    def metres_per_px(self) -> float:
        return self.scene.metres_per_px if self.scene else float("nan")

    def reset(self) -> None:
        """Drop scene, stats and observers and return to Inactive."""
        self.scene = None
        self.stats = self._new_stats()
        self.last_metrics = KickMetrics()
        self.state_machine.clear_observers()
        if self.state_machine.state is not GameState.INACTIVE:
            self.state_machine.enter(GameState.INACTIVE)
        logger.info("Game context reset")
