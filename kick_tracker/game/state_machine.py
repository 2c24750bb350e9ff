"""
Game flow state machine.

States are a plain enum; the allowed edges live in ``TRANSITIONS``.
Observers are notified synchronously on every accepted transition.
A transition requested from inside an observer callback is queued and
applied once the current notification round has finished, so nested
requests keep FIFO order instead of recursing.
"""
from __future__ import annotations
from collections import deque
from enum import Enum
import logging
import threading
from typing import Callable, Deque, Dict, FrozenSet, Hashable, Optional

from ..errors import InvalidTransitionError

logger = logging.getLogger(__name__)


class GameState(Enum):
    INACTIVE         = "inactive"
    SETUP_CAMERA     = "setup_camera"
    DETECTING_GOAL   = "detecting_goal"
    DETECTED_GOAL    = "detected_goal"
    DETECTING_PLAYER = "detecting_player"
    DETECTED_PLAYER  = "detected_player"
    TRACK_KICKS      = "track_kicks"
    KICK_COMPLETED   = "kick_completed"
    SHOW_SUMMARY     = "show_summary"


def _build_transitions() -> Dict[GameState, FrozenSet[GameState]]:
    S = GameState
    edges = {
        S.INACTIVE:         {S.SETUP_CAMERA},
        S.SETUP_CAMERA:     {S.DETECTING_GOAL},
        S.DETECTING_GOAL:   {S.DETECTED_GOAL},
        S.DETECTED_GOAL:    {S.DETECTING_PLAYER},
        S.DETECTING_PLAYER: {S.DETECTED_PLAYER},
        S.DETECTED_PLAYER:  {S.TRACK_KICKS},
        S.TRACK_KICKS:      {S.KICK_COMPLETED, S.SHOW_SUMMARY},
        S.KICK_COMPLETED:   {S.SHOW_SUMMARY, S.TRACK_KICKS},
        S.SHOW_SUMMARY:     {S.DETECTING_PLAYER},
    }
    # Any state besides Inactive can be reset to Inactive
    for state, nxt in edges.items():
        if state is not S.INACTIVE:
            nxt.add(S.INACTIVE)
    return {state: frozenset(nxt) for state, nxt in edges.items()}


TRANSITIONS: Dict[GameState, FrozenSet[GameState]] = _build_transitions()

StateObserver = Callable[[GameState, Optional[GameState]], None]


class GameStateMachine:
    """Single current state plus an identity-keyed observer registry."""

    def __init__(self, initial: GameState = GameState.INACTIVE):
        self._state = initial
        self._observers: Dict[Hashable, StateObserver] = {}
        self._pending: Deque[GameState] = deque()
        self._notifying = False
        self._lock = threading.RLock()

    @property
    def state(self) -> GameState:
        return self._state

    def can_enter(self, target: GameState) -> bool:
        return target in TRANSITIONS[self._state]

    def is_in(self, *states: GameState) -> bool:
        return self._state in states

    # ── Observers ─────────────────────────────────────────────────────────────

    def subscribe(self, observer: StateObserver, key: Optional[Hashable] = None) -> None:
        """
        Register ``observer``. ``key`` defaults to the observer itself;
        subscribing the same key again replaces the previous callback but
        keeps its place in the notification order.
        """
        with self._lock:
            self._observers[observer if key is None else key] = observer

    def unsubscribe(self, key: Hashable) -> None:
        with self._lock:
            self._observers.pop(key, None)

    def clear_observers(self) -> None:
        with self._lock:
            self._observers.clear()

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    # ── Transitions ───────────────────────────────────────────────────────────

    def enter(self, target: GameState, strict: bool = False) -> bool:
        """
        Request a transition to ``target``.

        Returns True if the transition was applied (or, when called from
        inside an observer callback, queued behind the current round).
        Invalid transitions leave the state untouched and send no
        notification; with ``strict`` they raise InvalidTransitionError.
        """
        with self._lock:
            if self._notifying:
                self._pending.append(target)
                return True
            try:
                if not self._apply(target, strict):
                    return False
                self._drain()
            finally:
                # Requests queued by a round that raised die with it
                self._pending.clear()
            return True

    def _apply(self, target: GameState, strict: bool) -> bool:
        if not self.can_enter(target):
            if strict:
                raise InvalidTransitionError(self._state.value, target.value)
            logger.debug("Rejected transition %s -> %s",
                         self._state.value, target.value)
            return False
        previous, self._state = self._state, target
        logger.info("State %s -> %s", previous.value, target.value)
        self._notify(target, previous)
        return True

    def _notify(self, state: GameState, previous: GameState) -> None:
        self._notifying = True
        try:
            for observer in list(self._observers.values()):
                observer(state, previous)
        finally:
            self._notifying = False

    def _drain(self) -> None:
        while self._pending:
            target = self._pending.popleft()
            if not self._apply(target, strict=False):
                logger.warning("Dropped queued transition %s -> %s",
                               self._state.value, target.value)
