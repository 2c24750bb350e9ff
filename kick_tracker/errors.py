"""Custom exceptions for kick_tracker with structured error information."""


class KickTrackerError(Exception):
    """Base exception for all kick_tracker errors.

    Carries a ``details`` dict so callers can report or log context
    without parsing the message.
    """

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class ConfigError(KickTrackerError):
    """Raised when game settings are inconsistent."""


class InvalidTransitionError(KickTrackerError):
    """Raised by strict transitions that are not allowed from the current state."""

    def __init__(self, current: str, requested: str):
        message = f"Invalid transition: {current} -> {requested}"
        details = {
            "current_state": current,
            "requested_state": requested,
        }
        super().__init__(message, details)


class SceneNotConfiguredError(KickTrackerError):
    """Raised when tracking is requested before goal geometry is known."""

    def __init__(self, missing: str):
        message = f"Scene is not configured: missing {missing}"
        details = {
            "missing": missing,
            "suggested_action": "Run scene setup (goal region, top corner, crossbar) first",
        }
        super().__init__(message, details)


class ClassifierUnavailableError(KickTrackerError):
    """Raised when the kick-style model cannot be loaded or run."""

    def __init__(self, reason: str, path: str = None):
        message = f"Kick classifier unavailable: {reason}"
        super().__init__(message, {"reason": reason, "path": path})


class SessionCompleteError(KickTrackerError):
    """Raised when a kick is folded into a session that already hit its limit."""

    def __init__(self, max_kicks: int):
        message = f"Session already holds the maximum of {max_kicks} kicks"
        super().__init__(message, {"max_kicks": max_kicks})
