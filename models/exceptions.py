class CaddieError(Exception):
    """Base for all engine errors."""


class InvalidModeRequest(CaddieError):
    """Placement mode cannot be entered from the current state."""
