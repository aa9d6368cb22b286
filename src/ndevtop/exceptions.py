"""Custom exceptions for ndevtop."""

class NdevTopError(Exception):
    """Base exception for ndevtop operations."""
    pass

class CollectError(NdevTopError):
    """Reading the device counters failed; the poll cycle is discarded."""
    def __init__(self, message: str, device: str = None, path: str = None):
        super().__init__(message)
        self.device = device
        self.path = path

class ValidationError(NdevTopError):
    """Text entered in a prompt was rejected."""
    pass

class StartupError(NdevTopError):
    """The dashboard cannot start (bad flag, unsupported platform)."""
    pass

class FatalRenderError(NdevTopError):
    """The terminal UI run loop failed."""
    pass
