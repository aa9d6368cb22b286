"""
ndevtop - live per-device network throughput for Linux.

Uses Textual TUI framework. The application itself lives in
src.ndevtop.app; this package exports the data types shared with the
collectors and formatters.
"""

from .constants import APP_NAME, VERSION, DEFAULT_INTERVAL
from .exceptions import (
    NdevTopError,
    CollectError,
    ValidationError,
    StartupError,
    FatalRenderError,
)
from .models import (
    CounterSample,
    DeviceRecord,
    SortSpec,
    RefreshConfig,
    METRICS,
)

__all__ = [
    # Constants
    "APP_NAME",
    "VERSION",
    "DEFAULT_INTERVAL",
    # Errors
    "NdevTopError",
    "CollectError",
    "ValidationError",
    "StartupError",
    "FatalRenderError",
    # Models
    "CounterSample",
    "DeviceRecord",
    "SortSpec",
    "RefreshConfig",
    "METRICS",
]
