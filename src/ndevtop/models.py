"""
Data models for ndevtop.

Contains the dataclasses shared across the application:
- CounterSample: previous/current value of one raw counter
- DeviceRecord: all counters of one network device
- SortSpec: active ranking key and direction
- RefreshConfig: refresh interval and device name filter
- ColorTheme: Centralized color theme management
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .constants import DEFAULT_INTERVAL

# Raw counters are unsigned 64-bit values
COUNTER_MODULUS = 1 << 64

METRIC_RX_BYTES = "rx_bytes"
METRIC_TX_BYTES = "tx_bytes"
METRIC_RX_PACKETS = "rx_packets"
METRIC_TX_PACKETS = "tx_packets"

# Order defines the table columns
METRICS: List[str] = [
    METRIC_RX_BYTES,
    METRIC_TX_BYTES,
    METRIC_RX_PACKETS,
    METRIC_TX_PACKETS,
]

BYTE_METRICS = frozenset({METRIC_RX_BYTES, METRIC_TX_BYTES})

METRIC_LABELS: Dict[str, str] = {
    METRIC_RX_BYTES: "RX bytes",
    METRIC_TX_BYTES: "TX bytes",
    METRIC_RX_PACKETS: "RX packets",
    METRIC_TX_PACKETS: "TX packets",
}

SORT_BY_NAME = "name"
SORT_KEYS = frozenset({SORT_BY_NAME, *METRICS})


@dataclass
class CounterSample:
    """One raw counter with a one-tick lag."""
    previous: int = 0
    current: int = 0

    def push(self, value: int) -> None:
        """Store a fresh reading; the old current becomes previous."""
        self.previous = self.current
        self.current = value

    def diff(self) -> int:
        """Counter delta since the previous poll (wraps like a uint64)."""
        return (self.current - self.previous) % COUNTER_MODULUS


@dataclass
class DeviceRecord:
    """Counters for a single network device, keyed by metric name."""
    name: str
    samples: Dict[str, CounterSample] = field(
        default_factory=lambda: {metric: CounterSample() for metric in METRICS}
    )

    def update(self, readings: Dict[str, int]) -> None:
        """Push one poll's readings into every metric."""
        for metric in METRICS:
            self.samples[metric].push(readings[metric])

    def diff(self, metric: str) -> int:
        return self.samples[metric].diff()


@dataclass
class SortSpec:
    """Current ranking key and direction."""
    key: str = METRIC_RX_BYTES
    ascending: bool = False


@dataclass
class RefreshConfig:
    """User adjustable refresh settings."""
    interval: int = DEFAULT_INTERVAL  # in seconds
    name_filter: str = ""  # substring of the device name, empty matches all


@dataclass
class ColorTheme:
    """Centralized color theme management."""

    warning: str = "#d29922"

    background: str = "#0d1117"
    surface: str = "#161b22"

    text: str = "#c9d1d9"

    border: str = "#30363d"


# Global theme instance
THEME = ColorTheme()
