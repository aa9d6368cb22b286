"""
Rate formatting and table building for the device table.

Counter deltas are turned into bits/s (byte counters) or packets/s
(packet counters) with a K/M/G auto-scaled unit.
"""

from typing import Iterable, List, Sequence, Tuple

from rich.text import Text

from ..ndevtop.constants import NAME_COLUMN_WIDTH, RATE_COLUMN_WIDTH
from ..ndevtop.models import BYTE_METRICS, METRICS, METRIC_LABELS, DeviceRecord

NAME_HEADER = "dev name"

# (threshold, unit prefix); the blank prefix keeps the columns aligned
RATE_TIERS: List[Tuple[int, str]] = [
    (1000 * 1000 * 1000, "G"),
    (1000 * 1000, "M"),
    (1000, "K"),
]


def pick_tier(value: int) -> Tuple[int, str]:
    """Choose divisor and prefix for an unscaled value."""
    for threshold, prefix in RATE_TIERS:
        if value >= threshold:
            return threshold, prefix
    return 1, " "


def format_rate(metric: str, delta: int, elapsed: float) -> str:
    """Format a counter delta as a per-second rate.

    Args:
        metric: One of the counter names; byte counters are reported in bits
        delta: Counter difference between two polls
        elapsed: Poll interval in seconds, truncated to whole seconds

    Returns:
        e.g. ``"1.0 Mbps"`` or ``"12.0  pps"``
    """
    if metric in BYTE_METRICS:
        value = delta * 8
        suffix = "bps"
    else:
        value = delta
        suffix = "pps"

    # The tier is picked on the delta itself, before dividing by the interval
    divisor, prefix = pick_tier(value)
    seconds = max(1, int(elapsed))
    return f"{value / seconds / divisor:.1f} {prefix}{suffix}"


def table_header() -> List[str]:
    return [NAME_HEADER] + [METRIC_LABELS[metric] for metric in METRICS]


def formatted_table(records: Iterable[DeviceRecord], name_filter: str, elapsed: float) -> List[List[str]]:
    """Build the header row plus one formatted row per matching device."""
    table = [table_header()]
    for record in records:
        if name_filter not in record.name:
            continue
        row = [record.name]
        for metric in METRICS:
            row.append(format_rate(metric, record.diff(metric), elapsed))
        table.append(row)
    return table


def header_cells(header: Sequence[str]) -> List[Text]:
    """Bold header cells, right aligned except for the name column."""
    return [
        Text(cell, style="bold", justify="left" if i == 0 else "right")
        for i, cell in enumerate(header)
    ]


def row_cells(row: Sequence[str]) -> List[Text]:
    """Pad a table row to fixed column widths."""
    cells = []
    for i, value in enumerate(row):
        if i == 0:
            cells.append(Text(f"{value:<{NAME_COLUMN_WIDTH}}"))
        else:
            cells.append(Text(f"{value:>{RATE_COLUMN_WIDTH}}", justify="right"))
    return cells
