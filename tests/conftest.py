"""Pytest fixtures for ndevtop tests."""

import pytest
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional


def pytest_configure(config):
    """Register custom pytest marks."""
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
    config.addinivalue_line(
        "markers", "slow: Slow running tests"
    )

# Keep test runs from writing into the project's logs/ directory
os.environ.setdefault('LOG_FILE', os.path.join(tempfile.mkdtemp(prefix='ndevtop-tests-'), 'ndevtop.log'))

# Add the project root to the Python path
import sys
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.ndevtop.models import METRICS, DeviceRecord


class StatTree:
    """Fake /sys/class/net tree with one statistics directory per device."""

    def __init__(self, root: Path):
        self.root = root

    @property
    def pattern(self) -> str:
        return str(self.root / '*' / 'statistics')

    def stat_dir(self, device: str) -> Path:
        return self.root / device / 'statistics'

    def write(self, device: str, rx_bytes: int = 0, tx_bytes: int = 0,
              rx_packets: int = 0, tx_packets: int = 0) -> None:
        """Write all four counters for a device, creating it if needed."""
        stat_dir = self.stat_dir(device)
        stat_dir.mkdir(parents=True, exist_ok=True)
        values = {
            'rx_bytes': rx_bytes,
            'tx_bytes': tx_bytes,
            'rx_packets': rx_packets,
            'tx_packets': tx_packets,
        }
        for metric, value in values.items():
            # sysfs pads counters with a trailing newline
            (stat_dir / metric).write_text(f"{value}\n")

    def write_raw(self, device: str, metric: str, text: str) -> None:
        (self.stat_dir(device) / metric).write_text(text, encoding='utf-8')

    def remove_metric(self, device: str, metric: str) -> None:
        (self.stat_dir(device) / metric).unlink()

    def remove_device(self, device: str) -> None:
        stat_dir = self.stat_dir(device)
        for metric in METRICS:
            path = stat_dir / metric
            if path.exists():
                path.unlink()
        stat_dir.rmdir()
        stat_dir.parent.rmdir()


@pytest.fixture
def stat_tree(tmp_path):
    """Fixture providing an empty fake sysfs tree."""
    return StatTree(tmp_path / 'net')


class FakeSurface:
    """Render surface that records everything drawn."""

    def __init__(self):
        self.headers: List[str] = []
        self.tables: List[List[List[str]]] = []

    def render_header(self, text: str) -> None:
        self.headers.append(text)

    def render_table(self, table: List[List[str]]) -> None:
        self.tables.append(table)

    @property
    def last_table(self) -> Optional[List[List[str]]]:
        return self.tables[-1] if self.tables else None

    def device_order(self) -> List[str]:
        return [row[0] for row in self.last_table[1:]]


class ScriptedPrompt:
    """Prompt session answering from a list of canned replies.

    A reply of None means the prompt was abandoned.
    """

    def __init__(self, replies=None, delay: float = 0.0):
        self.replies = list(replies or [])
        self.delay = delay
        self.calls: List[Dict] = []

    async def ask(self, label: str, numeric: bool = False, max_length: int = 0) -> Optional[str]:
        import asyncio
        self.calls.append({'label': label, 'numeric': numeric, 'max_length': max_length})
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.replies.pop(0) if self.replies else None


@pytest.fixture
def surface():
    """Fixture providing a recording render surface."""
    return FakeSurface()


def make_record(name: str, **diffs) -> DeviceRecord:
    """Build a record whose diff(metric) equals the given values."""
    record = DeviceRecord(name=name)
    readings = {metric: diffs.get(metric, 0) for metric in METRICS}
    record.update(readings)
    return record
