"""Network device counter collection from Linux sysfs (read-only)."""

import glob
import os
import re
from typing import Dict, List, Optional

from ..ndevtop.exceptions import CollectError
from ..ndevtop.constants import NDEV_STAT_PATH_PATTERN
from ..ndevtop.models import COUNTER_MODULUS, DeviceRecord, METRICS
from ..utils.logger import get_logger, update_logger_device_context
from config.settings import settings

logger = get_logger(__name__)

# Unsigned decimal, nothing else
_COUNTER = re.compile(r"^[0-9]+\Z")
_COUNTER_DIGITS = len(str(COUNTER_MODULUS - 1))

class DeviceStats:
    """Counter source: enumerates devices and reads their raw counters.

    Each device is a directory matched by ``path_pattern``; the device name is
    the directory's parent (``/sys/class/net/<dev>/statistics``) and every
    metric is a file holding a whitespace padded unsigned integer.
    """

    def __init__(self, path_pattern: Optional[str] = None):
        self.path_pattern = path_pattern or settings.get(
            'stats.path_pattern', NDEV_STAT_PATH_PATTERN
        )

    def list_devices(self) -> List[str]:
        """Return counter directories in a stable order."""
        return sorted(glob.glob(self.path_pattern))

    @staticmethod
    def device_name(stat_dir: str) -> str:
        return os.path.basename(os.path.dirname(os.path.normpath(stat_dir)))

    def read_counter(self, stat_dir: str, metric: str) -> int:
        """Read one counter file; any failure is a CollectError."""
        path = os.path.join(stat_dir, metric)
        device = self.device_name(stat_dir)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise CollectError(f"Failed to read {path}: {e}", device=device, path=path) from e

        text = raw.strip()
        if not _COUNTER.match(text):
            raise CollectError(f"Invalid counter value in {path}: {raw!r}", device=device, path=path)
        # Length check first: int() refuses very long digit strings
        if len(text.lstrip("0")) > _COUNTER_DIGITS or int(text) >= COUNTER_MODULUS:
            raise CollectError(f"Counter value out of range in {path}: {text}", device=device, path=path)
        return int(text)

    def read_device(self, stat_dir: str) -> Dict[str, int]:
        return {metric: self.read_counter(stat_dir, metric) for metric in METRICS}

    def read_all(self) -> Dict[str, Dict[str, int]]:
        """Read every metric of every device, in enumeration order."""
        readings = {}
        for stat_dir in self.list_devices():
            readings[self.device_name(stat_dir)] = self.read_device(stat_dir)
        return readings


class DeviceRegistry:
    """Keyed store of device records surviving across polls.

    The registry only grows; devices missing from a poll are left out of the
    active set but keep their counters in case they come back.
    """

    def __init__(self, source: Optional[DeviceStats] = None):
        self.source = source if source is not None else DeviceStats()
        self.history: Dict[str, DeviceRecord] = {}
        self.active: List[DeviceRecord] = []

    def collect(self) -> List[DeviceRecord]:
        """Poll the counter source and commit the readings.

        All counters are read before anything is stored, so a CollectError
        leaves both the history and the active set untouched.
        """
        try:
            readings = self.source.read_all()
        except CollectError as e:
            if e.device:
                update_logger_device_context(logger, e.device)
            logger.debug(f"Poll discarded: {e}")
            update_logger_device_context(logger, None)
            raise

        active = []
        for name, values in readings.items():
            record = self.history.get(name)
            if record is None:
                logger.info(f"Discovered device {name}")
                record = DeviceRecord(name=name)
                self.history[name] = record
            record.update(values)
            active.append(record)

        self.active = active
        return list(active)

    def __len__(self) -> int:
        return len(self.history)

    def __contains__(self, name: str) -> bool:
        return name in self.history
