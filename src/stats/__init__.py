"""Network device statistics collection modules."""

from .network_devices import DeviceStats, DeviceRegistry

__all__ = [
    'DeviceStats',
    'DeviceRegistry',
]
