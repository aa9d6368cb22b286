"""
Main application class and entry points for ndevtop.

Contains:
- NdevTopApp: Main Textual application class
- main: click command line entry point
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from textual.app import App

from config.settings import settings
from src.stats.network_devices import DeviceRegistry
from src.utils.logger import get_logger, suppress_console_logging

from .constants import APP_NAME, DEFAULT_INTERVAL, FILTER_MAX_LENGTH, MAX_INTERVAL, VERSION
from .exceptions import FatalRenderError, NdevTopError, StartupError
from .models import RefreshConfig
from .ranking import RankingEngine
from .screens import MonitorScreen
from .styles import get_monitor_css

logger = get_logger(__name__)


class NdevTopApp(App):
    """Live per-device network rate table."""

    TITLE = APP_NAME
    ENABLE_COMMAND_PALETTE = False

    CSS = get_monitor_css()

    def __init__(self, interval: int = DEFAULT_INTERVAL,
                 registry: Optional[DeviceRegistry] = None,
                 filter_max_length: Optional[int] = None):
        super().__init__()
        # State shared with the refresh loop; only the loop mutates it
        self.config = RefreshConfig(interval=interval)
        self.registry = registry if registry is not None else DeviceRegistry()
        self.ranking = RankingEngine()
        self.filter_max_length = filter_max_length or settings.get('viewer.filter_max_length', FILTER_MAX_LENGTH)

    def on_mount(self) -> None:
        self.push_screen(MonitorScreen())


def check_platform() -> None:
    """The counter source is Linux sysfs; refuse to start anywhere else."""
    if not sys.platform.startswith("linux"):
        raise StartupError("this program only supports Linux")


def check_interval(interval: int) -> int:
    if interval <= 0:
        raise StartupError("interval must be larger than 0")
    if interval > MAX_INTERVAL:
        raise StartupError(f"interval must not exceed {MAX_INTERVAL} seconds")
    return interval


def run(interval: int) -> None:
    """Validate startup conditions and run the dashboard until it quits."""
    check_platform()
    check_interval(interval)

    # Logs still go to file while the TUI owns the terminal
    suppress_console_logging()
    logger.info(f"Starting {APP_NAME} {VERSION}, interval={interval}s")

    app = NdevTopApp(interval=interval)
    try:
        app.run()
    except Exception as e:
        raise FatalRenderError(f"terminal UI failed: {e}") from e

    if app.return_code:
        raise FatalRenderError(f"terminal UI exited with status {app.return_code}")


@click.command(name=APP_NAME)
@click.option('-d', '--interval', type=int, default=None, metavar='SECONDS',
              help='Set data update interval in seconds (default: 3)')
@click.version_option(VERSION, prog_name=APP_NAME)
def main(interval):
    """Live per-interface network throughput and packet rates."""
    if interval is None:
        interval = settings.get('viewer.interval', DEFAULT_INTERVAL)

    try:
        run(interval)
    except KeyboardInterrupt:
        # Clean exit on Ctrl+C
        pass
    except NdevTopError as e:
        console = Console(stderr=True)
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if isinstance(e, FatalRenderError):
            logger.exception("Fatal error")
        sys.exit(1)
