"""
The refresh loop: the single coordinator of ndevtop.

It owns the poll timer and the key channel and turns every trigger into one
collect -> sort -> format -> render cycle. It is the only writer of the
device registry, the sort spec and the refresh config.

Each iteration waits on three sources and services exactly one of them:

- the timer task: refresh, then re-arm
- the key channel: cancel and drain the timer, act on the key (possibly
  awaiting a prompt), refresh, then re-arm from now
- the stop signal: tear down
"""

import asyncio
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional, Protocol

from src.stats.network_devices import DeviceRegistry
from src.utils.logger import get_logger
from src.utils.table_formatters import formatted_table
from src.utils.validators import validate_interval, validate_name_filter

from .constants import APP_NAME, FILTER_MAX_LENGTH, FILTER_PROMPT, INTERVAL_PROMPT
from .dispatch import KEY_FILTER, KEY_INTERVAL, KEY_QUIT, SORT_KEYS_BY_LETTER
from .exceptions import CollectError, ValidationError
from .models import RefreshConfig
from .ranking import RankingEngine

logger = get_logger(__name__)

KEY_HELP = (
    "keys: [b]q[/b]: quit, [b]d[/b]: set update interval, [b]f[/b]: set dev name filter\n"
    "      [b]h,l,j,k,g,G,Ctrl-F,Ctrl-B[/b]: scroll table, [b]n,N[/b]: sort by name (asc,desc)\n"
    "      [b]r,R[/b]: sort by RX bytes (asc,desc), [b]t,T[/b]: sort by TX bytes (asc,desc)\n"
    "      [b]i,I[/b]: sort by RX packets (asc,desc), [b]o,O[/b]: sort by TX packets (asc,desc)"
)


class LoopState(Enum):
    IDLE = "idle"
    COLLECTING = "collecting"
    MODAL_INPUT = "modal_input"
    STOPPED = "stopped"


class RenderSurface(Protocol):
    """Where the loop draws its output."""

    def render_header(self, text: str) -> None:
        ...

    def render_table(self, table: List[List[str]]) -> None:
        ...


class PromptSession(Protocol):
    """A modal line editor.

    ``ask`` returns the confirmed text, or None if the input was abandoned.
    """

    async def ask(self, label: str, numeric: bool = False, max_length: int = 0) -> Optional[str]:
        ...


class RefreshLoop:
    """Coordinates polling, key handling and prompts on one event loop."""

    def __init__(self, registry: DeviceRegistry, ranking: RankingEngine,
                 config: RefreshConfig, surface: RenderSurface,
                 prompt: PromptSession, on_quit: Optional[Callable[[], None]] = None,
                 filter_max_length: int = FILTER_MAX_LENGTH,
                 clock: Optional[Callable[[], datetime]] = None):
        self.registry = registry
        self.ranking = ranking
        self.config = config
        self.surface = surface
        self.prompt = prompt
        self.on_quit = on_quit
        self.filter_max_length = filter_max_length
        self.clock = clock or (lambda: datetime.now().astimezone())

        self.state = LoopState.IDLE
        self.events: asyncio.Queue = asyncio.Queue()
        self.last_table: Optional[List[List[str]]] = None

        self._stop = asyncio.Event()
        self._closed = False
        self._timer: Optional[asyncio.Future] = None
        self._next_event: Optional[asyncio.Future] = None
        self._stop_wait: Optional[asyncio.Future] = None

    @property
    def closed(self) -> bool:
        return self._closed

    # ---- inputs ----

    def submit(self, key: str) -> bool:
        """Queue a command key; returns False once the loop is closed."""
        if self._closed:
            return False
        self.events.put_nowait(key)
        return True

    def stop(self) -> None:
        """Ask the loop to tear down at its next iteration."""
        self._stop.set()

    # ---- one poll cycle ----

    def header_text(self) -> str:
        now = self.clock().isoformat(timespec="seconds")
        name_filter = self.config.name_filter or "-"
        return (
            f"{APP_NAME} - {now}  interval: {self.config.interval}s  filter: {name_filter}\n"
            f"{KEY_HELP}"
        )

    def refresh(self) -> bool:
        """Run collect -> sort -> format -> render once.

        Returns False if the poll failed; the table on screen is then left
        as it was.
        """
        self.state = LoopState.COLLECTING
        try:
            self.surface.render_header(self.header_text())
            try:
                records = self.registry.collect()
            except CollectError as e:
                logger.debug(f"Skipping render cycle: {e}")
                return False

            ordered = self.ranking.sort(records)
            table = formatted_table(ordered, self.config.name_filter, self.config.interval)
            self.surface.render_table(table)
            self.last_table = table
            return True
        finally:
            self.state = LoopState.IDLE

    # ---- key handling ----

    async def handle_key(self, key: str) -> None:
        if key in SORT_KEYS_BY_LETTER:
            sort_key, ascending = SORT_KEYS_BY_LETTER[key]
            self.ranking.set_sort_order(sort_key, ascending)
        elif key == KEY_INTERVAL:
            await self.ask_interval()
        elif key == KEY_FILTER:
            await self.ask_filter()
        else:
            logger.debug(f"Unhandled key {key!r}")

    async def _ask(self, label: str, numeric: bool, max_length: int) -> Optional[str]:
        self.state = LoopState.MODAL_INPUT
        try:
            return await self.prompt.ask(label, numeric=numeric, max_length=max_length)
        finally:
            self.state = LoopState.IDLE

    async def ask_interval(self) -> None:
        text = await self._ask(INTERVAL_PROMPT, numeric=True, max_length=0)
        if text is None:
            return
        try:
            interval = validate_interval(text)
        except ValidationError as e:
            logger.debug(f"Interval not changed: {e}")
            return
        logger.info(f"Refresh interval changed: {self.config.interval}s -> {interval}s")
        self.config.interval = interval

    async def ask_filter(self) -> None:
        text = await self._ask(FILTER_PROMPT, numeric=False, max_length=self.filter_max_length)
        if text is None:
            return
        try:
            self.config.name_filter = validate_name_filter(text, self.filter_max_length)
        except ValidationError as e:
            logger.debug(f"Filter not changed: {e}")

    # ---- scheduling ----

    def _arm_timer(self) -> asyncio.Future:
        self._timer = asyncio.ensure_future(asyncio.sleep(self.config.interval))
        return self._timer

    async def _drain_timer(self) -> None:
        """Cancel the pending timer, or consume a firing nobody serviced."""
        timer = self._timer
        self._timer = None
        if timer is None:
            return
        if not timer.done():
            timer.cancel()
        await asyncio.wait({timer})
        if not timer.cancelled():
            self._check_timer(timer)

    @staticmethod
    def _check_timer(timer: asyncio.Future) -> None:
        """Re-raise the error of a timer that failed instead of firing."""
        error = timer.exception()
        if error is not None:
            logger.error(f"Refresh timer failed: {error!r}")
            raise error

    async def run(self) -> None:
        """Run until the quit key or the stop signal; always tears down."""
        logger.info(f"Refresh loop started, interval={self.config.interval}s")
        try:
            self.refresh()
            self._arm_timer()
            self._next_event = asyncio.ensure_future(self.events.get())
            self._stop_wait = asyncio.ensure_future(self._stop.wait())

            while True:
                done, _ = await asyncio.wait(
                    {self._timer, self._next_event, self._stop_wait},
                    return_when=asyncio.FIRST_COMPLETED,
                )

                if self._stop_wait in done:
                    logger.info("Refresh loop stopped")
                    return

                if self._next_event in done:
                    key = self._next_event.result()
                    self._next_event = None
                    await self._drain_timer()
                    if key == KEY_QUIT:
                        logger.info("Quit requested")
                        return
                    await self.handle_key(key)
                    self.refresh()
                    self._arm_timer()
                    self._next_event = asyncio.ensure_future(self.events.get())
                    continue

                timer, self._timer = self._timer, None
                self._check_timer(timer)
                self.refresh()
                self._arm_timer()
        finally:
            self.close()

    def close(self) -> None:
        """Release the timer and the key channel and signal quit, once."""
        if self._closed:
            return
        self._closed = True
        self.state = LoopState.STOPPED

        for pending in (self._timer, self._next_event, self._stop_wait):
            if pending is not None and not pending.done():
                pending.cancel()
        self._timer = self._next_event = self._stop_wait = None

        if self.on_quit is not None:
            self.on_quit()
