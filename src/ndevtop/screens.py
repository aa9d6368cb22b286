"""
Screen classes for ndevtop.

Contains:
- MonitorScreen: Key help header, prompt line and the device rate table.
  It is the refresh loop's render surface and prompt session.
"""

import asyncio
from typing import List, Optional

from textual import events, on
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Input, Static

from src.utils.logger import get_logger
from src.utils.table_formatters import header_cells, row_cells

from .dispatch import InputMode, Verdict, dispatch
from .loop import RefreshLoop
from .widgets import DeviceTable, PromptInput

logger = get_logger(__name__)


class MonitorScreen(Screen):
    """Screen for the live device table."""

    def __init__(self):
        super().__init__()
        self.input_mode: InputMode = InputMode.COMMAND
        self.refresh_loop: Optional[RefreshLoop] = None
        self._answer: Optional[asyncio.Future] = None
        self._columns: List[str] = []

    def compose(self) -> ComposeResult:
        """Compose the monitoring UI."""
        with Container(id="ndev-container"):
            yield Static("", id="ndev-header")
            with Horizontal(id="prompt-row"):
                yield Static("", id="prompt-label")
                yield PromptInput(id="prompt", disabled=True)
            yield DeviceTable(id="device-table", cursor_type="none")

    def on_mount(self) -> None:
        """Start the refresh loop once the widgets exist."""
        self.query_one(DeviceTable).focus()
        self.refresh_loop = RefreshLoop(
            registry=self.app.registry,
            ranking=self.app.ranking,
            config=self.app.config,
            surface=self,
            prompt=self,
            on_quit=self.app.exit,
            filter_max_length=self.app.filter_max_length,
        )
        self.run_worker(self.refresh_loop.run(), name="refresh-loop", exclusive=True)

    def on_unmount(self) -> None:
        if self.refresh_loop is not None:
            self.refresh_loop.stop()

    # ---- render surface ----

    def render_header(self, text: str) -> None:
        self.query_one("#ndev-header", Static).update(text)

    def render_table(self, table: List[List[str]]) -> None:
        """Replace the table contents; the first row holds the headers."""
        if not table:
            return
        device_table = self.query_one(DeviceTable)
        header, rows = table[0], table[1:]

        if header != self._columns:
            device_table.clear(columns=True)
            device_table.add_columns(*header_cells(header))
            self._columns = list(header)
        else:
            device_table.clear()

        for row in rows:
            device_table.add_row(*row_cells(row), key=row[0])

    # ---- prompt session ----

    async def ask(self, label: str, numeric: bool = False, max_length: int = 0) -> Optional[str]:
        """Capture one line of text; blocks the caller until Enter or Escape."""
        prompt = self.query_one(PromptInput)
        self._answer = asyncio.get_running_loop().create_future()

        self.query_one("#prompt-label", Static).update(label)
        prompt.begin(numeric=numeric, max_length=max_length)
        self.input_mode = InputMode.TEXT_ENTRY
        prompt.focus()
        try:
            return await self._answer
        finally:
            self._answer = None
            self.query_one("#prompt-label", Static).update("")
            prompt.end()
            self.input_mode = InputMode.COMMAND
            self.query_one(DeviceTable).focus()

    def _resolve(self, value: Optional[str]) -> None:
        if self._answer is not None and not self._answer.done():
            self._answer.set_result(value)

    @on(Input.Submitted, "#prompt")
    def on_prompt_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._resolve(event.value)

    @on(PromptInput.Abandoned)
    def on_prompt_abandoned(self, event: PromptInput.Abandoned) -> None:
        event.stop()
        self._resolve(None)

    # ---- key dispatch ----

    def on_key(self, event: events.Key) -> None:
        """Route keys that reached the screen according to the input mode."""
        verdict = dispatch(self.input_mode, event.key, event.character)
        if verdict is Verdict.PASS:
            return

        event.stop()
        event.prevent_default()
        if verdict is Verdict.FORWARD and self.refresh_loop is not None:
            self.refresh_loop.submit(event.character)
