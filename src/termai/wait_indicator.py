"""Terminal spinner shown while waiting for the first response byte."""

import asyncio
import sys
from typing import TextIO

from termai.constants import HIDE_CURSOR, ORANGE, SHOW_CURSOR
from termai.models.ai_config import DEFAULT_SPINNER_CHARS

SPINNER_INTERVAL_SECONDS = 0.1


class WaitIndicator:
    """Animate a one-glyph spinner as a task on the running event loop.

    Ticks and stream reads share one loop, so clearing ``_active`` in
    :meth:`cancel` is enough to guarantee no tick is written afterwards.
    """

    def __init__(
        self,
        frames: str = DEFAULT_SPINNER_CHARS,
        stream: TextIO | None = None,
        interval: float = SPINNER_INTERVAL_SECONDS,
    ) -> None:
        self._frames = frames or DEFAULT_SPINNER_CHARS
        self._stream = stream if stream is not None else sys.stdout
        self._interval = interval
        self._frame_index = 0
        self._active = False
        self._task: asyncio.Task[None] | None = None

    @property
    def active(self) -> bool:
        return self._active

    def start(self) -> None:
        """Hide the cursor and begin ticking; must be called inside a running loop."""
        if self._active:
            return
        self._active = True
        self._write(HIDE_CURSOR + ORANGE)
        self._task = asyncio.get_running_loop().create_task(self._run())

    def cancel(self) -> bool:
        """Stop the animation and restore the cursor. Returns False if already stopped."""
        if not self._active:
            return False
        self._active = False
        if self._task is not None:
            self._task.cancel()
        self._write("\r" + SHOW_CURSOR)
        return True

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            if not self._active:
                return
            self._tick()

    def _tick(self) -> None:
        frame = self._frames[self._frame_index % len(self._frames)]
        self._frame_index += 1
        self._write("\r" + frame)

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()
