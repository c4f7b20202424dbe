"""Blocking adapter that runs client coroutines to completion."""

import asyncio
import logging
import threading
from collections.abc import Coroutine
from typing import Any, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")


class LoopRunner:
    """
    Owns an event loop on a background thread and runs coroutines on it.

    Callers block on the result, so blocking calls work the same from plain
    threads and from code that already has a running loop.
    """

    def __init__(self, name: str = "fred-graph-loop") -> None:
        self._name = name
        self._lock = threading.Lock()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        """Lazy-start the loop thread."""
        with self._lock:
            if self._loop is None:
                loop = asyncio.new_event_loop()
                thread = threading.Thread(
                    target=self._serve, args=(loop,), name=self._name, daemon=True
                )
                thread.start()
                self._loop, self._thread = loop, thread
                logger.debug(f"Started {self._name}")
            return self._loop

    @staticmethod
    def _serve(loop: asyncio.AbstractEventLoop) -> None:
        asyncio.set_event_loop(loop)
        loop.run_forever()

    def run(self, coro: Coroutine[Any, Any, T]) -> T:
        """Run a coroutine on the loop thread and wait for its result."""
        loop = self.loop
        if threading.current_thread() is self._thread:
            coro.close()
            raise RuntimeError(
                "Blocking FRED call made from inside the client's own event loop; "
                "await the async method instead"
            )
        return asyncio.run_coroutine_threadsafe(coro, loop).result()

    def close(self) -> None:
        """Stop the loop thread."""
        with self._lock:
            loop, thread = self._loop, self._thread
            self._loop = self._thread = None
        if loop is None:
            return
        loop.call_soon_threadsafe(loop.stop)
        if thread is not None:
            thread.join()
        loop.close()
        logger.debug(f"Stopped {self._name}")
