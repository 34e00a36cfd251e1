"""
Wall-clock timing for the multiply path.

The backends own a Timer per call. The parallel kernel records its three
phases on it (partition, dispatch, concatenate) so a debug log shows
where a slow product spent its time.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer with named, accumulating sections.

    Sections are reported in the order they were first entered.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('dispatch'):
            blocks = run(bounds)
        timer.stop()
        timer.summary()
        # 'total=0.050000s dispatch=0.049900s'
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent inside the block to section `name`."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - start
            )

    @property
    def sections(self) -> tuple[str, ...]:
        """Names of the sections recorded so far."""
        return tuple(self._sections)

    def result(self) -> dict[str, float]:
        """
        Seconds per section plus 'total_seconds'.

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        result = {'total_seconds': self._total}
        result.update(self._sections)
        return result

    def summary(self) -> str:
        """One-line 'total=...s name=...s' rendering of result() for logs."""
        result = self.result()
        parts = [f"total={result.pop('total_seconds'):.6f}s"]
        parts.extend(f"{name}={seconds:.6f}s" for name, seconds in result.items())
        return ' '.join(parts)
