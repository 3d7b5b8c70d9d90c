import logging
import time
import tracemalloc
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional
from satresolve.core.errors import SatResolveError

class Timer:
    """
    Records wall time (and traced memory, when tracemalloc is running) for
    nested named sections.
    """
    def __init__(self, logger: Optional[logging.Logger] = None, prefix: str = ""):
        self.logger = logger
        self.prefix = prefix
        self._stack: List[str] = []
        self._snaps: Dict[str, List[Dict[str, float]]] = {}
        self.timings: Dict[str, Dict[str, float]] = {}

    @property
    def current(self) -> Optional[str]:
        return self._stack[-1] if self._stack else None

    def _snap(self) -> Dict[str, float]:
        snap = {"time": time.perf_counter()}
        if tracemalloc.is_tracing():
            current, peak = tracemalloc.get_traced_memory()
            snap["memory"] = current
            snap["peak_memory"] = peak
        return snap

    def _log(self, message: str) -> None:
        if self.logger:
            self.logger.info(self.prefix + message)

    def begin(self, section: str) -> None:
        self._stack.append(section)
        self._snaps[section] = []
        self._log(f"Start timed {section}")
        self.lap()

    def lap(self) -> None:
        if not self._stack:
            raise SatResolveError("No started section to record lap for")
        self._snaps[self.current].append(self._snap())

    def end(self, section: str) -> Dict[str, float]:
        if not self._stack:
            raise SatResolveError("No started sections to end")
        if self.current != section:
            raise SatResolveError(f"Cannot end section {section} as the current section is {self.current}")

        self.lap()
        self._stack.pop()
        snaps = self._snaps.pop(section)
        first, last = snaps[0], snaps[-1]

        result = {"seconds": last["time"] - first["time"]}
        if "memory" in first and "memory" in last:
            result["memory_before_mb"] = first["memory"] / 1E6
            result["memory_peak_mb"] = last["peak_memory"] / 1E6
            self._log(
                f"Finish timed {section} {result['seconds']:.2f} seconds with "
                f"{(last['peak_memory'] - first['memory']) / 1E6:.2f} MB "
                f"({result['memory_before_mb']:.2f} MB -> {result['memory_peak_mb']:.2f} MB) memory usage."
            )
        else:
            self._log(f"Finish timed {section} {result['seconds']:.2f} seconds.")

        self.timings[section] = result
        return result

    @contextmanager
    def section(self, label: str) -> Iterator[Any]:
        self.begin(label)
        try:
            yield self
        finally:
            self.end(label)
