import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("wordfinder")


class StageTimer:
    """Wall-clock timings and counters gathered over one find call.

    Stages are timed with ``with timer.stage(name):``; re-entering a stage adds
    to its total. Counters recorded with ``note`` are reported next to the
    timings in ``summary()``.
    """

    def __init__(self, label: str = "find"):
        self.label = label
        self.timings: dict[str, float] = {}
        self.counters: dict[str, int] = {}
        self._began_ns = time.perf_counter_ns()

    @contextmanager
    def stage(self, name: str):
        began = time.perf_counter_ns()
        try:
            yield self
        finally:
            ms = (time.perf_counter_ns() - began) / 1e6
            self.timings[name] = self.timings.get(name, 0.0) + ms
            logger.debug("%s %s took %.3fms", self.label, name, ms)

    def note(self, **counters: int) -> None:
        self.counters.update(counters)

    @property
    def total_ms(self) -> float:
        return (time.perf_counter_ns() - self._began_ns) / 1e6

    def summary(self) -> dict:
        report: dict = {name: round(ms, 3) for name, ms in self.timings.items()}
        report.update(self.counters)
        report["total"] = round(self.total_ms, 3)
        return report
