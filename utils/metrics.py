"""Render timing."""

import time
from typing import Dict


class Timer:
    """Per-stage wall-clock timer for a render pass."""

    def __init__(self):
        self.stage_times_ms: Dict[str, float] = {}

    def measure(self, stage: str, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.stage_times_ms[stage] = (time.perf_counter() - start) * 1000.0
        return result

    @property
    def total_ms(self) -> float:
        return sum(self.stage_times_ms.values())
