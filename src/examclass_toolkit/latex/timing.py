"""
Module: latex.timing

Purpose:
    Timing instrumentation for filter runs, to see which pass dominates
    on large exam documents.

Key Classes:
    - TimingLog: Collects per-phase durations

Key Functions:
    - timed_phase: Context manager for timing code blocks

Dependencies:
    - time (std)
    - contextlib (std)
    - dataclasses (std)

Used By:
    - latex.pipeline: Filter orchestrator
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Generator

logger = logging.getLogger(__name__)


@dataclass
class TimingLog:
    """
    Timing metrics for one filter run.

    Attributes:
        phase_timings: Dict of phase_name -> duration_seconds

    Example:
        >>> log = TimingLog()
        >>> log.log_phase("transform", 0.004)
        >>> log.total
        0.004
    """
    phase_timings: Dict[str, float] = field(default_factory=dict)

    def log_phase(self, phase: str, duration: float) -> None:
        """Log a phase duration (repeated phases accumulate)."""
        self.phase_timings[phase] = self.phase_timings.get(phase, 0.0) + duration

    @property
    def total(self) -> float:
        return sum(self.phase_timings.values())

    def summary(self) -> str:
        """Generate human-readable timing summary."""
        lines = ["", "=== Filter Timing Summary ==="]
        for phase, duration in sorted(self.phase_timings.items(), key=lambda x: -x[1]):
            lines.append(f"  {phase:25s} {duration:.4f}s")
        lines.append(f"  {'total':25s} {self.total:.4f}s")
        lines.append("")
        return "\n".join(lines)


@contextmanager
def timed_phase(log: TimingLog, phase: str) -> Generator[None, None, None]:
    """
    Context manager for timing a code phase.

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "transform"):
        ...     blocks = transform_blocks(document.blocks)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        log.log_phase(phase, elapsed)
        logger.debug(f"Phase {phase} took {elapsed:.4f}s")
