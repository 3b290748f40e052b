"""Console feedback letting the user know the audit is progressing."""

import sys
import time
from typing import TextIO

from bad_contents_lister.checker.results import Code, Result
from bad_contents_lister.core.timing import human_duration


class ProgressReporter:
    """Print a dot every ``increment`` results and a step line regularly.

    A step line is printed every ``increment * steps`` results, and once
    more when the audit finishes.
    """

    def __init__(
        self, increment: int = 1024, steps: int = 64, stream: TextIO | None = None
    ):
        """Initialize the reporter.

        Args:
            increment: Number of results per dot
            steps: Number of dots per step line, at most 100
            stream: Where to print, defaults to stdout

        Raises:
            ValueError: If increment or steps are out of range
        """
        if increment <= 0:
            raise ValueError(f"increment must be positive, got {increment}")
        if not 0 < steps <= 100:
            raise ValueError(f"steps must be between 1 and 100, got {steps}")
        self.increment = increment
        self.max = increment * steps
        self.stream = stream if stream is not None else sys.stdout
        self.errors = 0
        # both reset after each step line
        self.count = 0
        self.start = time.perf_counter_ns()

    def on_result(self, result: Result) -> None:
        """Account for one verification outcome."""
        self.count += 1
        if result.code is not Code.OK:
            self.errors += 1
        if self.count == self.max:
            self._report()
        elif self.count % self.increment == 0:
            self.stream.write(".")
            self.stream.flush()

    def finish(self) -> None:
        """Print the last step line."""
        self._report()

    def _report(self) -> None:
        if self.count == 0:
            self.start = time.perf_counter_ns()
            return
        elapsed = time.perf_counter_ns() - self.start
        average = elapsed // self.count
        self.stream.write(
            f"step: {{count: {self.count}"
            f", elapsed: {human_duration(elapsed)}"
            f", avg: {human_duration(average)}"
            f", total errors: {self.errors}}}\n"
        )
        self.stream.flush()
        self.count = 0
        self.start = time.perf_counter_ns()
