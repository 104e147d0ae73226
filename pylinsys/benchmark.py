"""
Benchmark harness for timing a function against input-size buckets.

Small inputs run too quickly to time a single call reliably, and large
inputs make many iterations impractical, so each bucket states its own
(input_size, iterations) pair.

Usage:
    runs = [RunInfo(100, 1000), RunInfo(1000, 100)]
    bench = Benchmark(make_matrix, rref, runs).run()
    for size, info in bench.run_infos.items():
        print(size, info.seconds_per_iteration)
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable

from pylinsys.core.compute.timing import Timer
from pylinsys.core.exceptions import ValidationError


@dataclass(frozen=True)
class RunInfo:
    """
    One benchmark bucket.

    Attributes:
        input_size: Argument passed to the input generator
        iterations: Number of calls of the function under test
        seconds_per_iteration: Mean wall-clock time per call; None until run
    """
    input_size: int
    iterations: int
    seconds_per_iteration: float | None = None

    def __post_init__(self) -> None:
        if self.input_size < 0:
            raise ValidationError(
                f"input_size: must be >= 0, got {self.input_size}"
            )
        if self.iterations < 1:
            raise ValidationError(
                f"iterations: must be at least 1, got {self.iterations}"
            )


class Benchmark:
    """
    Time ``dut`` on inputs produced by ``input_gen`` for each bucket.

    Two inputs are generated per bucket and the iterations alternate
    between them.

    Args:
        input_gen: Callable mapping an input size to an input
        dut: Function under test, called with one input
        runs: Iterable of RunInfo buckets
    """

    def __init__(
        self,
        input_gen: Callable[[int], Any],
        dut: Callable[[Any], Any],
        runs: Iterable[RunInfo],
    ):
        self._input_gen = input_gen
        self._dut = dut
        self._runs = list(runs)
        for run in self._runs:
            if not isinstance(run, RunInfo):
                raise ValidationError(
                    f"runs: expected RunInfo entries, got {type(run).__name__}"
                )
        self._run_infos: dict[int, RunInfo] = {}

    def run(self) -> 'Benchmark':
        """Run every bucket and record its timing. Returns self."""
        for run in self._runs:
            inputs = (self._input_gen(run.input_size), self._input_gen(run.input_size))

            timer = Timer()
            timer.start()
            for i in range(run.iterations):
                self._dut(inputs[i % 2])
            timer.stop()

            elapsed = timer.result()['total_seconds']
            self._run_infos[run.input_size] = replace(
                run, seconds_per_iteration=elapsed / run.iterations
            )
        return self

    @property
    def run_infos(self) -> dict[int, RunInfo]:
        """Input size -> RunInfo, in ascending input size."""
        return dict(sorted(self._run_infos.items()))
