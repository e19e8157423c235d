"""
Headless run for data collection without a display.
"""

import random
import time
from typing import Any, Dict, Optional

from ..analysis.metrics import group_metrics, calculate_aggregate_stats
from ..core.config import FlockConfig, HEADLESS_CONFIG
from ..core.flock import Flock

PROGRESS_INTERVAL = 1000


class HeadlessRun:
    """
    Advances a flock for a fixed number of ticks and records metrics.

    Metrics are sampled every ``trackingInterval`` ticks, starting with the
    initial state at tick 0.
    """

    def __init__(self, config: Optional[FlockConfig] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the run.

        Args:
            config: Flock configuration (uses the seeded headless defaults if None)
            rng: Random source passed through to the flock

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config if config is not None else HEADLESS_CONFIG.copy()
        self.flock = Flock(self.config, rng=rng)
        self.metrics_over_time = []
        self.elapsed = 0.0

    def _record(self) -> None:
        self.metrics_over_time.extend(group_metrics(self.flock.boids, self.flock.tick))

    def run(self, max_ticks: int, verbose: bool = True) -> Dict[str, Any]:
        """
        Run for the given number of ticks.

        Args:
            max_ticks: Ticks to simulate
            verbose: Print progress every thousand ticks

        Returns:
            Results dictionary with the sampled metrics and their aggregates
        """
        if verbose:
            print(f"Running {len(self.flock)} agents for {max_ticks} ticks...")

        start = time.time()
        # The initial state is sampled once; later calls resume from the last sample
        if not self.metrics_over_time and self.flock.tick == 0:
            self._record()

        for done in range(1, max_ticks + 1):
            self.flock.step()

            if self.flock.tick % self.config.trackingInterval == 0:
                self._record()

            if verbose and done % PROGRESS_INTERVAL == 0:
                elapsed = time.time() - start
                progress = (done / max_ticks) * 100
                print(f"  Progress: {progress:.1f}% ({done}/{max_ticks} ticks, "
                      f"{elapsed:.1f}s elapsed)")

        self.elapsed += time.time() - start
        return self.get_results()

    def get_results(self) -> Dict[str, Any]:
        """Collect the results of the run so far."""
        return {
            "ticks": self.flock.tick,
            "agent_count": len(self.flock),
            "elapsed_time_seconds": self.elapsed,
            "metrics_over_time": self.metrics_over_time,
            "aggregates": calculate_aggregate_stats(self.metrics_over_time),
            "config": self.flock.config_dict,
        }
