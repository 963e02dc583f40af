"""Utility class for system specifications and resource management."""

import multiprocessing
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for determining system specifications and resource allocation."""

    @staticmethod
    def get_num_parallel_processes() -> int:
        """
        Number of worker processes used for batch verification.

        The CPU count divided by PARALLELISM_DIVISOR (default 2), never
        less than 1. A divisor below 1 is treated as 1.

        Returns:
            int: Number of parallel processes to use
        """
        parallelism_divisor = max(
            EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR), 1
        )
        return multiprocessing.cpu_count() // parallelism_divisor or 1  # at least one worker on single-core hosts
