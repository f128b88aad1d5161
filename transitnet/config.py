"""Configuration classes for transitnet path searches."""

import math
from dataclasses import dataclass

from transitnet.algorithms.base import PathAlgorithm


@dataclass
class PathSearchConfig:
    """Defaults shared by the shortest-path algorithms."""

    # Key given to every non-origin vertex when the heap is built
    heap_initial_key: float = math.inf

    # Run an extra Bellman-Ford pass and raise on a negative cycle
    detect_negative_cycles: bool = False

    # Strategy used by shortest_path() when none is given
    default_algorithm: PathAlgorithm = PathAlgorithm.HEAP


# Global configuration instance
SEARCH_CONFIG = PathSearchConfig()
