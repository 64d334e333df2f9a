"""
BFS solver for finding shortest move sequences in any Configuration space.
"""

import time
from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..common.configuration import Configuration
from ..common.logger import logger
from ..common.settings import Settings


@dataclass
class BFSResult:
    """Result of BFS solving."""

    path: Optional[List[Configuration]]
    solution_length: int
    total_configs: int
    unique_configs: int
    time_taken_ms: float
    success: bool


class BFSSolver:
    """Breadth-first solver over any Configuration implementation.

    Positions are deduplicated by hash/equality only, so every reachable
    position is expanded at most once and the first solved position to reach
    the front of the queue lies at minimal distance from the start.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize BFS solver.

        Args:
            settings: Runtime settings; only progress_interval is used here
        """
        self.settings = settings or Settings()
        self.logger = logger.bind(component="bfs_solver")
        self._total_configs = 0
        self._unique_configs = 0

    @property
    def total_configs(self) -> int:
        """Successor positions generated by the last search, duplicates included."""
        return self._total_configs

    @property
    def unique_configs(self) -> int:
        """Distinct positions discovered by the last search, start included."""
        return self._unique_configs

    def find_path(self, start: Configuration) -> Optional[List[Configuration]]:
        """Find a shortest path from start to a solved configuration.

        Args:
            start: Configuration to search from

        Returns:
            Ordered list from start to a solution, or None if unreachable
        """
        self._total_configs = 0
        self._unique_configs = 1

        if start.is_solution():
            return [start]

        predecessors: Dict[Configuration, Optional[Configuration]] = {start: None}
        queue = deque([start])
        expanded = 0

        while queue and not queue[0].is_solution():
            current = queue.popleft()
            expanded += 1

            neighbors = current.get_neighbors()
            added = 0
            for neighbor in neighbors:
                self._total_configs += 1
                if neighbor not in predecessors:
                    predecessors[neighbor] = current
                    queue.append(neighbor)
                    added += 1

            self.on_expand(expanded, current, len(neighbors), added, len(queue))
            if expanded % self.settings.progress_interval == 0:
                self.logger.info(
                    f"Expanded {expanded} positions, "
                    f"{len(predecessors)} unique, {len(queue)} queued"
                )

        self._unique_configs = len(predecessors)

        if not queue:
            self.logger.debug(
                f"Search exhausted after {self._unique_configs} unique positions"
            )
            return None

        path = []
        config = queue[0]
        while config is not None:
            path.append(config)
            config = predecessors[config]
        path.reverse()
        return path

    def on_expand(
        self, expanded: int, current: Configuration, generated: int, added: int, queued: int
    ) -> None:
        """Called after each expansion; subclasses hook in per-node tracing here."""

    def solve(self, start: Configuration) -> BFSResult:
        """Find a shortest path and package it with search statistics.

        Args:
            start: Configuration to search from

        Returns:
            BFSResult with the path if one exists
        """
        start_time = time.time()
        self.logger.debug(f"Solving from:\n{start}")

        path = self.find_path(start)

        elapsed_ms = (time.time() - start_time) * 1000
        result = BFSResult(
            path=path,
            solution_length=len(path) - 1 if path else 0,
            total_configs=self.total_configs,
            unique_configs=self.unique_configs,
            time_taken_ms=elapsed_ms,
            success=path is not None,
        )
        self.logger.debug(
            f"Solved={result.success} moves={result.solution_length} "
            f"total={result.total_configs} unique={result.unique_configs} "
            f"in {elapsed_ms:.1f}ms"
        )
        return result
