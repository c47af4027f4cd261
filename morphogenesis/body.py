"""
morphogenesis/body.py - Grow a tree of cells from a genome
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .alphabet import candidate_start_sequences
from .cell import Cell

logger = logging.getLogger(__name__)

MAX_CELLS = 50


def dominant_start_sequence(genome: str) -> str:
    """Start sequence occurring most often in ``genome``.

    Ties go to the earliest candidate. When no candidate occurs at all the
    first candidate is used, so every genome still yields a root.
    """
    candidates = candidate_start_sequences()
    best, best_count = candidates[0], 0
    for sequence in candidates:
        count = genome.count(sequence)
        if count > best_count:
            best, best_count = sequence, count
    return best


class Body:
    """The phenotype of a genome: every grown cell, rooted at generation 0"""

    def __init__(self, genome: str, max_cells: int = MAX_CELLS):
        if max_cells < 1:
            raise ValueError(f"max_cells must be at least 1, got {max_cells}")
        self.genome = genome
        self.max_cells = max_cells
        self.cells: List[Cell] = []
        self._scale: Optional[float] = None

        self.root = self.add_cell(dominant_start_sequence(genome))
        self._grow()
        self.update_coordinates()

    def add_cell(self, start_sequence: str, parent: Optional[Cell] = None) -> Cell:
        cell = Cell(self, start_sequence, parent)
        self.cells.append(cell)
        return cell

    def _grow(self) -> None:
        generation = 0
        while len(self.cells) < self.max_cells:
            frontier = [c for c in self.cells if c.generation == generation]
            created = 0
            for cell in frontier:
                remaining = self.max_cells - len(self.cells)
                if remaining <= 0:
                    break
                created += cell.gem(remaining)
            logger.debug("generation %d: %d new cells (%d total)",
                         generation, created, len(self.cells))
            if created == 0:
                break
            generation += 1

        pruned = sum(cell.prune() for cell in self.cells)
        if pruned:
            logger.debug("pruned %d unexpanded buds", pruned)

    @property
    def generations(self) -> int:
        """Number of generations present, the root's included"""
        return max(cell.generation for cell in self.cells) + 1

    def update_coordinates(self) -> None:
        self.root.update_coordinates(0.0, 0.0, 0.0)

    def animate(self, delta_time: float) -> None:
        """Advance every cell's stress state, then re-place the whole tree"""
        for cell in self.cells:
            cell.animate(delta_time)
        self.update_coordinates()

    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y) of the cell centres"""
        centres = np.array([(cell.x, cell.y) for cell in self.cells])
        min_x, min_y = centres.min(axis=0)
        max_x, max_y = centres.max(axis=0)
        return float(min_x), float(min_y), float(max_x), float(max_y)

    @property
    def scale(self) -> float:
        """Uniform factor fitting the body into a unit square.

        Computed from the cell centres on first access and fixed afterwards;
        it does not follow later calls to ``animate``.
        """
        if self._scale is None:
            min_x, min_y, max_x, max_y = self.bounds()
            extent = max(max_x - min_x, max_y - min_y) + self.root.width
            self._scale = 1.0 / (extent or 1.0)
        return self._scale

    def summary(self) -> Dict[str, Any]:
        min_x, min_y, max_x, max_y = self.bounds()
        return {
            'genome_length': len(self.genome),
            'start_sequence': self.root.start_sequence,
            'cells': len(self.cells),
            'generations': self.generations,
            'width': max_x - min_x,
            'height': max_y - min_y,
            'scale': self.scale,
        }

    def __len__(self):
        return len(self.cells)

    def __repr__(self):
        return f"Body(cells={len(self.cells)}, generations={self.generations})"
