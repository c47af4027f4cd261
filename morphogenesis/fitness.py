"""
morphogenesis/fitness.py - Built-in fitness functions scoring grown bodies
"""
from typing import Callable, Dict

from .body import Body


def cell_count(genome: str) -> float:
    """Number of cells the genome grows"""
    return float(len(Body(genome)))


def height(genome: str) -> float:
    """How far the body reaches upward above its base"""
    body = Body(genome)
    # y grows downward, the root sits at y = 0
    top = min(cell.y - cell.height / 2 for cell in body.cells)
    return max(0.0, -top)


def spread(genome: str) -> float:
    """Horizontal extent of the cell centres"""
    min_x, _, max_x, _ = Body(genome).bounds()
    return max_x - min_x


FITNESS_FUNCTIONS: Dict[str, Callable[[str], float]] = {
    'cells': cell_count,
    'height': height,
    'spread': spread,
}


def get_fitness_function(name: str) -> Callable[[str], float]:
    try:
        return FITNESS_FUNCTIONS[name]
    except KeyError:
        raise ValueError(f"Unknown fitness function: {name}") from None
