"""
morphogenesis/cell.py - A single unit of growth in a body
"""
import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, TYPE_CHECKING

from .alphabet import (CODE_MORPHOGENS, EAST, GENERATION, MORPHOGENS, NORTH,
                       RISE, SOUTH, STEMS, STEM_LEFT, STEM_RIGHT, STEM_TOP,
                       TURN_LEFT, TURN_RIGHT, WIDEN, lookup_start_sequence)
from .transcriber import transcribe

if TYPE_CHECKING:
    from .body import Body

TAU = 2 * math.pi

# Trait expression
TURN_FACTOR = math.pi / 12
WIDTH_FACTOR = 1.15
HEIGHT_FACTOR = 1.15

# Budding
GEM_THRESHOLD = 3
GEM_GROWTH = 1.02
GENERATION_FACTOR = 1.5

# Animation
STRESS_ANGLE_AMPLITUDE = 0.17
STRESS_RATIO_BASE = 1.3

# (width coefficient, height coefficient, angle offset) per stem
STEM_GEOMETRY = {
    STEM_LEFT: (0.5, 0.0, -math.pi / 2),
    STEM_TOP: (0.0, 0.5, 0.0),
    STEM_RIGHT: (0.5, 0.0, math.pi / 2),
}


def direction(angle: float) -> Tuple[float, float]:
    """Unit vector for ``angle``; 0 points up on a y-down screen"""
    return math.sin(angle), -math.cos(angle)


@dataclass
class StemSlot:
    """Child slot on a stem: pending until ``cell`` is grown"""
    sequence: str
    cell: Optional['Cell'] = None

    @property
    def grown(self) -> bool:
        return self.cell is not None


class Cell:
    """Node of a body tree, expressed from one start sequence of the genome"""

    def __init__(self, body: 'Body', start_sequence: str,
                 parent: Optional['Cell'] = None):
        self.body = body
        self.start_sequence = start_sequence
        self.parent = parent  # navigation only, the body owns every cell
        self.generation = parent.generation + 1 if parent is not None else 0
        self.children: Dict[str, StemSlot] = {}

        transcript = transcribe(body.genome, start_sequence)
        self.expression = transcript.histogram
        self.stems = transcript.stems

        # Traits and budding read the raw counts, so normalise last
        self._express_traits()
        self._bud()
        self._normalize_expression()

        self.stress_angle = 0.0
        self.stress_ratio = 1.0
        self.phase_angle = 0.0
        self.phase_ratio = 0.0

        self.angle = 0.0
        self.width = self.relax_width
        self.height = self.relax_height
        self.x = 0.0
        self.y = 0.0

    def _express_traits(self) -> None:
        counts = self.expression
        self.relax_angle = (counts[TURN_RIGHT] - counts[TURN_LEFT]) * TURN_FACTOR
        self.relax_width = WIDTH_FACTOR ** counts[WIDEN]
        self.relax_height = HEIGHT_FACTOR ** counts[RISE]

    def _bud(self) -> None:
        threshold = GEM_THRESHOLD * GEM_GROWTH ** self.generation
        for stem in STEMS:
            morphogens = self.stems[stem]
            if sum(morphogens[m] for m in CODE_MORPHOGENS) < threshold:
                break
            morphogens[GENERATION] = self.generation * GENERATION_FACTOR
            hierarchy = ''.join(sorted(MORPHOGENS, key=lambda m: morphogens[m]))
            self.children[stem] = StemSlot(lookup_start_sequence(hierarchy))

    def _normalize_expression(self) -> None:
        peak = max(self.expression.values()) or 1
        for symbol in self.expression:
            self.expression[symbol] /= peak

    @property
    def pending_stems(self):
        return [stem for stem, slot in self.children.items() if not slot.grown]

    def gem(self, limit: Optional[int] = None) -> int:
        """Grow pending children, at most ``limit`` of them; returns the count"""
        created = 0
        for stem in STEMS:
            slot = self.children.get(stem)
            if slot is None or slot.grown:
                continue
            if limit is not None and created >= limit:
                break
            slot.cell = self.body.add_cell(slot.sequence, self)
            created += 1
        return created

    def prune(self) -> int:
        """Drop children that were never grown"""
        pending = self.pending_stems
        for stem in pending:
            del self.children[stem]
        return len(pending)

    def update_coordinates(self, x: float, y: float, angle: float) -> None:
        """Place this cell with its base at (x, y) and recurse into children"""
        self.width = self.relax_width * self.stress_ratio
        self.height = self.relax_height / self.stress_ratio
        self.angle = (angle + self.relax_angle + self.stress_angle) % TAU

        dx, dy = direction(self.angle)
        self.x = x + dx * self.height / 2
        self.y = y + dy * self.height / 2

        for stem, slot in self.children.items():
            if not slot.grown:
                continue
            width_coeff, height_coeff, offset = STEM_GEOMETRY[stem]
            stem_angle = self.angle + offset
            distance = width_coeff * self.width + height_coeff * self.height
            sx, sy = direction(stem_angle)
            slot.cell.update_coordinates(self.x + sx * distance,
                                         self.y + sy * distance,
                                         stem_angle)

    def animate(self, delta: float) -> None:
        """Advance the stress oscillators; the root stays rigid"""
        if self.parent is None:
            return
        self.phase_angle = (self.phase_angle + delta * self.expression[SOUTH]) % TAU
        self.phase_ratio = (self.phase_ratio + delta * self.expression[EAST]) % TAU
        self.stress_angle = (STRESS_ANGLE_AMPLITUDE * math.sin(self.phase_angle)
                             * self.expression[NORTH])
        self.stress_ratio = STRESS_RATIO_BASE ** math.sin(self.phase_ratio)

    def color(self) -> Tuple[int, int, int]:
        """Display colour from the n, s and e expression levels"""
        return tuple(int(round(255 * self.expression[m])) for m in (NORTH, SOUTH, EAST))

    def __repr__(self):
        return (f"Cell(gen={self.generation}, seq={self.start_sequence!r}, "
                f"children={''.join(self.children)!r})")
