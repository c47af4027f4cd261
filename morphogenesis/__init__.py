"""
morphogenesis - Grow procedural bodies from symbol genomes and evolve them

A genome string is transcribed into cells that bud along three stems,
forming a tree of rectangles; a genetic algorithm breeds genomes under a
caller-supplied fitness function.
"""

__version__ = "0.1.0"
__author__ = "Morphogenesis Project"

from .alphabet import (
    ALPHABET, MORPHOGENS, STEMS, PROMOTERS,
    start_sequence_table, lookup_start_sequence, candidate_start_sequences
)
from .transcriber import Transcript, transcribe
from .cell import Cell, StemSlot
from .body import Body, MAX_CELLS, dominant_start_sequence
from .evolution import Evolution, random_population
from .fitness import FITNESS_FUNCTIONS, get_fitness_function

__all__ = [
    'ALPHABET', 'MORPHOGENS', 'STEMS', 'PROMOTERS',
    'start_sequence_table', 'lookup_start_sequence', 'candidate_start_sequences',
    'Transcript', 'transcribe',
    'Cell', 'StemSlot',
    'Body', 'MAX_CELLS', 'dominant_start_sequence',
    'Evolution', 'random_population',
    'FITNESS_FUNCTIONS', 'get_fitness_function',
]
