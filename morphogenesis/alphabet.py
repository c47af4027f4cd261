"""
morphogenesis/alphabet.py - Genome symbols and the start-sequence hierarchy table
"""
import itertools
from functools import lru_cache
from types import MappingProxyType
from typing import List, Mapping

# Code morphogens
NORTH = 'n'
SOUTH = 's'
EAST = 'e'
WEST = 'w'
CODE_MORPHOGENS = NORTH + SOUTH + EAST + WEST

# Implicit generation morphogen, never a genome symbol
GENERATION = 'g'
MORPHOGENS = CODE_MORPHOGENS + GENERATION

# Stems in their fixed budding order
STEM_LEFT = '<'
STEM_TOP = '^'
STEM_RIGHT = '>'
STEMS = STEM_LEFT + STEM_TOP + STEM_RIGHT

# Promoters
STOP = ' '
TURN_LEFT = 'l'
TURN_RIGHT = 'r'
WIDEN = '-'
RISE = '|'
PROMOTERS = STOP + TURN_LEFT + TURN_RIGHT + WIDEN + RISE

ALPHABET = ''.join(sorted(CODE_MORPHOGENS + STEMS + PROMOTERS))

START_SEQUENCE_LENGTH = 2


@lru_cache(maxsize=None)
def start_sequence_table() -> Mapping[str, str]:
    """Map every morphogen ranking onto a two-symbol start sequence.

    Rankings are the permutations of MORPHOGENS, sequences are the
    2-combinations of ALPHABET. There are more rankings than sequences, so
    ranking ``i`` maps to sequence ``i % len(sequences)``.
    """
    sequences = [''.join(pair) for pair in
                 itertools.combinations(ALPHABET, START_SEQUENCE_LENGTH)]
    table = {}
    for index, ranking in enumerate(itertools.permutations(MORPHOGENS)):
        table[''.join(ranking)] = sequences[index % len(sequences)]
    return MappingProxyType(table)


def lookup_start_sequence(hierarchy: str) -> str:
    """Start sequence for a five-letter morphogen hierarchy string"""
    return start_sequence_table()[hierarchy]


@lru_cache(maxsize=None)
def _candidates() -> tuple:
    seen = dict.fromkeys(start_sequence_table().values())
    return tuple(seen)


def candidate_start_sequences() -> List[str]:
    """Distinct start sequences in first-seen table order"""
    return list(_candidates())
