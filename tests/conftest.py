import random

import pytest

from morphogenesis import cell as cell_module
from morphogenesis.evolution import random_population

# "^e" occurs twice and dominates; each stem of the root gets exactly three
# morphogens, none of the children's start sequences occur in the genome.
FOUR_CELL_GENOME = "^e<nnn^sss>www^e"


@pytest.fixture
def four_cell_genome():
    return FOUR_CELL_GENOME


@pytest.fixture
def rich_genome():
    """Long random genome in which every start sequence occurs many times"""
    return random_population(1, 2000, rng=random.Random(99))[0]


@pytest.fixture
def always_bud(monkeypatch):
    """Every stem passes the budding threshold, so bodies grow to the cap"""
    monkeypatch.setattr(cell_module, 'GEM_THRESHOLD', 0)


@pytest.fixture
def rng():
    return random.Random(1234)
