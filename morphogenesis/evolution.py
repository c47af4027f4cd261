"""
morphogenesis/evolution.py - Genetic algorithm over genome strings
"""
import logging
import math
import random
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

import numpy as np

from .alphabet import ALPHABET, STOP

logger = logging.getLogger(__name__)

FitnessFunction = Callable[[str], float]


def random_population(size: int, length: int, symbols: str = ALPHABET,
                      rng: Optional[random.Random] = None) -> List[str]:
    """``size`` genomes of ``length`` symbols drawn uniformly from ``symbols``"""
    rng = rng or random.Random()
    return [''.join(rng.choice(symbols) for _ in range(length))
            for _ in range(size)]


class Evolution:
    """Breeds successive generations of genomes under a fitness function.

    Fitness values are min-max normalised and penalised by genome length,
    parents are drawn by roulette selection, children are assembled from
    blocks of their parents' genomes and point mutated. Every random draw
    goes through ``rng`` so runs can be reproduced from a seed.

    Without ``initial_population`` a random population of ``population_size``
    genomes, ``genome_length`` symbols each, is drawn from ``genome_symbols``.
    """

    def __init__(self, fitness_function: FitnessFunction,
                 genome_symbols: str = ALPHABET,
                 break_symbol: str = STOP,
                 initial_population: Optional[Union[Mapping[str, float], Iterable[str]]] = None,
                 parent_count: int = 2,
                 mutation_rate: float = 0.01,
                 fitness_base: float = 0.8,
                 rng: Optional[random.Random] = None,
                 population_size: int = 40,
                 genome_length: int = 200):
        if parent_count < 1:
            raise ValueError(f"parent_count must be at least 1, got {parent_count}")
        if not 0.0 <= mutation_rate <= 1.0:
            raise ValueError(f"mutation_rate must be within [0, 1], got {mutation_rate}")
        if not genome_symbols:
            raise ValueError("genome_symbols must not be empty")

        self.fitness_function = fitness_function
        self.genome_symbols = genome_symbols
        self.break_symbol = break_symbol
        self.parent_count = parent_count
        self.mutation_rate = mutation_rate
        self.fitness_base = fitness_base
        self.rng = rng or random.Random()

        self.genomes: List[str] = []
        self.fitness: List[float] = []
        self.generation = 0
        self.history: List[Dict[str, Any]] = []

        if isinstance(initial_population, Mapping):
            self.genomes = list(initial_population.keys())
            self.fitness = [float(f) for f in initial_population.values()]
        elif initial_population is not None:
            self.genomes = list(initial_population)
            self.fitness = [0.0] * len(self.genomes)
        else:
            self.genomes = random_population(population_size, genome_length,
                                             genome_symbols, self.rng)
            self.fitness = [0.0] * len(self.genomes)

    @property
    def population(self) -> Dict[str, float]:
        """Genome -> fitness view of the current population"""
        return dict(zip(self.genomes, self.fitness))

    def __len__(self):
        return len(self.genomes)

    def test_pop(self) -> List[float]:
        """Evaluate every genome and store normalised, length-penalised fitness"""
        if not self.genomes:
            return []

        raw = [float(self.fitness_function(genome)) for genome in self.genomes]
        low, high = min(raw), max(raw)
        spread = (high - low) or 1.0
        max_length = max(len(genome) for genome in self.genomes) or 1

        self.fitness = [
            (value - low) / spread * self.fitness_base ** (len(genome) / max_length)
            for genome, value in zip(self.genomes, raw)
        ]

        stats = self.get_stats(raw)
        self.history.append(stats)
        logger.info("generation %d: raw fitness max=%.4f mean=%.4f, mean length %.1f",
                    self.generation, stats['raw_fitness']['max'],
                    stats['raw_fitness']['mean'], stats['length']['mean'])
        return self.fitness

    def pick_fit_parent(self) -> str:
        """Roulette wheel selection over the stored fitness values"""
        if not self.genomes:
            raise ValueError("cannot select a parent from an empty population")

        total = sum(self.fitness)
        if total > 0:
            remainder = self.rng.random() * total
            for genome, fitness in zip(self.genomes, self.fitness):
                remainder -= fitness
                if remainder <= 0:
                    return genome

        # Zero total fitness or rounding left a remainder: recover uniformly
        logger.debug("roulette selection degenerate (total fitness %r), "
                     "choosing uniformly", total)
        return self.rng.choice(self.genomes)

    def recombine(self) -> str:
        """Child genome made of blocks taken from ``parent_count`` fit parents"""
        chosen = []
        for _ in range(self.parent_count):
            blocks = self.pick_fit_parent().split(self.break_symbol)
            for _ in range(max(1, math.ceil(len(blocks) / self.parent_count))):
                chosen.append(self.rng.choice(blocks))
        return self.break_symbol.join(chosen)

    def mutate(self, genome: str, probability: Optional[float] = None) -> str:
        """Point-substitute ``max(1, ceil(len * p))`` random positions"""
        if not genome:
            return genome
        if probability is None:
            probability = self.mutation_rate

        symbols = list(genome)
        count = max(1, math.ceil(len(symbols) * probability))
        for _ in range(count):
            position = self.rng.randrange(len(symbols))
            symbols[position] = self.rng.choice(self.genome_symbols)
        return ''.join(symbols)

    def next_generation(self) -> None:
        """Score the current population and replace it with mutated offspring"""
        if not self.genomes:
            logger.warning("generation %d: population is empty, nothing to breed",
                           self.generation)
        self.test_pop()
        offspring = [self.mutate(self.recombine()) for _ in range(len(self.genomes))]
        self.genomes = offspring
        self.fitness = [0.0] * len(offspring)
        self.generation += 1

    def speciate(self) -> 'Evolution':
        """Move a random half of the population into a new, independent one"""
        moving = set(self.rng.sample(range(len(self.genomes)), len(self.genomes) // 2))

        species = Evolution(self.fitness_function,
                            genome_symbols=self.genome_symbols,
                            break_symbol=self.break_symbol,
                            initial_population=[self.genomes[i] for i in sorted(moving)],
                            parent_count=self.parent_count,
                            mutation_rate=self.mutation_rate,
                            fitness_base=self.fitness_base,
                            rng=self.rng)
        species.generation = self.generation

        self.genomes = [g for i, g in enumerate(self.genomes) if i not in moving]
        self.fitness = [f for i, f in enumerate(self.fitness) if i not in moving]
        return species

    def best(self) -> Optional[str]:
        """Highest fitness genome, first one on ties"""
        if not self.genomes:
            return None
        return self.genomes[int(np.argmax(self.fitness))]

    def get_stats(self, raw_fitness: Optional[List[float]] = None) -> Dict[str, Any]:
        """Population statistics, optionally including raw fitness values"""
        if not self.genomes:
            return {}

        lengths = [len(g) for g in self.genomes]
        stats = {
            'generation': self.generation,
            'population_size': len(self.genomes),
            'fitness': {
                'min': min(self.fitness),
                'max': max(self.fitness),
                'mean': float(np.mean(self.fitness)),
                'std': float(np.std(self.fitness)),
            },
            'length': {
                'min': min(lengths),
                'max': max(lengths),
                'mean': float(np.mean(lengths)),
                'std': float(np.std(lengths)),
            },
        }
        if raw_fitness is not None:
            stats['raw_fitness'] = {
                'min': min(raw_fitness),
                'max': max(raw_fitness),
                'mean': float(np.mean(raw_fitness)),
                'std': float(np.std(raw_fitness)),
            }
        return stats
