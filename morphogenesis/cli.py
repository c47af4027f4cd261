"""
morphogenesis/cli.py - Command-line interface
"""
import logging
import os
import random
import time

import click

from .alphabet import ALPHABET, STOP
from .body import Body, MAX_CELLS
from .evolution import Evolution
from .fitness import FITNESS_FUNCTIONS, get_fitness_function
from .renderer import render_body, render_frames


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format='%(asctime)s %(name)s %(levelname)s: %(message)s')


@click.group()
def cli():
    """Morphogenesis - grow bodies from genomes and evolve them"""
    pass


@cli.command()
@click.argument('genome')
@click.option('--max-cells', default=MAX_CELLS, help='Cap on the number of cells')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def grow(genome, max_cells, verbose):
    """Grow a body from GENOME and describe it"""
    _configure_logging(verbose)
    try:
        body = Body(genome, max_cells=max_cells)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--max-cells')

    summary = body.summary()
    click.echo(f"Start sequence: {summary['start_sequence']!r}")
    click.echo(f"Cells: {summary['cells']}, Generations: {summary['generations']}")
    click.echo(f"Extent: {summary['width']:.3f} x {summary['height']:.3f}, "
               f"Scale: {summary['scale']:.4f}")

    if verbose:
        for cell in body.cells:
            click.echo(f"  gen {cell.generation} seq {cell.start_sequence!r} "
                       f"at ({cell.x:.2f}, {cell.y:.2f}) angle {cell.angle:.2f} "
                       f"stems {''.join(cell.children) or '-'}")


@cli.command()
@click.option('--generations', '-g', default=50, help='Number of generations to evolve')
@click.option('--population', '-p', default=40, type=click.IntRange(min=1), help='Population size')
@click.option('--length', '-l', default=200, help='Initial genome length')
@click.option('--fitness', '-f', type=click.Choice(sorted(FITNESS_FUNCTIONS)),
              default='cells', help='Built-in fitness function')
@click.option('--mutation-rate', default=0.01, help='Mutation probability per symbol (0.0-1.0)')
@click.option('--parents', default=2, help='Parents per child')
@click.option('--fitness-base', default=0.8, help='Length penalty base')
@click.option('--seed', type=int, default=None, help='Random seed')
@click.option('--out', '-o', default=None, help='Render the best body to this PNG')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def evolve(generations, population, length, fitness, mutation_rate, parents,
           fitness_base, seed, out, verbose):
    """Evolve a population of genomes"""
    _configure_logging(verbose)
    rng = random.Random(seed)

    click.echo(f"Starting evolution: {generations} generations, population {population}")
    click.echo(f"Fitness: {fitness}, genome length: {length}")

    fitness_function = get_fitness_function(fitness)
    try:
        evo = Evolution(fitness_function,
                        genome_symbols=ALPHABET,
                        break_symbol=STOP,
                        population_size=population,
                        genome_length=length,
                        parent_count=parents,
                        mutation_rate=mutation_rate,
                        fitness_base=fitness_base,
                        rng=rng)
    except ValueError as e:
        raise click.ClickException(str(e))

    start_time = time.time()
    for gen in range(generations):
        gen_start_time = time.time()
        evo.next_generation()
        stats = evo.history[-1]
        gen_time = time.time() - gen_start_time

        if verbose or gen % 10 == 0 or gen == generations - 1:
            click.echo(f"Gen {gen:3d}/{generations}: "
                       f"Best={stats['raw_fitness']['max']:.4f} "
                       f"Avg={stats['raw_fitness']['mean']:.4f} "
                       f"Length={stats['length']['mean']:.1f} "
                       f"Time={gen_time:.1f}s")

    evo.test_pop()
    best = evo.best()
    total_time = time.time() - start_time
    click.echo(f"\nEvolution completed in {total_time:.1f}s")

    if best is None:
        click.echo("Population is empty")
        return

    click.echo(f"Best genome ({len(best)} symbols, {fitness}={fitness_function(best):.4f}):")
    click.echo(repr(best))

    if out:
        directory = os.path.dirname(out)
        if directory:
            os.makedirs(directory, exist_ok=True)
        render_body(Body(best), filename=out)
        click.echo(f"Image saved: {out}")


@cli.command()
@click.argument('genome')
@click.option('--out', '-o', required=True, help='Output PNG, or directory with --frames')
@click.option('--size', default=512, help='Output size in pixels')
@click.option('--frames', default=0, help='Render an animation with N frames')
@click.option('--delta', default=0.1, help='Time step between animation frames')
def render(genome, out, size, frames, delta):
    """Render the body grown from GENOME"""
    body = Body(genome)

    if frames > 0:
        os.makedirs(out, exist_ok=True)
        for i, frame in enumerate(render_frames(body, frames, delta, size)):
            frame.save(os.path.join(out, f"frame_{i:04d}.png"))
        click.echo(f"Animation frames saved to: {out}/")
    else:
        render_body(body, size, filename=out)
        click.echo(f"Image saved: {out}")


if __name__ == '__main__':
    cli()
