"""
Command-line entry point.

Trains a MarkovChain on a corpus file and either prints generated sequences
or summarises what was learned. Models are not saved between runs, so every
invocation trains from the corpus again.
"""
import logging
from pathlib import Path

import click

from . import config
from .corpus import load_corpus, train_from_corpus
from .errors import CorpusError, MarkovChainError
from .markov_chain import MarkovChain
from .random_source import RNG_KINDS, make_random_source
from .sampling import generate_bounded

logger = logging.getLogger(__name__)


def _build_model(corpus, order, rng, seed, words, weighted):
    mode = 'words' if words else 'chars'
    try:
        items = load_corpus(corpus, mode=mode, weighted=weighted)
    except (FileNotFoundError, CorpusError) as e:
        raise click.ClickException(str(e))
    try:
        source = make_random_source(rng, seed)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--rng')
    try:
        model = MarkovChain(order=order, rng=source)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--order')
    return train_from_corpus(model, items, progress=logger.isEnabledFor(logging.INFO))


def _format(symbols, words):
    return (' ' if words else '').join(str(symbol) for symbol in symbols)


corpus_option = click.option('--corpus', type=click.Path(dir_okay=False, path_type=Path), default=config.DEFAULT_CORPUS_PATH,
                             show_default=True, help="Training corpus (.json, or one sequence per line).")
order_option = click.option('--order', type=int, default=config.DEFAULT_ORDER, show_default=True,
                            help="Order of the Markov chain.")
words_option = click.option('--words', is_flag=True, help="Treat whitespace-separated words as symbols instead of characters.")
weighted_option = click.option('--weighted', is_flag=True, help="Corpus lines are '<count>\\t<text>'.")


@click.group()
@click.option('--log-level', default=config.LOG_LEVEL, show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False))
def main(log_level):
    """Train order-N Markov chains on sequences and sample new ones."""
    logging.basicConfig(level=log_level.upper(), format=config.LOG_FORMAT)


@main.command()
@corpus_option
@order_option
@words_option
@weighted_option
@click.option('--count', '-n', type=click.IntRange(min=1), default=config.DEFAULT_COUNT, show_default=True,
              help="Number of sequences to generate.")
@click.option('--max-length', type=click.IntRange(min=0), default=config.DEFAULT_MAX_LENGTH, show_default=True,
              help="Stop a sequence after this many symbols.")
@click.option('--seed', type=int, default=config.DEFAULT_SEED, help="Seed for the random source.")
@click.option('--rng', type=click.Choice(RNG_KINDS), default=config.DEFAULT_RNG, show_default=True,
              help="Random source to sample with.")
@click.option('--output', '-o', 'output_file', type=click.Path(dir_okay=False, writable=True, path_type=Path),
              help="Write sequences to this file instead of stdout.")
def generate(corpus, order, words, weighted, count, max_length, seed, rng, output_file):
    """Generate sequences from a model trained on CORPUS."""
    model = _build_model(corpus, order, rng, seed, words, weighted)

    lines = []
    for _ in range(count):
        try:
            symbols, terminated = generate_bounded(model, max_length)
        except MarkovChainError as e:
            click.secho(f"Generation failed: {e}", fg='red', err=True)
            raise SystemExit(1)
        if not terminated:
            logger.warning(f"Sequence truncated at {max_length} symbols")
        lines.append(_format(symbols, words))

    if output_file:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text('\n'.join(lines) + '\n', encoding='utf-8')
        click.secho(f"Wrote {len(lines)} sequences to {output_file}", fg='green', err=True)
    else:
        for line in lines:
            click.echo(line)


@main.command()
@corpus_option
@order_option
@words_option
@weighted_option
@click.option('--top', type=click.IntRange(min=0), default=10, show_default=True,
              help="How many of the busiest windows to list.")
def stats(corpus, order, words, weighted, top):
    """Summarise the transition table learned from CORPUS."""
    model = _build_model(corpus, order, config.DEFAULT_RNG, config.DEFAULT_SEED, words, weighted)
    click.echo(f"order: {model.order}")
    click.echo(f"windows: {len(model)}")

    busiest = sorted(model.transitions().items(), key=lambda kv: (-sum(kv[1].values()), kv[0]))[:top]
    for window, counts in busiest:
        successors = ', '.join(f"{outcome!r}: {c}" for outcome, c in counts.items())
        click.echo(f"{window!r} -> {{{successors}}}")
