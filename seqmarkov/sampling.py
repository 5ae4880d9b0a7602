"""Caller-side limits around MarkovChain generation."""
from itertools import islice


def generate_bounded(model, max_length):
    """
    Generate at most `max_length` symbols from `model`.

    Returns a ``(symbols, terminated)`` tuple; ``terminated`` is False when
    the cap was reached before the model sampled a terminator.
    """
    if max_length < 0:
        raise ValueError(f"max_length must be non-negative, got {max_length}")
    walk = model.walk()
    symbols = list(islice(walk, max_length))
    if len(symbols) < max_length:
        return symbols, True
    # Exactly at the cap: terminated only if the next step is the terminator
    try:
        next(walk)
    except StopIteration:
        return symbols, True
    finally:
        walk.close()
    return symbols, False
