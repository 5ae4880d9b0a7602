from collections import defaultdict, Counter
from numbers import Integral
import logging

from .errors import ImpossibleStateError, MarkovChainError
from .random_source import MersenneTwisterSource
from .window import MemoryWindow, Symbol, TERMINATOR

logger = logging.getLogger(__name__)


def _check_weight(weight):
    if isinstance(weight, bool) or not isinstance(weight, Integral):
        raise ValueError(f"weight must be an integer, got {weight!r}")
    if weight < 1:
        raise ValueError(f"weight must be positive, got {weight!r}")
    return int(weight)


def _is_weighted(item):
    """True for (sequence, weight) pairs, False for plain sequences."""
    if not isinstance(item, tuple) or len(item) != 2:
        return False
    sequence, weight = item
    if isinstance(weight, bool) or not isinstance(weight, Integral):
        return False
    return isinstance(sequence, (str, list, tuple))


class MarkovChain:
    """
    Higher order markov chain over arbitrary hashable, orderable symbols.

    The model only ever stores integer occurrence counts; there is no
    finalisation step turning counts into probabilities, so it's fine to
    keep training while also generating.

    Each state is the window of the last `order` outcomes. Windows are
    padded with TERMINATOR at the start of a sequence, and TERMINATOR is
    also recorded as the successor of the last window of every trained
    sequence, which is what lets generation stop.
    """

    def __init__(self, order=2, rng=None, data=None):
        self._initial = MemoryWindow.initial(order)
        self.order = self._initial.order
        self.rng = rng if rng is not None else MersenneTwisterSource()
        self._transitions = defaultdict(Counter)
        if data is not None:
            self.train_many(data)

    # --- Training ---

    def train(self, sequence, weight=1):
        """
        Fold `sequence` into the model as if it had been seen `weight`
        times. Any iterable of symbols is accepted, including an empty one.
        """
        weight = _check_weight(weight)
        window = self._initial
        length = 0
        for value in sequence:
            symbol = Symbol(value)
            self._transitions[window][symbol] += weight
            window = window.shift(symbol)
            length += 1
        self._transitions[window][TERMINATOR] += weight
        logger.debug(f"Trained sequence of length {length} with weight {weight}; {len(self._transitions)} windows known")
        return self

    def train_text(self, text, weight=1):
        """Train with a string, one symbol per character."""
        return self.train(list(text), weight)

    def train_many(self, items):
        """
        Train with several items. Each item is a sequence, a string, or a
        (sequence, weight) tuple.
        """
        for item in items:
            if _is_weighted(item):
                sequence, weight = item
            else:
                sequence, weight = item, 1
            self.train(list(sequence), weight)
        return self

    def __lshift__(self, item):
        return self.train_many([item])

    # --- Generation ---

    def walk(self):
        """
        Lazily generate one sequence, yielding symbols as they are sampled.

        There is no length limit; stop consuming the iterator to bound it.

        Raises:
            ImpossibleStateError: a window was reached that training never
                produced (e.g. the model has not been trained).
        """
        window = self._initial
        produced = []
        while True:
            distribution = self._transitions.get(window)
            if distribution is None:
                raise ImpossibleStateError(window, produced)
            outcome = self._sample(distribution)
            if outcome is TERMINATOR:
                logger.debug(f"Generated sequence of length {len(produced)}")
                return
            produced.append(outcome.value)
            yield outcome.value
            window = window.shift(outcome)

    def generate(self):
        """Generate one complete sequence as a list."""
        return list(self.walk())

    def generate_text(self):
        """Generate one sequence and join its symbols into a string."""
        return ''.join(str(value) for value in self.walk())

    def _sample(self, distribution):
        total = sum(distribution.values())
        draw = self.rng.next_uint()
        if draw < 0:
            raise ValueError(f"Random source returned a negative value: {draw}")
        remaining = draw % total
        # Ascending key order keeps results reproducible for a given source
        for outcome in sorted(distribution):
            count = distribution[outcome]
            if remaining < count:
                return outcome
            remaining -= count
        raise MarkovChainError(f"Sampling overran distribution with total {total}")

    # --- Introspection ---

    def __len__(self):
        return len(self._transitions)

    def __contains__(self, window):
        return MemoryWindow(window) in self._transitions

    def __eq__(self, other):
        if not isinstance(other, MarkovChain):
            return NotImplemented
        return self.order == other.order and self._transitions == other._transitions

    __hash__ = None

    def distribution(self, window):
        """Copy of the successor counts recorded for `window`."""
        window = MemoryWindow(window)
        counts = self._transitions.get(window)
        if counts is None:
            raise KeyError(window)
        return dict(sorted(counts.items()))

    def total(self, window):
        return sum(self.distribution(window).values())

    def probabilities(self, window):
        """Relative frequency of each successor of `window`."""
        counts = self.distribution(window)
        total = sum(counts.values())
        return {outcome: count / total for outcome, count in counts.items()}

    def transitions(self):
        """Copy of the whole transition table, ordered by window."""
        return {window: dict(sorted(counts.items())) for window, counts in sorted(self._transitions.items())}

    def windows(self):
        return sorted(self._transitions)

    def __repr__(self):
        return f"MarkovChain(order={self.order}, windows={len(self._transitions)}, rng={self.rng!r})"
