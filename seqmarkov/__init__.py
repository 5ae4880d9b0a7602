from .errors import CorpusError, ImpossibleStateError, MarkovChainError
from .markov_chain import MarkovChain
from .random_source import MersenneTwisterSource, NumpyRandomSource, RandomSource, make_random_source
from .sampling import generate_bounded
from .window import MemoryWindow, Symbol, TERMINATOR, shift

__all__ = [
    'CorpusError',
    'ImpossibleStateError',
    'MarkovChain',
    'MarkovChainError',
    'MemoryWindow',
    'MersenneTwisterSource',
    'NumpyRandomSource',
    'RandomSource',
    'Symbol',
    'TERMINATOR',
    'generate_bounded',
    'make_random_source',
    'shift',
]
