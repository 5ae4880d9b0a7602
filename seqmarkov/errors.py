class MarkovChainError(RuntimeError):
    """Base class for errors raised by seqmarkov."""


class ImpossibleStateError(MarkovChainError):
    """
    Raised when generation reaches a memory window that training never
    produced. On an untrained model this happens on the very first lookup.
    """

    def __init__(self, window, output=None):
        self.window = window
        self.output = list(output or [])
        super().__init__(f"impossible memory state in markov chain: {window!r}")


class CorpusError(MarkovChainError):
    """Raised when a training corpus file can't be parsed."""
