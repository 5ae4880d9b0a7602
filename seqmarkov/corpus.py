"""
Loading training corpora from disk.

Two layouts are understood:

* ``.json`` files holding a list of strings, or a list of objects with a
  ``text`` (or ``st``) field and an optional ``weight``.
* Any other file: one sequence per non-blank line. With ``weighted=True``
  each line is ``<count>\\t<text>``.
"""
import json
import logging
from pathlib import Path

from tqdm import tqdm

from .errors import CorpusError

logger = logging.getLogger(__name__)

TOKENIZERS = ('chars', 'words')


def tokenize(text, mode='chars'):
    """Split text into symbols: one per character, or one per whitespace-separated word."""
    if mode == 'chars':
        return list(text)
    if mode == 'words':
        return text.split()
    raise ValueError(f"Unknown tokenizer '{mode}'. Expected one of: {', '.join(TOKENIZERS)}")


def _check_weight(weight, path, lineno):
    if weight < 1:
        raise CorpusError(f"{path}:{lineno}: weight must be positive, got {weight}")
    return weight


def _parse_weight(raw, path, lineno):
    """Weight from the text before the tab of a weighted line."""
    try:
        weight = int(raw)
    except ValueError:
        raise CorpusError(f"{path}:{lineno}: weight must be an integer, got {raw!r}")
    return _check_weight(weight, path, lineno)


def _json_weight(raw, path, index):
    # JSON gives us typed values; 2.7, true and "3" are all rejected
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise CorpusError(f"{path}:{index}: weight must be an integer, got {raw!r}")
    return _check_weight(raw, path, index)


def _load_json(path, mode):
    with open(path, 'r', encoding='utf-8') as f:
        try:
            json_data = json.load(f)
        except json.JSONDecodeError as e:
            raise CorpusError(f"{path}: invalid JSON: {e}")
    if not isinstance(json_data, list):
        raise CorpusError(f"{path}: expected a JSON list of sequences")

    for index, item in enumerate(json_data, start=1):
        if isinstance(item, str):
            text, weight = item, 1
        elif isinstance(item, dict):
            text = item.get('text', item.get('st'))
            if not isinstance(text, str):
                raise CorpusError(f"{path}:{index}: entry has no 'text' field")
            weight = _json_weight(item.get('weight', 1), path, index)
        else:
            raise CorpusError(f"{path}:{index}: unsupported entry {item!r}")
        yield tokenize(text.strip(), mode), weight


def _load_lines(path, mode, weighted):
    with open(path, 'r', encoding='utf-8') as f:
        for lineno, line in enumerate(f, start=1):
            line = line.rstrip('\r\n')
            if not line.strip():
                continue
            if weighted:
                raw_weight, sep, text = line.partition('\t')
                if not sep:
                    raise CorpusError(f"{path}:{lineno}: expected '<count>\\t<text>'")
                weight = _parse_weight(raw_weight.strip(), path, lineno)
            else:
                text, weight = line, 1
            yield tokenize(text.strip(), mode), weight


def load_corpus(path, mode='chars', weighted=False):
    """
    Read a corpus file and return a list of (sequence, weight) tuples.

    Raises:
        FileNotFoundError: the corpus file does not exist.
        CorpusError: the file exists but can't be parsed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Corpus file not found at {path}")
    if path.suffix == '.json':
        items = list(_load_json(path, mode))
    else:
        items = list(_load_lines(path, mode, weighted))
    logger.info(f"Loaded {len(items)} sequences from {path}")
    return items


def train_from_corpus(model, items, progress=True):
    """Feed (sequence, weight) tuples into `model`, with a progress bar."""
    count = 0
    for sequence, weight in tqdm(items, desc="Training", unit="seq", disable=not progress):
        model.train(sequence, weight)
        count += 1
    logger.info(f"Trained Markov Chain of order {model.order} on {count} sequences; {len(model)} windows")
    return model
