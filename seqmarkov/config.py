import os
from pathlib import Path

# --- Path Configuration ---
# Use the SEQMARKOVHOME env var for the project root, with a fallback.
PROJECT_ROOT = Path(os.environ.get('SEQMARKOVHOME', Path(__file__).parent.parent))
TRAINING_DATA_DIR = PROJECT_ROOT / 'training_data'
DEFAULT_CORPUS_PATH = TRAINING_DATA_DIR / 'corpus.txt'


def _env_int(name, default):
    value = os.environ.get(name)
    if value is None or value == '':
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {value!r}")


# --- Model Configuration ---
DEFAULT_ORDER = _env_int('SEQMARKOV_ORDER', 2)
DEFAULT_SEED = _env_int('SEQMARKOV_SEED', None)
DEFAULT_RNG = os.environ.get('SEQMARKOV_RNG', 'mt')

# --- Generation Configuration ---
# The model itself never stops a runaway sequence; the CLI caps output here.
DEFAULT_MAX_LENGTH = _env_int('SEQMARKOV_MAX_LENGTH', 1000)
DEFAULT_COUNT = 1

# --- Logging ---
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_LEVEL = os.environ.get('SEQMARKOV_LOG_LEVEL', 'INFO').upper()
