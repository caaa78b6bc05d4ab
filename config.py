import logging
import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / 'lyrics' / 'data'

# recognizer text kept for display
MAX_TAIL_CHARS = 500
# longest snippet sent to the matcher when falling back to the transcript
MAX_SNIPPET_CHARS = 140

DEFAULT_LANGUAGE = 'pa-IN'

LOG_LEVEL = os.getenv('KIRTAN_LOG_LEVEL', 'WARNING').upper()
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logging(level=None):
    logging.basicConfig(level=(level or LOG_LEVEL), format=LOG_FORMAT)
