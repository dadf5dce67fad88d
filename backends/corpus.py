"""Loading of the static documentation corpus."""

import logging
from pathlib import Path
from typing import Union

from backends.models import Corpus

logger = logging.getLogger(__name__)


class CorpusLoadError(RuntimeError):
    """Raised when the corpus file cannot be read at startup."""


def load_corpus(path: Union[str, Path]) -> Corpus:
    """Read a text document fully into memory.

    Args:
        path: Path to a UTF-8 text file

    Returns:
        Immutable corpus holding the file text verbatim

    Raises:
        CorpusLoadError: If the file is missing, unreadable or not valid UTF-8
    """
    path = Path(path)
    if not path.is_file():
        raise CorpusLoadError(f"Corpus file not found: {path}")

    try:
        # newline="" keeps line endings exactly as stored on disk
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusLoadError(f"Failed to read corpus file {path}: {e}") from e

    corpus = Corpus(text=text, source=str(path))
    logger.info(f"Loaded corpus {path} ({len(corpus.lines)} lines)")
    return corpus
