from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from matchle.corpus import Builder, BuildResult
from matchle.engine import Token

logger = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def read_words(p: Path | str) -> List[str]:
    """Word list as lowercase strings, blank lines dropped."""
    return [w.strip().lower() for w in read_lines(p) if w.strip()]


def load_corpus(p: Path | str, N: int | None = None) -> BuildResult:
    """
    Load a one-word-per-line file into a Corpus.

    If `N` is given, words of any other length are skipped (so a mixed file
    still builds); otherwise mixed lengths yield an INCONSISTENT_LENGTHS failure.
    """
    words = read_words(p)
    if N is not None:
        words = [w for w in words if len(w) == N]
    result = Builder.empty().add_all(Token.from_string(w) for w in words).build()
    if result.ok:
        logger.info("loaded %d tokens of length %d from %s",
                    len(result.corpus), result.corpus.word_size, p)
    else:
        logger.warning("could not build corpus from %s: %s", p, result.describe())
    return result
