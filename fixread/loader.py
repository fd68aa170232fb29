"""Load a text file into a normalized code-point buffer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .text import CodepointText

logger = logging.getLogger(__name__)


def load_text(path: Union[str, Path], encoding: str = "utf-8") -> CodepointText:
    """Read ``path`` and prepare it for paging.

    The content is NFC-normalized and Windows line endings are folded
    into ``\\n`` so every visual line break is exactly one code point.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnicodeDecodeError: If the file is not valid in ``encoding``.
    """
    path = Path(path)
    # newline="" keeps "\r\n" intact so the fold below sees it
    with open(path, "r", encoding=encoding, newline="") as f:
        raw = f.read()
    text = CodepointText(raw)
    folded = text.replace_all("\r\n", "\n")
    logger.info("Loaded %s: %d code points, %d line ending(s) unified",
                path, len(text), folded or 0)
    return text
