# =========================
# FILE: cookbook/services/text_normalizer.py
# =========================
from __future__ import annotations

import re
from typing import Callable, List

from cookbook.domain.errors import BlankName

_RE_SEPARATORS = re.compile(r"[-_]")
_RE_NOT_LETTER_OR_SPACE = re.compile(r"[^a-zA-Z ]")

TextTransformer = Callable[[str], str]


def _separators_to_space(text: str) -> str:
    return _RE_SEPARATORS.sub(" ", text)


def _keep_letters_and_spaces(text: str) -> str:
    return _RE_NOT_LETTER_OR_SPACE.sub("", text)


def _collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def _capitalise(text: str) -> str:
    words = []
    for word in text.split(" "):
        word = word.lower()
        words.append(word[:1].upper() + word[1:])
    return " ".join(words)


# order matters: separators must become spaces before non-letters are dropped
_PIPELINE: List[TextTransformer] = [
    _separators_to_space,
    _keep_letters_and_spaces,
    _collapse_whitespace,
    _capitalise,
]


def normalize(raw: str) -> str:
    """
    Turn a handwritten recipe name into a display name.

    "-Cold- Br3ad" -> "Cold Brad": digits are dropped, not read as letters.
    Raises BlankName when nothing is left.
    """
    text = raw or ""
    for transform in _PIPELINE:
        text = transform(text)
    if not text:
        raise BlankName(raw)
    return text
