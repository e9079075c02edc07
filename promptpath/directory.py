"""Path contraction and fish-style abbreviation for the prompt's directory segment."""

from __future__ import annotations

import os
import sys
from pathlib import PurePath, PurePosixPath, PureWindowsPath

import regex

HOME_SYMBOL = "~"

_GRAPHEME = regex.compile(r"\X")


def _is_windows() -> bool:
    return sys.platform.startswith("win")


def _as_path(path: str | os.PathLike[str]) -> PurePath:
    flavour = PureWindowsPath if _is_windows() else PurePosixPath
    return flavour(os.fspath(path))


def _to_slash(path: PurePath) -> str:
    """Render a path with forward slashes between its components."""
    if not isinstance(path, PureWindowsPath):
        return path.as_posix()
    names = path.parts[1:] if path.anchor else path.parts
    head = path.drive + ("/" if path.root else "")
    if not names:
        return head
    return head + ("/" if head else "") + "/".join(names)


def replace_c_dir(path: str) -> str:
    """Replace ``C:/`` with ``/c`` on Windows; return the path unchanged elsewhere."""
    if _is_windows():
        return path.replace("C:/", "/c")
    return path


def contract_path(
    full_path: str | os.PathLike[str],
    top_level_path: str | os.PathLike[str],
    top_level_replacement: str,
) -> str:
    """Replace the leading ``top_level_path`` of ``full_path`` with a replacement string.

    Paths outside ``top_level_path`` are returned in slash form, untouched otherwise.
    """
    full = _as_path(full_path)
    top = _as_path(top_level_path)

    if not full.is_relative_to(top):
        return replace_c_dir(_to_slash(full))

    if full == top:
        return replace_c_dir(top_level_replacement)

    remainder = _to_slash(full.relative_to(top))
    return f"{top_level_replacement}/{replace_c_dir(remainder)}"


def _trim_end_matches(text: str, suffix: str) -> str:
    if not suffix:
        return text
    while text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def _abbreviate(word: str, length: int) -> str:
    if not word:
        return ""
    graphemes = _GRAPHEME.findall(word)
    if len(graphemes) <= length:
        return word
    if word.startswith("."):
        return "".join(graphemes[: length + 1])
    return "".join(graphemes[:length])


def to_fish_style(pwd_dir_length: int, dir_string: str, truncated_dir_string: str) -> str:
    """Abbreviate each directory in front of the truncated part of a path.

    Every component of ``dir_string`` that precedes ``truncated_dir_string`` is cut
    to its first ``pwd_dir_length`` graphemes; hidden directories keep their dot.
    """
    remaining = _trim_end_matches(dir_string, truncated_dir_string)
    return "/".join(_abbreviate(word, pwd_dir_length) for word in remaining.split("/"))