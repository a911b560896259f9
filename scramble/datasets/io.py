from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str, *, normalize: bool = False) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    With normalize=True, lines are trimmed and lowercased and blanks dropped.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    lines = [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]
    if normalize:
        lines = [ln.strip().lower() for ln in lines if ln.strip()]
    return lines


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line to a UTF-8 text file with a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out
