from __future__ import annotations
from pathlib import Path
from typing import Iterator, Tuple, Union

PathLike = Union[str, Path]


class InputReadError(OSError):
    """Raised when a line of the input is not valid UTF-8."""
    def __init__(self, path: PathLike, line_number: int, reason: str):
        super().__init__(f"{path}: cannot read line {line_number}: {reason}")
        self.path = path
        self.line_number = line_number


def line_byte_size(text: str) -> int:
    return len(text.encode("utf-8"))


def iter_lines(path: PathLike) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, text) for each line of `path`, starting at 1.

    Only the line terminator (\\n or \\r\\n) is removed. Open/read failures
    propagate as OSError and are meant to abort the run.
    """
    # binary mode: a lone \r is not a line break
    with open(path, "rb") as f:
        for ln, raw in enumerate(f, start=1):
            if raw.endswith(b"\n"):
                raw = raw[:-1]
                if raw.endswith(b"\r"):
                    raw = raw[:-1]
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise InputReadError(path, ln, str(e)) from e
            yield ln, text
