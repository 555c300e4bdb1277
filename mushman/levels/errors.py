from __future__ import annotations

from enum import StrEnum


class LoadErrorKind(StrEnum):
    bad_header = "bad_header"
    bad_format = "bad_format"
    invalid_character = "invalid_character"
    bad_checksum = "bad_checksum"
    missing_start = "missing_start"
    too_few_levels = "too_few_levels"
    not_found = "not_found"
    unreadable = "unreadable"


class LevelLoadError(RuntimeError):
    def __init__(self, kind: LoadErrorKind, message: str, *, line: int | None = None) -> None:
        super().__init__(message if line is None else f"line {line}: {message}")
        self.kind = kind
        self.line = line
