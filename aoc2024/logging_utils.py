"""aoc2024.logging_utils
=========================

Failure log: one JSON line per failed run so broken inputs can be revisited
later.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union


def log_failure(day: int, input_path: Union[str, Path], error: BaseException, path: Union[str, Path]) -> None:
    """Append a JSON line describing a failed ``day`` run to ``path``."""

    entry = {
        "day": day,
        "input_path": str(input_path),
        "error_type": type(error).__name__,
        "error": str(error),
    }
    with Path(path).open("a") as handle:
        handle.write(json.dumps(entry) + "\n")


__all__ = ["log_failure"]
