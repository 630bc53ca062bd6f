from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List, Optional


def paths_from_env(var: str, defaults: Iterable[Path] = ()) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_paths() -> List[Path]:
    """Source files evaluated by Interpreter(prelude='auto'), in order."""
    return paths_from_env('VAU_PRELUDE_PATH')


def get_recursion_limit() -> Optional[int]:
    """Minimum host recursion limit requested through VAU_RECURSION_LIMIT."""
    raw = os.environ.get('VAU_RECURSION_LIMIT', '').strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"VAU_RECURSION_LIMIT must be an integer, got {raw!r}") from None
    if limit <= 0:
        raise ValueError(f"VAU_RECURSION_LIMIT must be positive, got {limit}")
    return limit
