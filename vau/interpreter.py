from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal

from vau import Expression
from vau.builtin.env_builtin import make_world
from vau.config import get_prelude_paths, get_recursion_limit
from vau.evaluation.evaluator import evaluate
from vau.reader.parser import parse_all
from vau.types.environment import Environment
from vau.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates vau source text against one root environment.
    Definitions persist across calls.
    """

    def __init__(
        self,
        world: Environment | None = None,
        prelude: str | None | Literal['auto'] = 'auto',
    ):
        limit = get_recursion_limit()
        if limit is not None and sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

        self.world: Environment = world if world is not None else make_world()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self.load_prelude()
        elif prelude:
            self.eval_prelude(prelude)

    def load_prelude(self) -> None:
        """Evaluate each file named by VAU_PRELUDE_PATH, skipping missing ones."""
        for path in get_prelude_paths():
            if not path.is_file():
                logger.warning("prelude file %s not found, skipping", path)
                continue
            self.load_file(path)

    def load_file(self, path: str | Path) -> None:
        path = Path(path)
        logger.info("loading %s", path)
        self.eval_prelude(path.read_text(encoding='utf-8'))

    def eval_prelude(self, code: str) -> None:
        for expr in parse_all(code):
            evaluate(expr, self.world)

    def eval(self, code: str) -> Expression:
        results: list[Expression] = [evaluate(expr, self.world) for expr in parse_all(code)]
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results
