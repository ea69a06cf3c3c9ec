from __future__ import annotations

import logging
from pathlib import Path

from cinder import LispValue
from cinder.reader.parser import read, read_all
from cinder.types.environment import Environment
from cinder.evaluation.evaluator import evaluate
from cinder.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Owns the global Environment and evaluates source text against it.
    Definitions persist across calls for the lifetime of the instance.
    """

    def __init__(self, builtins: bool = True):
        self.env: Environment = Environment()
        if builtins:
            register(self.env)

    def eval(self, line: str) -> LispValue | None:
        """Read and evaluate one expression; None for a blank line."""
        expr = read(line)
        if expr is None:
            return None
        return evaluate(expr, self.env)

    def eval_source(self, code: str) -> LispValue | None:
        """Evaluate every expression in `code`, returning the last value."""
        result = None
        for expr in read_all(code):
            result = evaluate(expr, self.env)
        return result

    def load(self, path: str | Path) -> LispValue | None:
        path = Path(path)
        logger.info("loading %s", path)
        return self.eval_source(path.read_text(encoding="utf-8"))
