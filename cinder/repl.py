"""Line-based read-eval-print loop for Cinder."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from cinder.errors import CinderError
from cinder.interpreter import Interpreter
from cinder.printer import to_string

logger = logging.getLogger(__name__)


class Repl:
    HISTORY_LENGTH = 1000

    def __init__(
        self,
        interpreter: Interpreter,
        prompt: str = "cinder> ",
        history_file: Optional[Path] = None,
    ):
        self.interpreter = interpreter
        self.prompt = prompt
        self.history_file = history_file
        self.hlen = 0

    def complete(self, text, state):
        names = sorted(str(k) for k in self.interpreter.env.vars)
        m = [k for k in names if k.startswith(text)]
        try:
            return m[state]
        except IndexError:
            return None

    def start(self):
        """Hook up readline completion and persistent history."""
        import readline

        readline.set_completer(self.complete)
        readline.set_completer_delims(" ();")
        readline.parse_and_bind("tab: complete")
        readline.set_history_length(self.HISTORY_LENGTH)

        if self.history_file is None:
            return
        try:
            if not self.history_file.exists():
                self.history_file.touch()
            readline.read_history_file(self.history_file)
            self.hlen = readline.get_current_history_length()
        except OSError as e:
            logger.warning("history disabled: %s", e)
            self.history_file = None

    def input(self) -> str:
        line = input(self.prompt)
        if self.history_file is not None:
            import readline

            nhlen = readline.get_current_history_length()
            try:
                readline.append_history_file(nhlen - self.hlen, self.history_file)
            except OSError as e:
                logger.warning("could not write history: %s", e)
            self.hlen = nhlen
        return line

    def eval_line(self, line: str) -> Optional[str]:
        """Evaluate one line and return the text to print, if any.

        Errors are rendered as text rather than raised, so a bad line never
        ends the session.
        """
        try:
            result = self.interpreter.eval(line)
        except CinderError as e:
            logger.debug("evaluation failed", exc_info=True)
            return f"error: {e}"
        except RecursionError:
            return "error: maximum recursion depth exceeded"
        if result is None:
            return None
        return to_string(result)

    def run(
        self,
        read_line: Optional[Callable[[], str]] = None,
        write: Callable[[str], None] = print,
    ) -> None:
        if read_line is None:
            read_line = self.input
        try:
            while True:
                try:
                    line = read_line()
                except EOFError:
                    break
                output = self.eval_line(line)
                if output is not None:
                    write(output)
        except KeyboardInterrupt:
            pass
