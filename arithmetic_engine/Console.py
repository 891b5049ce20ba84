# Console.py
""""Line-oriented front end for the arithmetic engine.

Responsibilities
----------------
- Read expressions from the user, one per line
- Optionally replay each line through the keypad input guards
- Dispatch the expression to MathEngine and print the rendered result
- Show "Error" (plus the reason when enabled) and keep accepting input

The engine is handed a plain string and gives back an EvalResult;
nothing is shared between two evaluations.
"""""

import logging
import sys

from . import InputGuard
from . import MathEngine
from . import config_manager as config_manager

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")
PROMPT = "> "


class Console:
    def __init__(self, settings=None, stdin=None, stdout=None):
        if settings is None:
            settings = config_manager.load_setting_value("all")
        self.settings = settings
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text):
        print(text, file=self.stdout)

    def prepare(self, line):
        """Return the text that actually reaches the engine."""
        if self.settings.get("input_guard"):
            display = InputGuard.type_keys(line)
            logger.debug("Input guard turned %r into %r", line, display)
            return display
        return line

    def evaluate_line(self, line):
        """Evaluate one line and print the outcome; returns the EvalResult."""
        result = MathEngine.evaluate(self.prepare(line))
        decimal_places = self.settings.get("decimal_places", MathEngine.DEFAULT_DECIMAL_PLACES)
        self.write(MathEngine.render(result, decimal_places))
        if not result.ok and self.settings.get("show_error_details"):
            self.write(f"  {result.error.code} {result.error.category}: {result.message}")
        return result

    def read_line(self):
        if self.stdin is sys.stdin:
            return input(PROMPT)
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")

    def run(self):
        """Read-evaluate-print until an empty line, 'exit'/'quit' or end of input."""
        while True:
            try:
                line = self.read_line()
            except (EOFError, KeyboardInterrupt):
                break
            if line.strip() == "" or line.strip().lower() in EXIT_COMMANDS:
                break
            self.evaluate_line(line)


def run_once(expression, settings=None):
    """Evaluate a single expression; returns the process exit code (0 ok, 1 error)."""
    result = Console(settings=settings).evaluate_line(expression)
    return 0 if result.ok else 1


def main(argv=None, settings=None):
    argv = sys.argv[1:] if argv is None else argv
    if argv:
        return run_once(" ".join(argv), settings=settings)
    Console(settings=settings).run()
    return 0
