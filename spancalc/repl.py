# --------------------------
# REPL, History, Help
# --------------------------

from __future__ import annotations

import logging
import sys
from typing import Dict, Iterator, Optional, TextIO, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory
from prompt_toolkit.input import Input
from prompt_toolkit.output import Output

from spancalc.calculator import Calculator
from spancalc.config import CalculatorSettings
from spancalc.diagnostics import format_diagnostic
from spancalc.errors import CalcError

logger = logging.getLogger(__name__)

_HELP_TOPICS: Dict[str, str] = {
    'general': (
        "Integer calculator help:\n"
        "Type an expression and press Enter. Errors underline the offending input.\n"
        "Examples:\n"
        "  1 + 2 * 3 - -10  -> 17\n"
        "  (1 + 2) * 3      -> 9\n"
        "  7 / -2           -> -3\n"
        "Commands:\n"
        "  :help, help [topic]    show help (topics: operators)\n"
        "  :exit, :quit           exit\n"
    ),
    'operators': (
        "Operators and precedence (high -> low):\n"
        "  ( )\n"
        "  prefix: + -   (one per operand; write -(-1) for a double negation)\n"
        "  * /           (division truncates toward zero)\n"
        "  + -\n"
        "Values are signed 64-bit integers; results outside that range are errors.\n"
    ),
}


def show_help(topic: Optional[str] = None) -> str:
    """Return help text for topic or general if None."""
    if not topic:
        return _HELP_TOPICS['general']
    return _HELP_TOPICS.get(topic.lower(), f"No help available for topic '{topic}'")


class REPL:
    """Read-Eval-Print Loop for the calculator."""

    def __init__(self, settings: Optional[CalculatorSettings] = None,
                 stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None,
                 prompt_input: Optional[Input] = None,
                 prompt_output: Optional[Output] = None):
        self.settings = settings or CalculatorSettings(history_file="")
        self.calculator = Calculator(rpn=self.settings.rpn)
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        # set to drive the prompt_toolkit session from something other than a tty
        self.prompt_input = prompt_input
        self.prompt_output = prompt_output
        self.session: Optional[PromptSession] = None

    def _process_command(self, line: str) -> Optional[str]:
        """Return the response for `:cmd` or `help` lines, None for expressions.

        Raises EOFError for :exit and :quit.
        """
        s = line.strip()
        if s.startswith(':'):
            parts = s[1:].split(None, 1)
            if not parts:
                return "No command specified. Use :help for available commands."
            cmd = parts[0].lower()
            if cmd in {'exit', 'quit'}:
                raise EOFError()
            if cmd == 'help':
                return show_help(parts[1].strip() if len(parts) > 1 else None)
            return f"Unknown command: {parts[0]}"
        if s.lower() == 'help' or s.lower().startswith('help '):
            parts = s.split(None, 1)
            return show_help(parts[1].strip() if len(parts) > 1 else None)
        return None

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """Evaluate a single line (either command or expression). Returns (ok, output)."""
        cmd_out = self._process_command(line)
        if cmd_out is not None:
            return True, cmd_out
        try:
            return True, self.calculator.run_line(line)
        except CalcError as e:
            return False, format_diagnostic(e, line)

    def _interactive_lines(self) -> Iterator[str]:
        if self.session is None:
            history = (FileHistory(self.settings.history_file)
                       if self.settings.history_file else InMemoryHistory())
            self.session = PromptSession(history=history, input=self.prompt_input,
                                         output=self.prompt_output)
        while True:
            try:
                yield self.session.prompt(self.settings.prompt)
            except KeyboardInterrupt:
                continue
            except EOFError:
                return

    def _piped_lines(self) -> Iterator[str]:
        for line in self.stdin:
            yield line.rstrip("\n")

    def lines(self) -> Iterator[str]:
        if self.prompt_input is not None or self.stdin.isatty():
            return self._interactive_lines()
        return self._piped_lines()

    def repl_loop(self) -> None:
        """Run until input is exhausted or :exit; a failing line never stops the loop."""
        logger.info("starting REPL (mode=%s)", "rpn" if self.settings.rpn else "eval")
        count = 0
        try:
            for line in self.lines():
                if not line.strip():
                    continue
                count += 1
                ok, out = self.evaluate_line(line)
                print(out, file=self.stdout if ok else self.stderr)
        except EOFError:
            pass
        logger.info("REPL finished after %d lines", count)
