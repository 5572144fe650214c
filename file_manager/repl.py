"""
Interactive REPL driver for the file manager.

Prints the banner, then reads one line at a time, tokenizes it, hands it to
the command engine and prints whatever the engine rendered. The loop ends on
the 'exit' verb or end of input.
"""

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console

from file_manager.entities.command import tokenize
from file_manager.use_cases.shell.command_engine import CommandEngine

BANNER_LINES = ["", "File Manager", "Type 'help' for available commands"]


def create_console(file: Optional[TextIO] = None) -> Console:
    """Console with markup, emoji and highlighting disabled."""
    return Console(
        file=file,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def build_prompt(engine: CommandEngine) -> str:
    return f"{engine.working_directory}> "


class Repl:
    """Read-eval-print loop bound to a single command engine."""

    def __init__(
        self,
        engine: CommandEngine,
        console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
        collapse_whitespace: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        self._engine = engine
        self._console = console or create_console()
        self._stdin = stdin
        self._collapse_whitespace = collapse_whitespace
        self._logger = logger or logging.getLogger(__name__)

    def _read_line(self) -> Optional[str]:
        stream = self._stdin if self._stdin is not None else sys.stdin
        line = stream.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def _write(self, text: str) -> None:
        """Write text to the console stream unchanged (no tab expansion or control stripping)."""
        stream = self._console.file
        stream.write(text)
        stream.flush()

    def run(self) -> int:
        """
        Run the loop until 'exit' or end of input.

        Returns:
            Process exit status (always 0)
        """
        for line in BANNER_LINES:
            self._console.print(line)

        while True:
            self._write(f"\n{build_prompt(self._engine)}")
            try:
                line = self._read_line()
            except KeyboardInterrupt:
                self._write("\n")
                break
            if line is None:
                self._logger.info("End of input")
                break
            if not line:
                continue

            tokens = tokenize(line, self._collapse_whitespace)
            if not tokens:
                continue
            result = self._engine.execute(tokens[0], tokens[1:])
            for output in result.lines:
                self._write(f"{output}\n")
            if result.should_exit:
                break

        return 0
