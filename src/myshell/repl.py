"""The read-print loop driving an evaluator."""

from __future__ import annotations

from typing import TextIO

from myshell.evaluator import Evaluator
from myshell.result import EXIT_SUCCESS
from myshell.util.logging import get_logger

DEFAULT_PROMPT = "$ "

_LOGGER = get_logger("myshell.repl")


def run_repl(
    evaluator: Evaluator,
    stdin: TextIO,
    stdout: TextIO,
    prompt: str = DEFAULT_PROMPT,
) -> int:
    """Prompt, read, evaluate and print until exit or end of input.

    Args:
        evaluator: Evaluator for each line.
        stdin: Stream lines are read from.
        stdout: Stream the prompt and command output are written to.
        prompt: Text written before each read.

    Returns:
        The exit status requested by the exit builtin, or 0 at end of input.
    """

    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            _LOGGER.debug("End of input reached.")
            return EXIT_SUCCESS
        line = line.rstrip("\r\n")

        result = evaluator.evaluate(line)
        if result.output:
            stdout.write(result.output + "\n")
            stdout.flush()
        if result.should_exit:
            return result.exit_code
