"""
    CommandProcessor — parses raw CLI strings and dispatches commands.

    Design Patterns
    ───────────────
    • Interpreter   – parses the CLI text into structured ``Command`` objects.
    • Facade        – single ``process(text)`` entry-point hides all parsing.
"""
from __future__ import annotations

import logging
import shlex
import sys
from typing import List, Optional, Tuple

from ..visualizer import Visualizer
from .commands import (
    Command,
    CommandResult,
    HelpCommand,
    ListCommand,
    RenderCommand,
)

logger = logging.getLogger(__name__)


class CommandProcessor:
    """
    Parses raw CLI input, creates ``Command`` objects and executes them.

    Usage:
        processor = CommandProcessor()
        result = processor.process("render people --stdout")
    """

    def __init__(self, visualizer: Optional[Visualizer] = None):
        self._visualizer = visualizer or Visualizer()

    # ── Public API ───────────────────────────────────────────────

    def process(self, text: str) -> CommandResult:
        """
        Parse and execute a single CLI command.

        Returns:
            ``CommandResult`` with success status and message.
        """
        text = self._strip_comments(text).strip()
        if not text:
            return CommandResult(False, "Empty command. Type 'help' for usage.")

        try:
            tokens = shlex.split(text)
        except ValueError:
            # Fallback: simple split if quotes are malformed
            tokens = text.split()
        return self.process_tokens(tokens)

    def process_tokens(self, tokens: List[str]) -> CommandResult:
        """Execute an already tokenized command (e.g. ``sys.argv[1:]``)."""
        if not tokens:
            return CommandResult(False, "Empty command. Type 'help' for usage.")
        try:
            command = self._parse(tokens)
        except ValueError as e:
            return CommandResult(False, f"Parse error: {e}")

        logger.debug("Executing %s", type(command).__name__)
        return command.execute(self._visualizer)

    # ── Comment handling ────────────────────────────────────────

    @staticmethod
    def _strip_comments(text: str) -> str:
        """
        Strip inline comments — everything after an unquoted ``#``.

        Example:
            >>> CommandProcessor._strip_comments("render avl   # tree")
            'render avl'
        """
        in_single = False
        in_double = False
        for i, ch in enumerate(text):
            if ch == "'" and not in_double:
                in_single = not in_single
            elif ch == '"' and not in_single:
                in_double = not in_double
            elif ch == '#' and not in_single and not in_double:
                return text[:i].rstrip()
        return text

    # ── Parser ───────────────────────────────────────────────────

    def _parse(self, tokens: List[str]) -> Command:
        """
        Parse tokens into a ``Command`` object.

        Raises:
            ValueError: If the tokens cannot be parsed.
        """
        verb = tokens[0].lower()

        if verb in ("help", "--help", "-h"):
            return HelpCommand()

        if verb == "list":
            target = tokens[1].lower() if len(tokens) > 1 else None
            if target not in (None, "samples", "emitters"):
                raise ValueError(f"Unknown list target: '{target}'. Use 'samples' or 'emitters'.")
            return ListCommand(target)

        if verb == "render":
            return self._parse_render(tokens[1:])

        raise ValueError(f"Unknown command: '{verb}'. Type 'help' for usage.")

    # ── Token parsers ────────────────────────────────────────────

    @staticmethod
    def _extract_option(tokens: List[str], option: str) -> Tuple[List[str], List[str]]:
        """
        Extract every ``--option value`` / ``--option=value`` from tokens.
        Returns (values, remaining_tokens).
        """
        values: List[str] = []
        remaining: List[str] = []
        prefix = f"{option}="
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token.startswith(prefix):
                values.append(token[len(prefix):])
            elif token == option:
                if i + 1 >= len(tokens):
                    raise ValueError(f"Missing value for {option}.")
                values.append(tokens[i + 1])
                i += 1
            else:
                remaining.append(token)
            i += 1
        return values, remaining

    @staticmethod
    def _split_names(values: List[str]) -> List[str]:
        """Flatten comma separated name lists."""
        return [name.strip() for value in values for name in value.split(",") if name.strip()]

    def _parse_render(self, tokens: List[str]) -> RenderCommand:
        whitelist, remaining = self._extract_option(tokens, "--whitelist")
        blacklist, remaining = self._extract_option(remaining, "--blacklist")
        formats, remaining = self._extract_option(remaining, "--format")
        out_dirs, remaining = self._extract_option(remaining, "--out")
        seeds, remaining = self._extract_option(remaining, "--seed")

        to_stdout = "--stdout" in remaining
        positional = [tok for tok in remaining if not tok.startswith("--")]
        unknown = [tok for tok in remaining if tok.startswith("--") and tok != "--stdout"]
        if unknown:
            raise ValueError(f"Unknown option(s): {', '.join(unknown)}")
        if len(positional) != 1:
            raise ValueError("Usage: render <sample> [options]")

        seed = None
        if seeds:
            try:
                seed = int(seeds[-1])
            except ValueError:
                raise ValueError(f"--seed expects an integer, got '{seeds[-1]}'.")

        return RenderCommand(
            positional[0],
            whitelist=self._split_names(whitelist),
            blacklist=self._split_names(blacklist),
            emitter=formats[-1] if formats else None,
            out_dir=out_dirs[-1] if out_dirs else ".",
            seed=seed,
            to_stdout=to_stdout,
        )


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point: ``objviz render avl --seed 1``."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    args = list(sys.argv[1:] if argv is None else argv)
    result = CommandProcessor().process_tokens(args or ["help"])

    if result.output is not None:
        sys.stdout.write(result.output)
    stream = sys.stderr if (result.output is not None or not result.success) else sys.stdout
    print(result.message, file=stream)
    return 0 if result.success else 1
