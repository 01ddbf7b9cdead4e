"""
    CLI Commands — concrete command implementations.

    Design Pattern: Command
    ───────────────────────
    Each command encapsulates one CLI action as an object with
    ``execute(visualizer) → CommandResult``.  This decouples the invoker
    (CommandProcessor) from the receiver (Visualizer).

    Supported commands:
    ───────────────────
        render <sample> [--whitelist a,b] [--blacklist x,y] [--format dot|json]
                        [--out DIR] [--seed N] [--stdout]
        list   [samples|emitters]
        help
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..exceptions import VisualizationError
from ..samples import get_sample, sample_names, SAMPLES
from ..sink import default_file_name, write_document
from ..visualizer import Visualizer


# ── Result wrapper ───────────────────────────────────────────────

@dataclass
class CommandResult:
    """
    Value object returned by every command execution.

    Attributes:
        success:  Whether the command completed without error.
        message:  Human-readable status line.
        output:   Document text when rendering to stdout.
        data:     Optional structured data for programmatic consumers.
    """
    success: bool
    message: str
    output: Optional[str] = None
    data: Optional[Dict[str, Any]] = field(default_factory=dict)


# ── Abstract base ────────────────────────────────────────────────

class Command(ABC):
    """
    Abstract base for all CLI commands.

    Design Pattern: Command
    """

    @abstractmethod
    def execute(self, visualizer: Visualizer) -> CommandResult:
        """Execute the command with the given visualizer."""
        ...


# ═════════════════════════════════════════════════════════════════
#  RENDER
# ═════════════════════════════════════════════════════════════════

class RenderCommand(Command):
    """
    Visualize one of the bundled samples.

    Syntax:
        render avl --whitelist data --out build --seed 7
    """

    def __init__(
        self,
        sample: str,
        whitelist: Optional[List[str]] = None,
        blacklist: Optional[List[str]] = None,
        emitter: Optional[str] = None,
        out_dir: str = ".",
        seed: Optional[int] = None,
        to_stdout: bool = False,
    ):
        self.sample = sample
        self.whitelist = whitelist or []
        self.blacklist = blacklist or []
        self.emitter = emitter
        self.out_dir = out_dir
        self.seed = seed
        self.to_stdout = to_stdout

    def execute(self, visualizer: Visualizer) -> CommandResult:
        try:
            case = get_sample(self.sample, self.seed)
        except KeyError as e:
            return CommandResult(False, str(e.args[0]))

        try:
            plugin = visualizer.get_emitter(self.emitter)
            document = visualizer.build(
                case.root,
                case.whitelist + self.whitelist,
                case.blacklist + self.blacklist,
            )
            text = plugin.emit(document, visualizer.config)

            summary = {
                'sample': case.name,
                'nodes': document.get_number_of_nodes(),
                'edges': document.get_number_of_edges(),
                'diagnostics': [str(d) for d in document.diagnostics],
            }
            if self.to_stdout:
                return CommandResult(
                    True,
                    f"Rendered '{case.name}': {summary['nodes']} node(s), {summary['edges']} edge(s).",
                    output=text,
                    data=summary,
                )

            target = Path(self.out_dir) / default_file_name(document.root_type_name, plugin.file_extension)
            written = write_document(text, target)
        except VisualizationError as e:
            return CommandResult(False, f"Rendering '{case.name}' failed: {e}")

        summary['path'] = str(written)
        return CommandResult(
            True,
            f"Wrote {written} ({summary['nodes']} node(s), {summary['edges']} edge(s)).",
            data=summary,
        )


# ═════════════════════════════════════════════════════════════════
#  INFORMATIONAL COMMANDS
# ═════════════════════════════════════════════════════════════════

class ListCommand(Command):
    """
    List samples or emitters.

    Syntax:
        list
        list samples
        list emitters
    """

    def __init__(self, target: Optional[str] = None):
        self._target = target or "samples"

    def execute(self, visualizer: Visualizer) -> CommandResult:
        if self._target == "emitters":
            names = visualizer.get_emitter_names()
            lines = [f"  {name:<10} {visualizer.get_emitter(name).get_plugin_name()}" for name in names]
            return CommandResult(True, "Emitters:\n" + "\n".join(lines), data={'emitters': names})

        names = sample_names()
        lines = []
        for name in names:
            lines.append(f"  {name:<10} {SAMPLES[name](0).description}")
        return CommandResult(True, "Samples:\n" + "\n".join(lines), data={'samples': names})


class HelpCommand(Command):
    """Display available commands."""

    HELP_TEXT = """
Available commands:
───────────────────
  render <sample> [options]   Visualize a bundled sample
      --whitelist a,b         Show values of / always expand these members
      --blacklist x,y         Skip members whose name contains these fragments
      --format dot|json       Output format (default: dot)
      --out DIR               Output directory (default: .)
      --seed N                Seed for random samples
      --stdout                Print the document instead of writing a file

  list [samples|emitters]     List samples or output formats
  help                        Show this help message
""".strip()

    def execute(self, visualizer: Visualizer) -> CommandResult:
        return CommandResult(True, self.HELP_TEXT)
