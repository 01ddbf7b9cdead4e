"""
CLI package — renders the bundled sample structures from the command line.

Design Patterns
───────────────
• Command       – each CLI operation is a ``Command`` object with ``execute()``.
• Interpreter   – parsing the CLI syntax into structured command objects.
"""
from .command_processor import CommandProcessor, main
from .commands import (
    Command,
    CommandResult,
    RenderCommand,
    ListCommand,
    HelpCommand,
)

__all__ = [
    'CommandProcessor',
    'main',
    'Command',
    'CommandResult',
    'RenderCommand',
    'ListCommand',
    'HelpCommand',
]
