"""
Built-in emitters — Graphviz DOT and JSON.
"""
from .dot import DotEmitter
from .json_emitter import JsonEmitter

BUILTIN_EMITTERS = {
    'dot': DotEmitter,
    'json': JsonEmitter,
}

__all__ = ['DotEmitter', 'JsonEmitter', 'BUILTIN_EMITTERS']
