"""
Object Graph Visualizer — renders live object graphs as Graphviz record diagrams.

Public API:
    visualize            – one-shot render of a root value to DOT (or another emitter)
    write_visualization  – render and write ``vis_<Type>.dot`` atomically
    Visualizer           – reusable facade with config and emitter discovery
    Session              – single-use traversal state for one root
    GraphBuilder         – cycle-safe iterative walker
    show_data            – class decorator pinning members as always visible
"""
from .config import VisualizerConfig, DEFAULT_BLACKLIST
from .exceptions import (
    VisualizationError,
    InvalidInputError,
    MemberAccessError,
    TraversalLimitError,
    SessionReuseError,
    SinkError,
    EmitterNotFoundError,
)
from .types import MemberKind, ValueClassifier
from .models import Field, NodeRecord, Address, EdgeRecord, Diagnostic, GraphDocument
from .services import (
    Member,
    MemberIntrospector,
    show_data,
    shown_members,
    Decision,
    VisitPolicy,
    IdentityTracker,
)
from .services.builder import GraphBuilder
from .session import Session
from .plugins import EmitterPlugin
from .emitters import DotEmitter, JsonEmitter
from .plugin_loader import PluginLoader, create_emitter_loader
from .visualizer import Visualizer, visualize, write_visualization

__version__ = '1.0.0'

__all__ = [
    'visualize',
    'write_visualization',
    'Visualizer',
    'VisualizerConfig',
    'DEFAULT_BLACKLIST',
    'Session',
    'GraphBuilder',
    'show_data',
    'shown_members',
    'Member',
    'MemberIntrospector',
    'MemberKind',
    'ValueClassifier',
    'Decision',
    'VisitPolicy',
    'IdentityTracker',
    'Field',
    'NodeRecord',
    'Address',
    'EdgeRecord',
    'Diagnostic',
    'GraphDocument',
    'EmitterPlugin',
    'DotEmitter',
    'JsonEmitter',
    'PluginLoader',
    'create_emitter_loader',
    'VisualizationError',
    'InvalidInputError',
    'MemberAccessError',
    'TraversalLimitError',
    'SessionReuseError',
    'SinkError',
    'EmitterNotFoundError',
]
