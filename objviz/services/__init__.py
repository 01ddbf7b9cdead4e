"""
Traversal services — member discovery, visibility policy, identity tracking.

Note: GraphBuilder is intentionally NOT imported eagerly to avoid
circular imports with ``objviz.session``.  Import it
directly: ``from objviz.services.builder import GraphBuilder``.
"""
from .introspection import Member, MemberIntrospector, show_data, shown_members
from .policy import Decision, VisitPolicy
from .tracker import IdentityTracker

__all__ = [
    'Member',
    'MemberIntrospector',
    'show_data',
    'shown_members',
    'Decision',
    'VisitPolicy',
    'IdentityTracker',
]
