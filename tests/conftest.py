# tests/conftest.py
"""
Shared test fixtures.
Small object graphs covering every member kind: scalars, nulls, containers,
self references, shared references and a two-node ring.
"""
import pytest
from datetime import datetime

from objviz.config import VisualizerConfig
from objviz.visualizer import Visualizer
from objviz.samples.people import build_family


class Box:
    """Generic composite: every keyword becomes an instance attribute, in order."""

    def __init__(self, **members):
        for name, value in members.items():
            setattr(self, name, value)


class Link:
    def __init__(self, name: str, next=None):
        self.name = name
        self.next = next


# ── Fixed timestamp for emitter output ───────────────────────────
FIXED_CREATED = datetime(2024, 3, 5, 14, 7)


@pytest.fixture
def visualizer():
    return Visualizer()


@pytest.fixture
def build():
    """
    Factory fixture: ``build(root, whitelist, blacklist, **config_fields)``
    returns the GraphDocument of one traversal.
    """
    def _build(root, whitelist=None, blacklist=None, **options):
        return Visualizer(VisualizerConfig(**options)).build(root, whitelist, blacklist)
    return _build


@pytest.fixture
def self_ref():
    a = Box(name="A")
    a.me = a
    return a


@pytest.fixture
def shared_ref():
    c = Box(name="C")
    return Box(x=c, y=c)


@pytest.fixture
def ring():
    """A -> B -> A"""
    a = Link("A")
    b = Link("B", next=a)
    a.next = b
    return a


@pytest.fixture
def chain():
    """Factory fixture: a linear chain of ``n`` links, returns the head."""
    def _chain(n: int) -> Link:
        head = None
        for i in reversed(range(n)):
            head = Link(f"L{i}", next=head)
        return head
    return _chain


@pytest.fixture
def family():
    return build_family()
