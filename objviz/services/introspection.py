# objviz/services/introspection.py
"""
    MemberIntrospector — discovers the named, readable members of any value.

    Members are gathered without knowledge of the static type:
        1. instance attributes (``vars(value)``) in insertion order
        2. ``__slots__`` along the MRO, base classes first
        3. ``property`` members along the MRO, most-derived first

    Names are de-duplicated (first occurrence wins).  Members are lazy:
    listing them runs no getter, so a member rejected by name is never
    read.  Routines and classes are behavior, not data, and are flagged
    by ``Member.is_behavior`` for the caller to drop.  Every member is
    classified by the runtime type of its current value.
"""
import logging
from typing import Any, Callable, Iterator, List, Optional, Set, Tuple

from ..types import MemberKind, ValueClassifier

logger = logging.getLogger(__name__)

_SHOW_DATA_ATTR = '_objviz_show_data'
_SLOT_INTERNALS = ('__dict__', '__weakref__')
_UNSET = object()


def show_data(*names: str) -> Callable[[type], type]:
    """
    Class decorator: always show the values of the named members of
    instances of the decorated class (and its subclasses), as if the names
    were whitelisted.

    Example:
        @show_data("data")
        class TreeNode:
            ...
    """
    def decorate(cls: type) -> type:
        inherited = getattr(cls, _SHOW_DATA_ATTR, frozenset())
        setattr(cls, _SHOW_DATA_ATTR, frozenset(inherited) | frozenset(names))
        return cls
    return decorate


def shown_members(cls: type) -> frozenset:
    """Names marked with ``@show_data`` on ``cls`` or any of its bases."""
    return frozenset(getattr(cls, _SHOW_DATA_ATTR, frozenset()))


class Member:
    """
    A named member of a composite value, read on demand.

    The getter runs at most once, on the first access to ``read()``,
    ``value``, ``kind``, ``error`` or ``failed``; a member the caller skips by
    name is never read.

    Attributes:
        name:   Member name, unique within its owner.
        pinned: Marked with ``@show_data`` on the owner's class.
    """

    def __init__(self, name: str, getter: Callable[[], Any], pinned: bool = False):
        self.name = name
        self.pinned = pinned
        self._getter = getter
        self._loaded = False
        self._value: Any = None
        self._error: Optional[Exception] = None

    def _load(self) -> None:
        if self._loaded:
            return
        self._loaded = True
        try:
            current = self._getter()
        except Exception as exc:
            logger.debug("Reading member %s failed: %s", self.name, exc)
            self._error = exc
            return
        self._value = None if current is _UNSET else current

    @property
    def loaded(self) -> bool:
        return self._loaded

    def read(self) -> Any:
        """Return the current value; re-raises the getter's exception."""
        self._load()
        if self._error is not None:
            raise self._error
        return self._value

    @property
    def value(self) -> Any:
        self._load()
        return self._value

    @property
    def error(self) -> Optional[Exception]:
        self._load()
        return self._error

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def kind(self) -> Optional[MemberKind]:
        """Classification of the current value; ``None`` if reading failed."""
        if self.failed:
            return None
        return ValueClassifier.classify(self._value)

    @property
    def is_behavior(self) -> bool:
        return not self.failed and ValueClassifier.is_behavior(self._value)

    def __repr__(self) -> str:
        state = "unread"
        if self._loaded:
            state = "failed" if self._error is not None else repr(self.kind)
        return f"Member({self.name}, {state})"


class MemberIntrospector:
    """
    Produces the ordered member list of a composite value.

    Usage:
        introspector = MemberIntrospector()
        for member in introspector.members(obj):
            print(member.name, member.kind)
    """

    def __init__(self, include_properties: bool = True):
        self._include_properties = include_properties

    def members(self, value: Any) -> List[Member]:
        """
        Return the members of ``value`` in deterministic order.

        No getter is invoked here.  Reading a member later never raises
        through ``kind`` / ``failed``; the error is kept on the member so
        the caller can record a diagnostic.
        """
        pinned = shown_members(type(value))
        return [
            Member(name, getter, pinned=name in pinned)
            for name, getter in self._candidates(value)
        ]

    # ── Candidate discovery ──────────────────────────────────────

    def _candidates(self, value: Any) -> Iterator[Tuple[str, Callable[[], Any]]]:
        seen: Set[str] = set()

        instance_dict = getattr(value, '__dict__', None)
        if isinstance(instance_dict, dict):
            for name, current in list(instance_dict.items()):
                if not isinstance(name, str) or name in seen:
                    continue
                seen.add(name)
                yield name, (lambda current=current: current)

        for name, attr_name in self._slot_names(type(value)):
            if name in seen:
                continue
            seen.add(name)
            yield name, (lambda attr_name=attr_name: getattr(value, attr_name, _UNSET))

        if not self._include_properties:
            return

        for cls in type(value).__mro__:
            if cls is object:
                continue
            for name, attr in list(vars(cls).items()):
                if not isinstance(attr, property) or attr.fget is None or name in seen:
                    continue
                seen.add(name)
                yield name, (lambda name=name: getattr(value, name))

    @staticmethod
    def _slot_names(cls: type) -> List[Tuple[str, str]]:
        """Declared slots as ``(display_name, attribute_name)``, base classes first."""
        names: List[Tuple[str, str]] = []
        for klass in reversed(cls.__mro__):
            slots = vars(klass).get('__slots__', ())
            if isinstance(slots, str):
                slots = (slots,)
            for slot in slots:
                if slot in _SLOT_INTERNALS:
                    continue
                attr_name = slot
                # Private slots are stored under their mangled name
                if slot.startswith('__') and not slot.endswith('__'):
                    attr_name = f"_{klass.__name__.lstrip('_')}{slot}"
                names.append((slot, attr_name))
        return names
