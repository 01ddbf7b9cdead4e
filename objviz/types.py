"""
    Value kinds — the closed classification every visited value falls into.

    The walker never inspects a value's type ad hoc: each value is classified
    exactly once, by its *runtime* type, into one of four kinds.
"""
import inspect
import numbers
import uuid
from collections.abc import Mapping, Sequence, Set
from datetime import date, datetime, time, timedelta
from enum import Enum
from pathlib import PurePath
from typing import Any, List, Tuple


class MemberKind(Enum):
    SCALAR = "scalar"
    CONTAINER = "container"
    COMPOSITE = "composite"
    NULL = "null"

    @property
    def is_reference(self) -> bool:
        """Containers and composites get their own node; the rest is inlined."""
        return self in (MemberKind.CONTAINER, MemberKind.COMPOSITE)


# Value-semantics types rendered inline into their owner's record
_SCALAR_TYPES = (
    bool,
    numbers.Number,
    str,
    bytes,
    bytearray,
    Enum,
    date,
    datetime,
    time,
    timedelta,
    uuid.UUID,
    PurePath,
)


class ValueClassifier:
    """Classification and element enumeration of runtime values"""

    @staticmethod
    def classify(value: Any) -> MemberKind:
        """Detect the kind of the value"""
        if value is None:
            return MemberKind.NULL
        # str is a Sequence, so scalars must be checked first
        if isinstance(value, _SCALAR_TYPES):
            return MemberKind.SCALAR
        if isinstance(value, (Mapping, Sequence, Set)):
            return MemberKind.CONTAINER
        return MemberKind.COMPOSITE

    @staticmethod
    def is_behavior(value: Any) -> bool:
        """True for callables that are behavior rather than data (methods, functions, classes)."""
        return inspect.isroutine(value) or inspect.isclass(value)

    @staticmethod
    def is_keyed(container: Any) -> bool:
        return isinstance(container, Mapping)

    @staticmethod
    def elements(container: Any) -> List[Tuple[str, Any]]:
        """
        Enumerate a container as ``(label, element)`` pairs.

        Mappings are labelled by key, sequences and sets by iteration index.
        """
        if isinstance(container, Mapping):
            return [(str(key), element) for key, element in container.items()]
        return [(f"[{index}]", element) for index, element in enumerate(container)]

    @staticmethod
    def type_name(value: Any) -> str:
        return type(value).__name__
