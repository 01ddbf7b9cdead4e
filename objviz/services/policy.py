# objviz/services/policy.py
"""
    VisitPolicy — decides, per member name, how a member is presented.

    Resolution order:
        1. exact whitelist match (or ``@show_data``) → show value / traverse
        2. blacklist substring match                 → skip
        3. default                                   → name only / traverse

    The whitelist always wins over the blacklist.
"""
from enum import Enum
from typing import Iterable, List, Optional, Set

from ..config import as_names
from ..types import MemberKind


class Decision(Enum):
    SKIP = "skip"
    NAME_ONLY = "name_only"
    NAME_AND_VALUE = "name_and_value"
    TRAVERSE = "traverse"
    SUMMARIZE = "summarize"

    @property
    def shows_field(self) -> bool:
        return self is not Decision.SKIP


class VisitPolicy:
    """
    Member visibility rules built from a whitelist and a blacklist.

    Args:
        whitelist:           Exact member names.
        blacklist:           Name fragments (substring match).
        collapse_containers: Summarize containers that are not whitelisted.
    """

    def __init__(
        self,
        whitelist: Optional[Iterable[str]] = None,
        blacklist: Optional[Iterable[str]] = None,
        collapse_containers: bool = False,
    ):
        self._whitelist: Set[str] = set(as_names(whitelist))
        self._blacklist: List[str] = [entry for entry in as_names(blacklist) if entry]
        self._collapse_containers = collapse_containers

    @property
    def whitelist(self) -> Set[str]:
        return set(self._whitelist)

    @property
    def blacklist(self) -> List[str]:
        return list(self._blacklist)

    def is_whitelisted(self, name: str) -> bool:
        return name in self._whitelist

    def is_blacklisted(self, name: str) -> bool:
        return any(entry in name for entry in self._blacklist)

    def classify(self, name: str, kind: MemberKind, pinned: bool = False) -> Decision:
        """Resolve the presentation of member ``name`` whose value is of ``kind``."""
        if pinned or self.is_whitelisted(name):
            if kind is MemberKind.SCALAR:
                return Decision.NAME_AND_VALUE
            if kind.is_reference:
                return Decision.TRAVERSE
            return Decision.NAME_ONLY

        if self.is_blacklisted(name):
            return Decision.SKIP

        if kind is MemberKind.CONTAINER and self._collapse_containers:
            return Decision.SUMMARIZE
        if kind.is_reference:
            return Decision.TRAVERSE
        return Decision.NAME_ONLY
