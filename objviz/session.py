"""
    Session — the private context of one visualization call.

    Each session holds:
        • config       – effective configuration (whitelist / blacklist merged)
        • policy       – member visibility rules
        • introspector – member discovery
        • tracker      – identity → node address map
        • document     – the node / edge buffers being filled

    A session is created per top-level call and is single-use: nothing it
    holds is shared with any other call.
"""
import logging
from typing import Any, Iterable, Optional

from .config import VisualizerConfig
from .exceptions import InvalidInputError, MemberAccessError, SessionReuseError, TraversalLimitError
from .models.document import Diagnostic, GraphDocument
from .models.edge import Address, EdgeRecord
from .models.record import NodeRecord
from .services.introspection import Member, MemberIntrospector
from .services.policy import VisitPolicy
from .services.tracker import IdentityTracker
from .types import ValueClassifier

logger = logging.getLogger(__name__)

_ELLIPSIS = "…"


class Session:
    """
    Encapsulates the mutable state of one traversal of ``root``.

    Attributes:
        root:     The value being visualized.
        config:   Effective configuration for this call.
        document: Output buffers (node records, edge records, diagnostics).
    """

    def __init__(
        self,
        root: Any,
        whitelist: Optional[Iterable[str]] = None,
        blacklist: Optional[Iterable[str]] = None,
        config: Optional[VisualizerConfig] = None,
    ):
        if root is None:
            raise InvalidInputError("Cannot visualize None: a root value is required.")

        self.root = root
        self.config: VisualizerConfig = (config or VisualizerConfig()).with_lists(whitelist, blacklist)

        self.policy = VisitPolicy(
            self.config.whitelist,
            self.config.effective_blacklist(),
            collapse_containers=self.config.collapse_containers,
        )
        self.introspector = MemberIntrospector(include_properties=self.config.include_properties)
        self.tracker = IdentityTracker()
        self.document = GraphDocument(ValueClassifier.type_name(root))

        self._next_node_id = 0
        self._started = False

    # ── Lifecycle ────────────────────────────────────────────────

    def begin(self) -> None:
        """Mark the session as in use; a session cannot be built twice."""
        if self._started:
            raise SessionReuseError("A Session is single-use; create a new one per call.")
        self._started = True

    @property
    def started(self) -> bool:
        return self._started

    # ── Node / edge allocation ───────────────────────────────────

    def open_node(self, value: Any, path: str) -> NodeRecord:
        """
        Allocate the next node id for ``value``, register its identity and
        add an open record to the document.

        Raises:
            TraversalLimitError: If ``config.max_nodes`` would be exceeded.
        """
        limit = self.config.max_nodes
        if limit is not None and self._next_node_id >= limit:
            raise TraversalLimitError(f"Node ceiling of {limit} exceeded", path)

        node_id = self._next_node_id
        self._next_node_id += 1
        self.tracker.register(value, node_id)

        record = NodeRecord(node_id, ValueClassifier.type_name(value), is_root=node_id == 0)
        self.document.add_node(record)
        logger.debug("struct%d opened for %s at %s", node_id, record.type_name, path)
        return record

    def add_edge(self, source: Address, target: Address) -> EdgeRecord:
        return self.document.add_edge(source, target)

    # ── Diagnostics ──────────────────────────────────────────────

    def record_failure(self, path: str, member: Member) -> Diagnostic:
        """Record a member whose getter raised; traversal continues."""
        error = MemberAccessError(path, member.name, member.error)
        logger.warning("%s", error)
        diagnostic = Diagnostic(path, member.name, f"{type(member.error).__name__}: {member.error}")
        self.document.diagnostics.append(diagnostic)
        return diagnostic

    # ── Rendering helpers ────────────────────────────────────────

    def render_value(self, value: Any) -> str:
        """Text of an inlined scalar, truncated to ``config.max_value_length``."""
        try:
            text = str(value)
        except Exception:
            text = repr(value)
        limit = self.config.max_value_length
        if limit and len(text) > limit:
            text = text[:max(limit - 1, 0)] + _ELLIPSIS
        return text

    def __repr__(self) -> str:
        return (
            f"Session(root={self.document.root_type_name}, "
            f"nodes={self.document.get_number_of_nodes()}, "
            f"started={self._started})"
        )
