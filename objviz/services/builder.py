# objviz/services/builder.py
"""
    GraphBuilder — the cycle-safe walk from a root value to a GraphDocument.

    Two-phase visit
    ───────────────
    For every distinct object identity:
        1. allocate a node id, register the identity, build the node's full
           field list (members / elements classified, scalars inlined);
        2. seal the record, then visit the queued reference members in
           declaration order.

    Phase 2 runs from an explicit LIFO work stack (children pushed in
    reverse), which yields the same depth-first order as deferred recursion
    without consuming the Python call stack on long chains.

    A reference to an identity that already has a node produces an edge to
    that node and stops, so every identity is expanded at most once and any
    graph with finitely many identities terminates.
"""
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from ..exceptions import TraversalLimitError
from ..models.document import GraphDocument
from ..models.edge import Address
from ..models.record import NodeRecord
from ..session import Session
from ..types import MemberKind, ValueClassifier
from .policy import Decision

logger = logging.getLogger(__name__)


@dataclass
class _Visit:
    """A queued visit of ``value`` reached from field ``source``."""
    value: Any
    source: Optional[Address]
    path: str
    depth: int
    decision: Decision = Decision.TRAVERSE
    show_values: bool = False


class GraphBuilder:
    """
    Walks ``session.root`` and fills ``session.document``.

    Usage:
        session = Session(root, whitelist=["data"])
        document = GraphBuilder(session).build()
    """

    def __init__(self, session: Session):
        self._session = session
        self._config = session.config
        self._policy = session.policy
        self._introspector = session.introspector
        self._tracker = session.tracker

    def build(self) -> GraphDocument:
        """
        Run the traversal to completion and return the document.

        Raises:
            SessionReuseError:   If the session was already built.
            TraversalLimitError: If a configured ceiling is exceeded.
        """
        self._session.begin()
        root = self._session.root

        stack: List[_Visit] = [_Visit(
            root,
            source=None,
            path=ValueClassifier.type_name(root),
            depth=0,
            # the root container has no member name to whitelist
            show_values=True,
        )]
        while stack:
            pending = self._visit(stack.pop())
            stack.extend(reversed(pending))

        document = self._session.document
        logger.debug("Traversal of %s finished: %d nodes, %d edges",
                     document.root_type_name, document.get_number_of_nodes(),
                     document.get_number_of_edges())
        return document

    # ── Single visit (phase 1) ───────────────────────────────────

    def _visit(self, visit: _Visit) -> List[_Visit]:
        value = visit.value

        existing = self._tracker.resolve(value)
        if existing is not None:
            # Cycle or shared reference: converge on the existing node
            self._session.add_edge(visit.source, existing.node)
            return []

        limit = self._config.max_depth
        if limit is not None and visit.depth > limit:
            raise TraversalLimitError(f"Depth ceiling of {limit} exceeded", visit.path)

        record = self._session.open_node(value, visit.path)
        if visit.source is not None:
            self._session.add_edge(visit.source, Address(record.node_id))

        kind = ValueClassifier.classify(value)
        if kind is MemberKind.SCALAR:
            record.set_header_value(self._session.render_value(value))
            pending: List[_Visit] = []
        elif kind is MemberKind.CONTAINER:
            pending = self._fill_container(record, value, visit)
        else:
            pending = self._fill_composite(record, value, visit)

        record.seal()
        return pending

    def _fill_composite(self, record: NodeRecord, value: Any, visit: _Visit) -> List[_Visit]:
        pending: List[_Visit] = []

        for member in self._introspector.members(value):
            requested = member.pinned or self._policy.is_whitelisted(member.name)
            if not requested and self._policy.is_blacklisted(member.name):
                continue

            if member.failed:
                self._session.record_failure(visit.path, member)
                continue
            if member.is_behavior:
                continue

            decision = self._policy.classify(member.name, member.kind, member.pinned)
            if decision is Decision.SKIP:
                continue

            if member.kind is MemberKind.NULL:
                record.add_field(member.name, is_null=True)
            elif member.kind is MemberKind.SCALAR:
                shown = None
                if decision is Decision.NAME_AND_VALUE:
                    shown = self._session.render_value(member.value)
                record.add_field(member.name, shown)
            else:
                entry = record.add_field(member.name)
                pending.append(_Visit(
                    member.value,
                    source=Address(record.node_id, entry.port),
                    path=f"{visit.path}.{member.name}",
                    depth=visit.depth + 1,
                    decision=decision,
                    show_values=requested,
                ))

        return pending

    def _fill_container(self, record: NodeRecord, container: Any, visit: _Visit) -> List[_Visit]:
        elements = ValueClassifier.elements(container)

        if visit.decision is Decision.SUMMARIZE:
            record.add_field("count", str(len(elements)))
            return []

        keyed = ValueClassifier.is_keyed(container)
        limit = self._config.max_container_items
        shown = elements if limit is None else elements[:limit]
        pending: List[_Visit] = []

        for label, element in shown:
            kind = ValueClassifier.classify(element)

            if kind is MemberKind.NULL:
                record.add_field(label, is_null=True)
            elif kind is MemberKind.SCALAR:
                if not visit.show_values:
                    record.add_field(label)
                elif keyed:
                    record.add_field(label, self._session.render_value(element))
                else:
                    record.add_field(self._session.render_value(element))
            elif ValueClassifier.is_behavior(element):
                continue
            else:
                entry = record.add_field(label)
                decision = Decision.TRAVERSE
                if (kind is MemberKind.CONTAINER and self._config.collapse_containers
                        and not visit.show_values):
                    decision = Decision.SUMMARIZE
                pending.append(_Visit(
                    element,
                    source=Address(record.node_id, entry.port),
                    path=visit.path + (label if not keyed else f"[{label!r}]"),
                    depth=visit.depth + 1,
                    decision=decision,
                    show_values=visit.show_values,
                ))

        if len(shown) < len(elements):
            record.add_field(f"… (+{len(elements) - len(shown)} more)")
        return pending
