"""
    Graphviz DOT emitter — renders node records as ``shape=record`` nodes
    with addressable ports and edges as ``structA:port -> structB``.
"""
import re
from typing import List, Optional

from ..config import VisualizerConfig
from ..models.document import GraphDocument
from ..models.edge import EdgeRecord
from ..models.record import Field, NodeRecord
from ..plugins.base import EmitterPlugin

# Characters with meaning inside a record label
_RECORD_RESERVED = re.compile(r'([\\{}|<>"])')
_NON_WORD = re.compile(r'\W')
# Keywords are case-insensitive and cannot name a graph
_DOT_KEYWORDS = frozenset({"node", "edge", "graph", "digraph", "subgraph", "strict"})

NULL_MARKER = "(∅)"
ROOT_STYLE = 'style=filled, fillcolor="0.6 0.3 1.000"'
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M"


def escape_label(text: str) -> str:
    """Escape record-reserved characters; newlines become ``\\n`` line breaks."""
    escaped = _RECORD_RESERVED.sub(r'\\\1', text)
    return escaped.replace('\r\n', '\n').replace('\n', '\\n')


def graph_name(type_name: str) -> str:
    """Strip characters that are not valid in a bare DOT identifier; keywords get a ``_`` prefix."""
    name = _NON_WORD.sub('', type_name)
    if not name:
        return "G"
    if name[0].isdigit() or name.lower() in _DOT_KEYWORDS:
        return f"_{name}"
    return name


def node_name(node_id: int) -> str:
    return f"struct{node_id}"


class DotEmitter(EmitterPlugin):

    file_extension = "dot"

    def get_plugin_name(self) -> str:
        return "Graphviz DOT"

    def emit(self, document: GraphDocument, config: Optional[VisualizerConfig] = None) -> str:
        config = config or VisualizerConfig()

        lines: List[str] = [
            f"// created {document.created.strftime(TIMESTAMP_FORMAT)} by {config.tool_name}",
            f"digraph {graph_name(document.root_type_name)} {{",
            f"  rankdir={config.rankdir};",
            '  node [fontname="Helvetica", fontsize=10];',
        ]
        lines.extend(self.render_node(record) for record in document.nodes)
        lines.extend(self.render_edge(edge) for edge in document.edges)
        lines.append("}")
        return "\n".join(lines) + "\n"

    # ── Pieces ───────────────────────────────────────────────────

    @staticmethod
    def render_field(entry: Field) -> str:
        text = entry.label
        if entry.is_null:
            text = f"{text} {NULL_MARKER}"
        elif entry.value is not None:
            text = f"{text}: {entry.value}"
        return f"<{entry.port}> {escape_label(text)}"

    def render_node(self, record: NodeRecord) -> str:
        label = " | ".join(self.render_field(entry) for entry in record.fields)
        style = f"{ROOT_STYLE}, " if record.is_root else ""
        return f'  {node_name(record.node_id)} [shape=record, {style}label="{{ {label} }}"];'

    @staticmethod
    def render_edge(edge: EdgeRecord) -> str:
        return f"  struct{edge.source} -> struct{edge.target};"
