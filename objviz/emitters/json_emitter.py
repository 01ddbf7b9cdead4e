"""
    JSON emitter — a structured, display-only rendering of a GraphDocument
    for tooling that prefers data over DOT text.  Not meant to be read back.
"""
import json
from typing import Any, Dict, Optional

from ..config import VisualizerConfig
from ..models.document import GraphDocument
from ..plugins.base import EmitterPlugin


class JsonEmitter(EmitterPlugin):

    file_extension = "json"

    def __init__(self, indent: int = 2):
        self._indent = indent

    def get_plugin_name(self) -> str:
        return "JSON"

    def serialize(self, document: GraphDocument, config: Optional[VisualizerConfig] = None) -> Dict[str, Any]:
        """Convert a document to a plain dictionary."""
        config = config or VisualizerConfig()
        return {
            'graph': document.root_type_name,
            'created': document.created.isoformat(timespec='seconds'),
            'tool': config.tool_name,
            'nodes': [record.to_dict() for record in document.nodes],
            'edges': [edge.to_dict() for edge in document.edges],
            'diagnostics': [str(d) for d in document.diagnostics],
        }

    def emit(self, document: GraphDocument, config: Optional[VisualizerConfig] = None) -> str:
        return json.dumps(self.serialize(document, config), indent=self._indent, ensure_ascii=False) + "\n"
