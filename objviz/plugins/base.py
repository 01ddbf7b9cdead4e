"""
    Abstract base class for emitter plugins.
    Defines the "Contract" that every output format must follow.
"""
from abc import ABC, abstractmethod
from typing import Optional

from ..config import VisualizerConfig
from ..models.document import GraphDocument


class EmitterPlugin(ABC):
    """
        Abstract base class for Emitter plugins.
        Pattern: Strategy (for rendering a GraphDocument as text).
    """

    #: Extension of the artifact written by ``write_visualization``
    file_extension: str = "txt"

    @abstractmethod
    def get_plugin_name(self) -> str:
        """
            Returns the unique name of the emitter.
            Example: "Graphviz DOT"
        """
        pass

    @abstractmethod
    def emit(self, document: GraphDocument, config: Optional[VisualizerConfig] = None) -> str:
        """
        Main method: Renders a document into its textual representation.

        Args:
            document: Node and edge records produced by one traversal.
            config:   Rendering options (tool name, layout direction).

        Returns:
            str: The complete document text.
        """
        pass
