"""
Output models — node records, edges and the document that holds them.
"""
from .record import Field, NodeRecord
from .edge import Address, EdgeRecord
from .document import Diagnostic, GraphDocument

__all__ = [
    'Field',
    'NodeRecord',
    'Address',
    'EdgeRecord',
    'Diagnostic',
    'GraphDocument',
]
