"""Graph subpackage public API."""

from .builder import SequenceGraph, build_graph, sequence_number
from .cli import main as build_main
from .export import write_graphmlz, write_rawbin

__all__ = [
    "build_main",
    "SequenceGraph",
    "build_graph",
    "sequence_number",
    "write_rawbin",
    "write_graphmlz",
]
