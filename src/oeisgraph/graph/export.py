from __future__ import annotations

import gzip
import logging
import struct
from pathlib import Path
from xml.sax.saxutils import escape

from .builder import SequenceGraph, sequence_number

logger = logging.getLogger(__name__)

_NODE_RECORD = struct.Struct("<BI")
_EDGE_RECORD = struct.Struct("<BII")
_NEWLINE = b"\n"


def write_rawbin(graph: SequenceGraph, path: Path) -> Path:
    """Write the compact binary form of ``graph``.

    Node records are ``0x01 <u32 le> \\n``, one per node in index order,
    followed by edge records ``0x00 <u32 le source> <u32 le target> \\n``.
    """
    logger.info("Writing rawbin data to %s", path)
    with path.open("wb") as f:
        for name in graph.nodes:
            f.write(_NODE_RECORD.pack(1, sequence_number(name)))
            f.write(_NEWLINE)
        for source, target in graph.edges:
            f.write(
                _EDGE_RECORD.pack(
                    0,
                    sequence_number(graph.nodes[source]),
                    sequence_number(graph.nodes[target]),
                )
            )
            f.write(_NEWLINE)
    return path


def write_graphmlz(graph: SequenceGraph, path: Path) -> Path:
    """Write ``graph`` as gzip-compressed GraphML."""
    logger.info("Writing compressed GraphML to %s", path)
    with gzip.open(path, "wt", encoding="utf-8") as f:
        f.write('<?xml version="1.0" encoding="UTF-8"?>\n')
        f.write('<graphml xmlns="http://graphml.graphdrawing.org/xmlns">\n')
        f.write('  <key id="weight" for="node" attr.name="weight" attr.type="string" />\n')
        f.write('  <graph edgedefault="directed">\n')
        for idx, name in enumerate(graph.nodes):
            f.write(f'    <node id="n{idx}">\n')
            f.write(f'      <data key="weight">{escape(name)}</data>\n')
            f.write("    </node>\n")
        for idx, (source, target) in enumerate(graph.edges):
            f.write(f'    <edge id="e{idx}" source="n{source}" target="n{target}" />\n')
        f.write("  </graph>\n")
        f.write("</graphml>\n")
    return path
