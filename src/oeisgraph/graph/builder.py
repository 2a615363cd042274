from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from tqdm import tqdm

logger = logging.getLogger(__name__)

SEQUENCE_NAME_RE = re.compile(r"A\d{6,}")
_NUMBERED_NAME_RE = re.compile(r"A(\d+)")

_U32_MAX = 2**32 - 1


def sequence_number(name: str) -> int:
    """Numeric part of an OEIS A-number, e.g. ``A000045`` -> 45."""
    m = _NUMBERED_NAME_RE.fullmatch(name)
    if not m:
        raise ValueError(f"Not a sequence name: {name!r}")
    number = int(m.group(1))
    if number > _U32_MAX:
        raise ValueError(f"Sequence number does not fit in 32 bits: {name!r}")
    return number


@dataclass
class SequenceGraph:
    """Directed multigraph of sequence references.

    Nodes are sequence names, indexed in the order they are first seen.
    Parallel edges and self loops are kept.
    """

    nodes: list[str] = field(default_factory=list)
    edges: list[tuple[int, int]] = field(default_factory=list)
    _index: dict[str, int] = field(default_factory=dict, repr=False)

    def node_id(self, name: str) -> int:
        idx = self._index.get(name)
        if idx is None:
            idx = len(self.nodes)
            self.nodes.append(name)
            self._index[name] = idx
        return idx

    def add_edge(self, source: str, target: str) -> None:
        self.edges.append((self.node_id(source), self.node_id(target)))

    def __contains__(self, name: object) -> bool:
        return name in self._index


def build_graph(seq_dir: Path, show_progress: bool = True) -> SequenceGraph:
    """Parse every sequence file under ``seq_dir`` into a reference graph.

    Each file is named after its sequence; every A-number mentioned in the
    file body (including its own) becomes an edge from that sequence.
    """
    if not seq_dir.is_dir():
        raise FileNotFoundError(f"Sequence directory not found: {seq_dir}")

    graph = SequenceGraph()
    files = (p for p in sorted(seq_dir.rglob("*")) if p.is_file())

    count = 0
    with tqdm(files, desc="Parsing sequences", unit="seq", disable=not show_progress) as progress:
        for path in progress:
            name = path.stem
            graph.node_id(name)

            text = path.read_text(encoding="utf-8", errors="replace")
            for m in SEQUENCE_NAME_RE.finditer(text):
                graph.add_edge(name, m.group(0))
            count += 1

    logger.info("Parsed %d sequences: %d nodes, %d edges", count, len(graph.nodes), len(graph.edges))
    return graph
