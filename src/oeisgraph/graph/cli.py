from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from ..fetch.git_fetcher import SparseGitFetcher
from .builder import build_graph
from .export import write_graphmlz, write_rawbin

RAWBIN_NAME = "output.bin"
GRAPHMLZ_NAME = "output.graphmlz"


def main(argv: list[str] | None = None) -> int:
    # Load .env before reading environment defaults
    load_dotenv()

    parser = argparse.ArgumentParser(description="Build the OEIS sequence reference graph")
    parser.add_argument("--seq-dir", default=Path("output/seq"), type=Path, help="Directory of sequence files")
    parser.add_argument(
        "--out-dir",
        default=Path(os.getenv("OEISGRAPH_OUT_DIR", ".")),
        type=Path,
        help="Directory for output.bin and output.graphmlz (or set OEISGRAPH_OUT_DIR)",
    )
    parser.add_argument("--skip-fetch", action="store_true", help="Do not fetch the sequence data first")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress display")
    parser.add_argument("--log-level", default=os.getenv("OEISGRAPH_LOG_LEVEL", "INFO"), help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(levelname)s %(message)s")

    if not args.skip_fetch:
        SparseGitFetcher().fetch()

    graph = build_graph(args.seq_dir, show_progress=not args.no_progress)

    out_dir: Path = args.out_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    write_rawbin(graph, out_dir / RAWBIN_NAME)
    write_graphmlz(graph, out_dir / GRAPHMLZ_NAME)

    logging.info("Done building graph: %d nodes, %d edges", len(graph.nodes), len(graph.edges))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
