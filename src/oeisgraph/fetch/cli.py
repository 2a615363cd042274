from __future__ import annotations

import argparse
import logging
import os

from dotenv import load_dotenv

from .git_fetcher import SparseGitFetcher


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Fetch the OEIS sequence data (seq/ only)")
    parser.add_argument("--log-level", default=os.getenv("OEISGRAPH_LOG_LEVEL", "INFO"), help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(levelname)s %(message)s")

    target = SparseGitFetcher().fetch()
    logging.info("Sequence data available under %s", target)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
