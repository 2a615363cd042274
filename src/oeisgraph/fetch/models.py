from __future__ import annotations

from dataclasses import dataclass

OEIS_DATA_REPO = "https://github.com/oeis/oeisdata.git"


@dataclass(frozen=True)
class SparseGitSource:
    repo: str
    # Single directory kept by the cone-mode sparse checkout
    sparse_path: str
    # Directory the repo is cloned into, relative to the working directory
    target: str = "output"
    depth: int = 1


OEIS_SEQ_SOURCE = SparseGitSource(repo=OEIS_DATA_REPO, sparse_path="seq")
