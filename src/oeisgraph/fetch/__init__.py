"""Fetch subpackage public API."""

from .cli import main as fetch_main
from .git_fetcher import SparseGitFetcher
from .models import OEIS_SEQ_SOURCE, SparseGitSource

__all__ = [
    "fetch_main",
    "SparseGitFetcher",
    "SparseGitSource",
    "OEIS_SEQ_SOURCE",
]
