from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .models import OEIS_SEQ_SOURCE, SparseGitSource

logger = logging.getLogger(__name__)


class SparseGitFetcher:
    """Clone a single directory of a remote repository, once.

    The fetch is skipped entirely when the target directory already exists.
    Nothing checks that an existing directory is a complete checkout, so a
    clone interrupted part way is left on disk and reused as-is next time.

    The OEIS data repository stores files with git-lfs, which must be
    installed on the host.
    """

    def fetch(self, src: SparseGitSource = OEIS_SEQ_SOURCE, root: Path = Path(".")) -> Path:
        target = root / src.target

        if target.exists():
            logger.info("%s already present, skipping fetch", target)
            return target

        logger.info("Cloning %s -> %s (no checkout)", src.repo, target)
        subprocess.run(
            ["git", "clone", "--no-checkout", f"--depth={src.depth}", src.repo, str(target)],
            check=True,
        )

        logger.info("Restricting sparse checkout to %s", src.sparse_path)
        subprocess.run(["git", "-C", str(target), "sparse-checkout", "init", "--cone"], check=True)
        subprocess.run(["git", "-C", str(target), "sparse-checkout", "set", src.sparse_path], check=True)

        logger.info("Checking out %s", target)
        subprocess.run(["git", "-C", str(target), "checkout"], check=True)

        return target
