"""Tests for the fetch and build command-line entry points."""

from unittest.mock import Mock

from oeisgraph.fetch import cli as fetch_cli
from oeisgraph.fetch import git_fetcher
from oeisgraph.graph import cli as build_cli


def _write_seq_tree(root):
    seq_dir = root / "output" / "seq" / "A000"
    seq_dir.mkdir(parents=True)
    (seq_dir / "A000001.seq").write_text("%I A000001\n%Y Cf. A000002.\n", encoding="utf-8")
    (seq_dir / "A000002.seq").write_text("%I A000002\n", encoding="utf-8")
    return root / "output" / "seq"


def test_fetch_cli_is_noop_when_output_exists(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "output").mkdir()
    run = Mock()
    monkeypatch.setattr(git_fetcher.subprocess, "run", run)

    assert fetch_cli.main(["--log-level", "debug"]) == 0
    run.assert_not_called()


def test_build_cli_writes_both_outputs(tmp_path):
    seq_dir = _write_seq_tree(tmp_path)
    out_dir = tmp_path / "out"

    rc = build_cli.main(
        ["--skip-fetch", "--no-progress", "--seq-dir", str(seq_dir), "--out-dir", str(out_dir)]
    )

    assert rc == 0
    assert (out_dir / build_cli.RAWBIN_NAME).stat().st_size > 0
    assert (out_dir / build_cli.GRAPHMLZ_NAME).stat().st_size > 0


def test_build_cli_fetches_before_building(tmp_path, monkeypatch):
    seq_dir = _write_seq_tree(tmp_path)
    fetcher_cls = Mock()
    monkeypatch.setattr(build_cli, "SparseGitFetcher", fetcher_cls)

    rc = build_cli.main(["--no-progress", "--seq-dir", str(seq_dir), "--out-dir", str(tmp_path)])

    assert rc == 0
    fetcher_cls.return_value.fetch.assert_called_once_with()


def test_build_cli_out_dir_from_environment(tmp_path, monkeypatch):
    seq_dir = _write_seq_tree(tmp_path)
    out_dir = tmp_path / "env-out"
    monkeypatch.setenv("OEISGRAPH_OUT_DIR", str(out_dir))

    assert build_cli.main(["--skip-fetch", "--no-progress", "--seq-dir", str(seq_dir)]) == 0
    assert (out_dir / build_cli.RAWBIN_NAME).exists()
