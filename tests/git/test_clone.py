"""Tests for repository acquisition helpers."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from solscrape.errors import AcquisitionError
from solscrape.git.clone import RepoCloner, cloned_repository, extract_repo_name


def test_clone_runs_shallow_git_clone(tmp_path: Path) -> None:
    calls: list[list[str]] = []

    def runner(args, cwd=None, capture_output=False):  # type: ignore[no-untyped-def]
        calls.append(list(args))
        return ""

    RepoCloner(runner=runner).clone("https://github.com/user/repo.git", tmp_path)

    assert calls == [["git", "clone", "--depth", "1", "https://github.com/user/repo.git", str(tmp_path)]]


def test_clone_reports_missing_git(tmp_path: Path) -> None:
    def runner(args, cwd=None, capture_output=False):  # type: ignore[no-untyped-def]
        raise FileNotFoundError("git")

    with pytest.raises(AcquisitionError, match="Git is not installed"):
        RepoCloner(runner=runner).clone("https://example.com/repo.git", tmp_path)


def test_clone_surfaces_git_stderr(tmp_path: Path) -> None:
    def runner(args, cwd=None, capture_output=False):  # type: ignore[no-untyped-def]
        raise subprocess.CalledProcessError(
            128, args, output="", stderr="fatal: repository not found\n"
        )

    with pytest.raises(AcquisitionError) as excinfo:
        RepoCloner(runner=runner).clone("https://example.com/missing.git", tmp_path)

    assert str(excinfo.value) == "Git clone failed: fatal: repository not found"


def test_cloned_repository_removes_directory_on_error() -> None:
    captured: list[Path] = []

    def runner(args, cwd=None, capture_output=False):  # type: ignore[no-untyped-def]
        target = Path(args[-1])
        (target / "A.sol").write_text("a;", encoding="utf-8")
        return ""

    with pytest.raises(RuntimeError, match="boom"):
        with cloned_repository("https://example.com/repo.git", RepoCloner(runner=runner)) as path:
            captured.append(path)
            assert (path / "A.sol").exists()
            raise RuntimeError("boom")

    assert captured
    assert not captured[0].exists()


def test_cloned_repository_removes_directory_when_clone_fails() -> None:
    seen: list[Path] = []

    def runner(args, cwd=None, capture_output=False):  # type: ignore[no-untyped-def]
        seen.append(Path(args[-1]))
        raise subprocess.CalledProcessError(128, args, stderr="fatal: nope")

    with pytest.raises(AcquisitionError):
        with cloned_repository("https://example.com/repo.git", RepoCloner(runner=runner)):
            pass  # pragma: no cover - clone fails before the body runs

    assert seen
    assert not seen[0].exists()


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://github.com/user/repo.git", "repo"),
        ("https://github.com/user/repo", "repo"),
        ("https://github.com/user/my-project.git/", "my-project"),
        ("git@github.com:user/contracts.git", "contracts"),
        ("", "repository"),
    ],
)
def test_extract_repo_name(url: str, expected: str) -> None:
    assert extract_repo_name(url) == expected
