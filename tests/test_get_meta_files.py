"""Tests for batch resolution of marker files."""

import asyncio
from pathlib import Path

import pytest

from meta_info import find_nearest_file as module
from meta_info.get_meta_files import get_meta_files
from meta_info.invalid_argument_error import InvalidArgumentError


@pytest.fixture
def labels_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Build a repository with two labelled projects and chdir into it."""
    for project, labels in {
        "app": "project:app\nproject:common\n",
        "cast": "project:cast\n",
    }.items():
        (tmp_path / project / "src").mkdir(parents=True)
        (tmp_path / project / ".labels").write_text(labels, encoding="utf-8")
    (tmp_path / ".github" / "workflows").mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.mark.asyncio
async def test_single_file(labels_repo: Path) -> None:
    """Verify a changed file resolves to its project's labels file."""
    assert await get_meta_files(["app/src/a.js"], ".labels") == ["app/.labels"]


@pytest.mark.asyncio
async def test_multiple_files(labels_repo: Path) -> None:
    """Verify distinct subtrees keep distinct labels files."""
    result = await get_meta_files(["app/src/a.js", "cast/src/b.js"], ".labels")
    assert result == ["app/.labels", "cast/.labels"]


@pytest.mark.asyncio
async def test_shared_marker_deduplicated(labels_repo: Path) -> None:
    """Verify files sharing a labels file yield it once."""
    result = await get_meta_files(
        ["app/src/a.js", "app/src/b.js", "app/README.md"], ".labels"
    )
    assert result == ["app/.labels"]


@pytest.mark.asyncio
async def test_unmatched_files_dropped(labels_repo: Path) -> None:
    """Verify files without a labels file leave no None entries."""
    result = await get_meta_files(
        [".github/workflows/pr.yml", "cast/src/b.js"], ".labels"
    )
    assert result == ["cast/.labels"]


@pytest.mark.asyncio
async def test_order_independent_of_completion(
    labels_repo: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Verify the output order follows input order, not finish order."""
    real_exists = module.path_exists

    async def slow_for_app(path: str) -> bool:
        if path.startswith("app"):
            await asyncio.sleep(0.05)
        return await real_exists(path)

    monkeypatch.setattr(module, "path_exists", slow_for_app)
    result = await get_meta_files(["app/src/a.js", "cast/src/b.js"], ".labels")
    assert result == ["app/.labels", "cast/.labels"]


@pytest.mark.asyncio
async def test_bounded_concurrency(labels_repo: Path) -> None:
    """Verify a concurrency bound gives the same result."""
    files = [f"app/src/f{i}.js" for i in range(10)] + ["cast/src/b.js"]
    result = await get_meta_files(files, ".labels", max_concurrency=2)
    assert result == ["app/.labels", "cast/.labels"]


@pytest.mark.asyncio
async def test_empty_input() -> None:
    """Verify no changed files gives no marker files."""
    assert await get_meta_files([], ".labels") == []


@pytest.mark.asyncio
async def test_invalid_filename() -> None:
    """Verify the filename is validated before resolving."""
    with pytest.raises(InvalidArgumentError):
        await get_meta_files(["app/src/a.js"], "app/.labels")
