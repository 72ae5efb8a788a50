"""Tests for output tree reset and concurrent writes."""

import asyncio
from pathlib import Path, PurePosixPath

import pytest

from news_mdx.core.types import FrontMatter, OutputDocument
from news_mdx.output.sink import publish_documents, reset_output_root, write_output_tree


def _document(path: str, text: str) -> OutputDocument:
    front_matter = FrontMatter(
        slug="s", title="t", description="d", author="a", date="", thumbnail=""
    )
    return OutputDocument(path=PurePosixPath(path), front_matter=front_matter, body="", text=text)


def test_publish_writes_every_document(tmp_path: Path) -> None:
    root = tmp_path / "news"
    documents = [
        _document("2024/03/01/001.mdx", "one"),
        _document("2024/03/01/002.mdx", "two"),
        _document("2024/03/02/001.mdx", "three"),
    ]

    written = asyncio.run(publish_documents(root, documents))

    assert written == [root / "2024/03/01/001.mdx", root / "2024/03/01/002.mdx", root / "2024/03/02/001.mdx"]
    assert (root / "2024/03/01/002.mdx").read_text(encoding="utf-8") == "two"
    assert (root / "2024/03/02/001.mdx").read_text(encoding="utf-8") == "three"


def test_publish_replaces_previous_tree(tmp_path: Path) -> None:
    root = tmp_path / "news"
    stale = root / "2020" / "01" / "01" / "001.mdx"
    stale.parent.mkdir(parents=True)
    stale.write_text("stale", encoding="utf-8")

    write_output_tree(root, [_document("2024/03/01/001.mdx", "fresh")])

    assert not stale.exists()
    assert not (root / "2020").exists()
    assert sorted(p.relative_to(root).as_posix() for p in root.rglob("*.mdx")) == ["2024/03/01/001.mdx"]


def test_on_written_called_once_per_document(tmp_path: Path) -> None:
    seen: list[Path] = []
    documents = [_document(f"2024/03/01/00{i}.mdx", str(i)) for i in range(1, 4)]

    write_output_tree(tmp_path / "news", documents, on_written=seen.append)

    assert sorted(seen) == sorted(d.target(tmp_path / "news") for d in documents)


def test_empty_document_list_still_resets_root(tmp_path: Path) -> None:
    root = tmp_path / "news"
    root.mkdir()
    (root / "old.mdx").write_text("old", encoding="utf-8")

    assert write_output_tree(root, []) == []
    assert not root.exists()


def test_reset_missing_root_is_noop(tmp_path: Path) -> None:
    assert reset_output_root(tmp_path / "absent") is False


def test_reset_refuses_working_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ValueError, match="Refusing"):
        reset_output_root(Path("."))
    assert tmp_path.exists()


def test_write_failure_fails_the_run(tmp_path: Path) -> None:
    root = tmp_path / "news"
    # The second document forces a directory where the first one is written.
    documents = [
        _document("bucket/001.mdx", "file"),
        _document("bucket/001.mdx/002.mdx", "nested"),
    ]

    with pytest.raises(OSError):
        write_output_tree(root, documents)
