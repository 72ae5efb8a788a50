"""
Filesystem sink for generated documents.

The output root is owned by a single run: it is deleted, bucket
directories are recreated, and every document is written as an
independent task. All writes are awaited together and the first failure
fails the run.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
from pathlib import Path
from typing import Callable

from ..core.types import OutputDocument
from ..utils.logging import log_event


def reset_output_root(root: Path) -> bool:
    """Delete the output root and everything below it.

    Returns:
        True if something was deleted, False if the root did not exist

    Raises:
        ValueError: If root is the working directory or a filesystem root
    """
    resolved = root.resolve()
    if resolved == Path.cwd().resolve() or resolved == Path(resolved.anchor):
        raise ValueError(f"Refusing to delete output root {root}")
    if not root.exists() and not root.is_symlink():
        return False
    if root.is_dir() and not root.is_symlink():
        shutil.rmtree(root)
    else:
        root.unlink()
    return True


def _bucket_directories(root: Path, documents: list[OutputDocument]) -> list[Path]:
    directories: dict[Path, None] = {}
    for document in documents:
        directories.setdefault(document.target(root).parent, None)
    return list(directories)


async def publish_documents(
    root: Path,
    documents: list[OutputDocument],
    logger: logging.Logger | None = None,
    on_written: Callable[[Path], None] | None = None,
) -> list[Path]:
    """Rebuild the output tree from ``documents``.

    Args:
        root: Output root, deleted before anything is written
        documents: Documents to write
        logger: Logger for events
        on_written: Optional callback invoked after each completed write

    Returns:
        Paths of the written files, in document order
    """
    removed = await asyncio.to_thread(reset_output_root, root)
    log_event(logger, "Output reset", event="output_reset", output=str(root), removed=removed)

    # Every bucket directory exists before the first write is issued.
    for directory in _bucket_directories(root, documents):
        await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)

    async def _write_single(document: OutputDocument) -> Path:
        target = document.target(root)
        await asyncio.to_thread(target.write_text, document.text, encoding="utf-8")
        log_event(logger, f"Created: {target}", event="document_written", path=str(target))
        if on_written is not None:
            on_written(target)
        return target

    tasks = [asyncio.create_task(_write_single(document)) for document in documents]
    return list(await asyncio.gather(*tasks))


def write_output_tree(
    root: Path,
    documents: list[OutputDocument],
    logger: logging.Logger | None = None,
    on_written: Callable[[Path], None] | None = None,
) -> list[Path]:
    """Synchronous entry point around publish_documents."""
    return asyncio.run(publish_documents(root, documents, logger, on_written))
