"""Output tree reset and concurrent document writing."""

from .sink import publish_documents, reset_output_root, write_output_tree

__all__ = [
    "publish_documents",
    "reset_output_root",
    "write_output_tree",
]
