"""Lazy, error-ignoring directory listing."""

from .services.reader import LenientDirectoryReader, ReaderState, open_directory

__all__ = ["LenientDirectoryReader", "ReaderState", "open_directory"]
