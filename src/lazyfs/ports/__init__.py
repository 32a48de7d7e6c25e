from .directory import DirectoryPort, DirEntryLike, PathArg

__all__ = ["DirectoryPort", "DirEntryLike", "PathArg"]
