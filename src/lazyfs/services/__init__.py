from .reader import LenientDirectoryReader, ReaderState, open_directory


__all__ = [
    'LenientDirectoryReader',
    'ReaderState',
    'open_directory',
]
