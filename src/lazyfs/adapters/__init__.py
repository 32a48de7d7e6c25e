from .local_fs import LocalDirectoryLister

__all__ = ["LocalDirectoryLister"]
