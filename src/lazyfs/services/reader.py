# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import enum
import logging
from typing import Iterator, Optional

from ..adapters.local_fs import LocalDirectoryLister
from ..ports.directory import DirectoryPort, DirEntryLike, PathArg

logger = logging.getLogger(__name__)


class ReaderState(enum.Enum):
    OPENED = "opened"
    FAILED = "failed"


class LenientDirectoryReader:
    """
    Iterator over the entries of one directory that never raises.

      - if the directory cannot be opened, the sequence is empty
      - an entry that fails to read is skipped and iteration continues
      - once the listing ends the reader stays ended

    Entries come out in whatever order the OS hands them over. A reader
    cannot be rewound; open the directory again to re-scan it.
    """

    def __init__(self, path: PathArg, lister: Optional[DirectoryPort] = None) -> None:
        self._path = path
        self._handle: Optional[Iterator[DirEntryLike]] = None
        self._state = ReaderState.FAILED

        lister = lister or LocalDirectoryLister()
        try:
            self._handle = iter(lister.open(path))
            self._state = ReaderState.OPENED
        except Exception as e:
            logger.debug("LenientDirectoryReader: open failed for %r: %s", path, e)

    @property
    def state(self) -> ReaderState:
        return self._state

    def __iter__(self) -> "LenientDirectoryReader":
        return self

    def __next__(self) -> DirEntryLike:
        entry = self.next_entry()
        if entry is None:
            raise StopIteration
        return entry

    def next_entry(self) -> Optional[DirEntryLike]:
        """Return the next entry, or None once the listing is over."""
        while self._state is ReaderState.OPENED:
            try:
                return next(self._handle)
            except StopIteration:
                self._finish()
            except Exception as e:
                # One unreadable slot does not invalidate the rest.
                logger.debug(
                    "LenientDirectoryReader: skipping unreadable entry in %r: %s",
                    self._path,
                    e,
                )
        return None

    def _finish(self) -> None:
        handle, self._handle = self._handle, None
        self._state = ReaderState.FAILED
        close = getattr(handle, "close", None)
        if close is None:
            return
        try:
            close()
        except Exception as e:
            logger.debug("LenientDirectoryReader: close failed for %r: %s", self._path, e)

    def __enter__(self) -> "LenientDirectoryReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._state is ReaderState.OPENED:
            self._finish()

    def __repr__(self) -> str:
        return f"LenientDirectoryReader({self._path!r}, state={self._state.value})"


def open_directory(
    path: PathArg, lister: Optional[DirectoryPort] = None
) -> LenientDirectoryReader:
    """
    Open `path` as a best-effort directory listing.

    Never raises: a path that is missing, is not a directory, or cannot be
    read produces an empty sequence.
    """
    return LenientDirectoryReader(path, lister=lister)
