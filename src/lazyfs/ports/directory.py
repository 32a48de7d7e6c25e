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

import os
from abc import ABC, abstractmethod
from typing import Iterator, Protocol, Union

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


class DirEntryLike(Protocol):
    """The part of ``os.DirEntry`` callers rely on."""

    @property
    def name(self) -> str: ...

    @property
    def path(self) -> str: ...


class DirectoryPort(ABC):
    """Abstract interface for reading a single directory listing."""

    @abstractmethod
    def open(self, path: PathArg) -> Iterator[DirEntryLike]:
        """
        Open `path` as a directory listing and return its entry iterator.

        May raise on open, and the returned iterator may raise on any slot.
        If the iterator has a `close()` method it owns an OS resource.
        """
        raise NotImplementedError
