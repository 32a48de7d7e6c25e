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

import os
from typing import Iterator

from ..ports.directory import DirectoryPort, PathArg


class LocalDirectoryLister(DirectoryPort):
    """Local filesystem adapter backed by ``os.scandir``."""

    def open(self, path: PathArg) -> Iterator[os.DirEntry]:
        # NOTE: scandir closes its handle itself once exhausted; an early
        # stop relies on the reader (or the iterator's finaliser) to close it.
        return os.scandir(path)
