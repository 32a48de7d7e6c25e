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

import logging
from itertools import islice
from pathlib import Path
from typing import Optional

import typer

from ..adapters.local_fs import LocalDirectoryLister
from ..services import open_directory

from ..logging_config import setup_logging

setup_logging()

app = typer.Typer(help="lazyfs CLI - best-effort directory listings")

logger = logging.getLogger(__name__)


@app.callback()
def main() -> None:
    """Keep `ls` as an explicit subcommand."""


@app.command()
def ls(
    path: Path = typer.Option(
        ...,
        "--path",
        help="Directory to list. Missing or unreadable paths list nothing.",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        min=0,
        help="Stop after N entries. Omit to list everything.",
    ),
    names_only: bool = typer.Option(
        False,
        "--names-only",
        help="Print entry names instead of full paths.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Print the entries of a directory, in the order the OS returns them.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    with open_directory(path, lister=LocalDirectoryLister()) as reader:
        entries = reader if limit is None else islice(reader, limit)
        for entry in entries:
            typer.echo(entry.name if names_only else entry.path)
