"""
Persistence for the shared (universal) scope.

Two files back the shared scope:

- the universals source file, human readable, one ``WORD EXPANSION`` line
  per abbreviation. It survives reboots.
- the snapshot file, a JSON image of the shared scope in the temp
  directory. Every process refreshes from it before touching the shared
  scope and rewrites it after every change, so concurrently running
  sessions converge without restarting.

Both files are written atomically (temp file in the same directory, then
``os.replace``). Concurrent flushes from two processes are last-writer-wins.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from abbrkit.core.datamodels import Abbreviation, UniversalSnapshot
from abbrkit.core.exceptions import InitializationError

logger = logging.getLogger(__name__)


def _atomic_write(path: Path, content: str) -> None:
    """Write content to path so readers never see a partial file."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def parse_universals(text: str) -> dict[str, str]:
    """Parse the contents of a universals source file."""
    abbreviations: dict[str, str] = {}
    for lineno, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        try:
            abbr = Abbreviation.from_line(line)
        except ValidationError as e:
            logger.warning(f"Skipping invalid line {lineno}: {e.errors()[0]['msg']}")
            continue
        if abbr is None:
            logger.warning(f"Skipping line {lineno}: no expansion for {line.strip()!r}")
            continue
        abbreviations[abbr.word] = abbr.expansion
    return abbreviations


def format_universals(abbreviations: dict[str, str]) -> str:
    """Render abbreviations in the universals source file format."""
    return "".join(f"{word} {expansion}\n" for word, expansion in abbreviations.items())


class UniversalSync:
    """Keeps the universals source file and the snapshot file in step."""

    def __init__(self, source_path: Path, snapshot_path: Path):
        self.source_path = Path(source_path)
        self.snapshot_path = Path(snapshot_path)

    def load_source(self) -> dict[str, str]:
        """Read the universals source file, creating it if it is missing.

        Raises:
            InitializationError: If the file cannot be read, or the
                directory or file cannot be created.
        """
        if self.source_path.exists():
            try:
                text = self.source_path.read_text(encoding="utf-8")
            except OSError as e:
                raise InitializationError(
                    f"Cannot read universals file {self.source_path}: {e}"
                ) from e
            return parse_universals(text)

        try:
            self.source_path.parent.mkdir(parents=True, exist_ok=True)
            self.source_path.touch()
        except OSError as e:
            raise InitializationError(
                f"Cannot create universals file {self.source_path}: {e}"
            ) from e
        logger.info(f"Created universals file {self.source_path}")
        return {}

    def start(self) -> dict[str, str]:
        """Load the source file and seed the snapshot from it.

        Any previous snapshot is replaced: the last process to start wins
        the initial snapshot.

        Returns:
            The shared abbreviations read from disk.
        """
        abbreviations = self.load_source()
        try:
            self.snapshot_path.parent.mkdir(parents=True, exist_ok=True)
            self.write_snapshot(abbreviations)
        except OSError as e:
            raise InitializationError(
                f"Cannot create snapshot file {self.snapshot_path}: {e}"
            ) from e
        logger.debug(f"Loaded {len(abbreviations)} universal abbreviations")
        return abbreviations

    def write_snapshot(self, abbreviations: dict[str, str]) -> None:
        snapshot = UniversalSnapshot(abbreviations=abbreviations)
        _atomic_write(self.snapshot_path, snapshot.model_dump_json())

    def refresh(self) -> dict[str, str]:
        """Return the shared scope as last flushed by any process.

        A missing or unreadable snapshot is rebuilt from the source file.

        Raises:
            InitializationError: If the snapshot has to be rebuilt and the
                source cannot be read or the snapshot cannot be written.
        """
        try:
            data = self.snapshot_path.read_text(encoding="utf-8")
            return dict(UniversalSnapshot.model_validate_json(data).abbreviations)
        except FileNotFoundError:
            logger.info(f"Snapshot {self.snapshot_path} missing, rebuilding from source")
        except (OSError, ValidationError) as e:
            logger.warning(f"Unreadable snapshot {self.snapshot_path} ({e}), rebuilding from source")

        try:
            abbreviations = self.load_source()
            self.snapshot_path.parent.mkdir(parents=True, exist_ok=True)
            self.write_snapshot(abbreviations)
        except OSError as e:
            raise InitializationError(
                f"Cannot rebuild snapshot file {self.snapshot_path}: {e}"
            ) from e
        return abbreviations

    def flush(self, abbreviations: dict[str, str]) -> None:
        """Publish the shared scope to the source file and the snapshot.

        The source file is written first, so a failed source write leaves
        both files as they were.

        Raises:
            InitializationError: If either file cannot be written.
        """
        try:
            _atomic_write(self.source_path, format_universals(abbreviations))
        except OSError as e:
            raise InitializationError(
                f"Cannot write universals file {self.source_path}: {e}"
            ) from e

        try:
            self.write_snapshot(abbreviations)
        except OSError as e:
            # Drop the stale snapshot so the next refresh rebuilds it
            with contextlib.suppress(OSError):
                self.snapshot_path.unlink(missing_ok=True)
            raise InitializationError(
                f"Cannot write snapshot file {self.snapshot_path}: {e}"
            ) from e
        logger.debug(f"Flushed {len(abbreviations)} universal abbreviations")
