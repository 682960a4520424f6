"""File-based record persistence.

Every new best layout is written to a stable "latest best" file, archived
under a score-named file and announced in an append-only records log.
This is the only place the search writes to disk.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from omegaconf import DictConfig

from buglab.core.maze import Maze

logger = logging.getLogger(__name__)


class RecordStore:
    """Persists record layouts on a best-effort basis."""

    def __init__(self,
                 output_dir: Union[str, Path] = "maze_outputs",
                 archive_subdir: str = "archive",
                 latest_best_filename: str = "best_record.txt",
                 records_log_filename: str = "records_log.txt",
                 archive_prefix: str = "maze_record_"):
        """Initialize record store.

        Args:
            output_dir: Root directory for all record artifacts
            archive_subdir: Archive directory, relative to ``output_dir``
            latest_best_filename: File overwritten with each new record
            records_log_filename: Log file inside the archive directory
            archive_prefix: Prefix of score-named archive files
        """
        self.output_dir = Path(output_dir)
        self.archive_dir = self.output_dir / archive_subdir
        self.latest_best_path = self.output_dir / latest_best_filename
        self.records_log_path = self.archive_dir / records_log_filename
        self.archive_prefix = archive_prefix

        self.records_written = 0
        self.write_failures = 0

    def setup(self) -> None:
        """Create the output and archive directories."""
        self.archive_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Record store ready: {self.output_dir}")

    def archive_path(self, score: int) -> Path:
        return self.archive_dir / f"{self.archive_prefix}{score}.txt"

    def notify_record(self, maze: Maze, score: int) -> None:
        """Persist a new record.

        Write failures are logged and counted; they never propagate, so the
        search keeps its in-memory progress.
        """
        logger.info(f"Record found: {score}")
        self.records_written += 1

        self._append_log(score)
        self._save_maze(maze, self.archive_path(score))
        self._save_maze(maze, self.latest_best_path)

    def _append_log(self, score: int) -> None:
        try:
            with open(self.records_log_path, 'a') as f:
                f.write(f"Record: {score}\n")
        except OSError as e:
            self.write_failures += 1
            logger.error(f"Failed to append to records log {self.records_log_path}: {e}")

    def _save_maze(self, maze: Maze, path: Path) -> None:
        try:
            maze.save(path)
        except OSError as e:
            self.write_failures += 1
            logger.error(f"Failed to write maze to {path}: {e}")


def create_record_store(config: Optional[DictConfig] = None) -> RecordStore:
    """Factory function to create a record store from the ``records`` config section.

    Args:
        config: Records configuration (defaults used if None)

    Returns:
        RecordStore with its directories created
    """
    config = config or {}
    store = RecordStore(
        output_dir=config.get('output_dir', 'maze_outputs'),
        archive_subdir=config.get('archive_subdir', 'archive'),
        latest_best_filename=config.get('latest_best_filename', 'best_record.txt'),
        records_log_filename=config.get('records_log_filename', 'records_log.txt'),
        archive_prefix=config.get('archive_prefix', 'maze_record_')
    )
    store.setup()
    return store
