"""Row serialization and output sinks."""

from pathlib import Path
from typing import IO, List, Optional
from urllib.parse import urlsplit

from tpcdsgen.config.logging import get_logger
from tpcdsgen.errors import OutputError

logger = get_logger(__name__)


def format_row(values: List[Optional[str]], session) -> str:
    """
    Serialize one row.

    Nulls become the session's null string, fields are joined with the
    separator, and a trailing separator is added unless rows are not
    terminated: ``["a", None, "c"]`` with null string ``NULL`` becomes
    ``a|NULL|c|`` plus a newline.
    """
    line = session.separator.join(session.null_string if value is None else value for value in values)
    if session.terminate_rows_with_separator():
        line += session.separator
    return line + "\n"


def _check_local_directory(directory: str) -> None:
    # Single letter schemes are Windows drive letters
    scheme = urlsplit(directory).scheme
    if len(scheme) > 1:
        raise OutputError(
            f"Target directory {directory} is a {scheme} URL; only local directories are supported"
        )


def get_path(table, session) -> Path:
    """
    ``<dir>/<table>/<table><suffix>``, with ``_<chunk>_<parallelism>`` when running in parallel.

    Raises:
        OutputError: If the target directory is a URL such as ``hdfs://...``
    """
    _check_local_directory(session.target_directory)
    name = table.table_name
    if session.parallelism > 1:
        file_name = f"{name}_{session.chunk_number}_{session.parallelism}{session.suffix}"
    else:
        file_name = f"{name}{session.suffix}"
    return session.target_path / name / file_name


class FileSink:
    """
    Local file output for one (table, chunk).

    A non-empty existing file is an error unless the session allows
    overwriting, in which case it is truncated. The check happens before
    anything is written.
    """

    def __init__(self, path: Path, overwrite: bool = False):
        self.path = Path(path)
        self.rows_written = 0
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if self.path.exists() and self.path.stat().st_size > 0 and not overwrite:
                raise OutputError(f"File {self.path} exists. Remove it or run with overwrite enabled")
            self._file: IO[str] = open(self.path, "w", encoding="utf-8", newline="")
        except OSError as e:
            raise OutputError(f"Cannot open {self.path} for writing: {e}") from e
        logger.debug(f"Opened output file {self.path}")

    @classmethod
    def for_table(cls, table, session) -> "FileSink":
        return cls(get_path(table, session), overwrite=session.overwrite)

    def write(self, line: str) -> None:
        try:
            self._file.write(line)
        except OSError as e:
            raise OutputError(f"Cannot write to {self.path}: {e}") from e
        self.rows_written += 1

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()
            logger.debug(f"Closed output file {self.path} after {self.rows_written:,} rows")

    def __enter__(self) -> "FileSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
