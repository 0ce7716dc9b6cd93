"""Plain file transport with daily rollover"""

import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from transport_logger.core.log_level import LogLevel
from transport_logger.core.log_record import LogRecord
from transport_logger.core.transport_config import FileTransportConfig, PathLike
from transport_logger.transports.base_transport import BaseTransport

ROLLOVER_AGE_SECONDS = 24 * 60 * 60
ARCHIVE_DATE_FORMAT = "%Y-%m-%d"
CREATED_XATTR = "user.transport_logger.created"


def sidecar_path(path: Path) -> Path:
    """Hidden file holding the creation instant of ``path``."""
    return path.with_name(f".{path.stem}.created")


def store_created_at(path: Path, created: float) -> None:
    """
    Remember the creation instant of ``path``.

    Stored as an extended attribute where the filesystem supports them,
    otherwise in a sidecar file. If neither can be written nothing is
    stored and :func:`file_created_at` uses the file's own timestamps.
    """
    value = repr(created)
    setxattr = getattr(os, "setxattr", None)
    if setxattr is not None:
        try:
            setxattr(path, CREATED_XATTR, value.encode("ascii"))
            return
        except OSError:
            pass
    try:
        sidecar_path(path).write_text(value, encoding="ascii")
    except OSError:
        pass


def read_created_at(path: Path) -> Optional[float]:
    """Creation instant stored by :func:`store_created_at`, if any."""
    getxattr = getattr(os, "getxattr", None)
    if getxattr is not None:
        try:
            return float(getxattr(path, CREATED_XATTR).decode("ascii"))
        except (OSError, ValueError):
            pass
    try:
        return float(sidecar_path(path).read_text(encoding="ascii"))
    except (OSError, ValueError):
        return None


def file_created_at(path: Path, stat_result: os.stat_result) -> float:
    """
    Creation instant of a file, as a POSIX timestamp.

    Prefers the instant stored when the transport started the file. Files
    without one use ``st_birthtime`` where the platform reports it, then
    ``st_ctime`` (the creation time on Windows, the last inode change on
    Linux).
    """
    stored = read_created_at(path)
    if stored is not None:
        return stored
    birthtime = getattr(stat_result, "st_birthtime", None)
    if birthtime is not None:
        return birthtime
    return stat_result.st_ctime


class PlainFileTransport(BaseTransport):
    """
    Write raw records to ``{name}-latest.log`` with age-based rollover.

    Once the latest file is 24 hours old it is renamed to
    ``{name}-{YYYY-MM-DD}.log`` and a new latest file is started. Age is
    measured from the creation instant stored when the file was started, so
    appends do not restart the clock. With a
    non-negative ``file_retention`` only that many archives are kept, the
    oldest by modification time being removed first.

    Every write opens and closes its own file handle.
    """

    config_class = FileTransportConfig

    def __init__(
        self,
        config: Optional[FileTransportConfig] = None,
        *,
        log_format: Optional[str] = None,
        time_format: Optional[str] = None,
        minimum_level: Optional[LogLevel] = None,
        log_path: Optional[PathLike] = None,
        file_retention: Optional[int] = None,
        encoding: str = "utf-8",
    ):
        """
        Initialize file transport.

        Args:
            config: File transport configuration
            log_format: Line template override
            time_format: Time pattern override
            minimum_level: Threshold override
            log_path: Log directory (default: ``./logs`` at construction time)
            file_retention: Archives to keep, negative for unlimited
            encoding: File encoding (default: 'utf-8')
        """
        super().__init__(
            config,
            log_format=log_format,
            time_format=time_format,
            minimum_level=minimum_level,
            log_path=log_path,
            file_retention=file_retention,
        )
        self.encoding = encoding

    @property
    def log_path(self) -> Path:
        return self._config.log_path

    @log_path.setter
    def log_path(self, value: PathLike) -> None:
        self.configure(log_path=value)

    @property
    def file_retention(self) -> int:
        return self._config.file_retention

    @file_retention.setter
    def file_retention(self, value: int) -> None:
        self.configure(file_retention=value)

    def latest_path(self, name: str) -> Path:
        """Path of the file currently written for logger ``name``."""
        return self.log_path / f"{name}-latest.log"

    def archive_path(self, name: str, created: float) -> Path:
        """Path an aged latest file is renamed to."""
        date = datetime.fromtimestamp(created).strftime(ARCHIVE_DATE_FORMAT)
        return self.log_path / f"{name}-{date}.log"

    def log(self, record: LogRecord) -> None:
        """Write record, rolling the latest file over when it is a day old."""
        config = self._config
        if not config.log_path.exists():
            config.log_path.mkdir()

        target = self.latest_path(record.name)
        line = record.raw + "\n"

        try:
            created = file_created_at(target, target.stat())
            if record.time.timestamp() - created >= ROLLOVER_AGE_SECONDS:
                os.replace(target, self.archive_path(record.name, created))
                if config.retention_enabled:
                    self._prune_archives(record.name, config.file_retention)
                self._start(target, line, record)
            else:
                self._write(target, line, "a")
        except OSError:
            # Missing file and unreadable file alike start a fresh latest file
            self._start(target, line, record)

    def archives(self, name: str) -> List[Path]:
        """
        Archived files of logger ``name``, oldest modification first.

        Every ``{name}-*.log`` file in the log directory except the latest
        file counts as an archive.
        """
        prefix = f"{name}-"
        latest = self.latest_path(name).name
        candidates = []
        for entry in os.scandir(self.log_path):
            file_name = entry.name
            if file_name == latest or not entry.is_file():
                continue
            if (
                file_name.startswith(prefix)
                and file_name.endswith(".log")
                and len(file_name) > len(prefix) + len(".log")
            ):
                candidates.append((entry.stat().st_mtime, file_name))
        candidates.sort()
        return [self.log_path / file_name for _, file_name in candidates]

    def _prune_archives(self, name: str, retention: int) -> None:
        archives = self.archives(name)
        excess = len(archives) - retention
        for path in archives[:max(excess, 0)]:
            path.unlink()

    def _start(self, path: Path, line: str, record: LogRecord) -> None:
        # Appends refresh st_ctime, so the age clock starts from this instant
        self._write(path, line, "w")
        store_created_at(path, record.time.timestamp())

    def _write(self, path: Path, line: str, mode: str) -> None:
        with open(path, mode, encoding=self.encoding) as handle:
            handle.write(line)

    def time(self, timestamp: datetime) -> str:
        return timestamp.strftime(self.time_format)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"PlainFileTransport(log_path='{self.log_path}', "
            f"file_retention={self.file_retention}, minimum_level={self.minimum_level})"
        )
