import errno
import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger: logging.Logger = logging.getLogger(__name__)

# fsync is not implemented by every pseudo-filesystem. The kernel has already acted on the
# write when os.write returns, so these are not failures.
_SYNC_UNSUPPORTED_ERRNOS: tuple[int, ...] = (errno.EINVAL, errno.EROFS, errno.ENOTSUP)


class ControlFileError(Exception):
    """
    Error raised while interacting with a pseudo-filesystem control file
    """
    def __init__(self, file: Path, error_number: int | None, reason: str):
        self.file = file
        self.errno = error_number
        self.reason = reason
        super().__init__(f"{file}: {reason}")


class ControlFileOpenError(ControlFileError):
    ...


class ControlFileWriteError(ControlFileError):
    ...


def file_exists(file: str | Path):
    """
    Checks whether a file exists (and it is a file)
    Args:
        file: File path to check

    Returns: true if conditions are met

    """
    if isinstance(file, str):
        file = Path(file)

    return file.exists() and file.is_file()


def file_exists_and_not_empty(filename: str | Path):
    """
    Checks whether a file exists (and it is a file) and whether it's empty
    Args:
        filename: File path to check

    Returns: true if conditions are met

    """
    if isinstance(filename, str):
        filename = Path(filename)

    return file_exists(filename) and filename.stat().st_size != 0


def read_file(file: str | Path, warn_on_missing: bool = False, **kwargs) -> str | None:
    """
    Reads a text file
    Args:
        file: path of the file
        warn_on_missing: log a warning if the file does not exist or is empty
        **kwargs: kwargs passed to Path.open()

    Returns: the file content or None if the file does not exist or is empty

    """
    if isinstance(file, str):
        file = Path(file)

    if not file_exists_and_not_empty(file):
        if warn_on_missing:
            logger.warning(f"File {file} does not exists or is empty")
        return None

    with file.open(mode='r', **kwargs) as f:
        return f.read()


@contextmanager
def control_file(file: Path) -> Iterator[int]:
    """
    Context manager opening a control file for write-only access. The descriptor is released on
    every exit path.
    Args:
        file: path of the control file

    Returns: the raw file descriptor

    Raises:
        ControlFileOpenError: the file could not be opened
    """
    try:
        fd = os.open(file, os.O_WRONLY)
    except OSError as ex:
        raise ControlFileOpenError(file, ex.errno, ex.strerror or str(ex)) from ex

    logger.debug(f"Opened control file {file} (fd={fd})")
    try:
        yield fd
    finally:
        os.close(fd)
        logger.debug(f"Closed control file {file}")


def _sync(fd: int, file: Path):
    try:
        os.fsync(fd)
    except OSError as ex:
        if ex.errno not in _SYNC_UNSUPPORTED_ERRNOS:
            raise ControlFileWriteError(file, ex.errno, ex.strerror or str(ex)) from ex
        logger.debug(f"Control file {file} does not support fsync: {ex.strerror}")


def write_control_file(file: str | Path, content: str) -> int:
    """
    Writes the content to a control file in a single write call and synchronises it before closing,
    so the driver has acted on it when this function returns.
    Args:
        file: path of the control file
        content: ASCII content to write

    Returns: number of bytes written

    Raises:
        ControlFileOpenError: the file could not be opened
        ControlFileWriteError: the write failed, was short or could not be synchronised
    """
    if isinstance(file, str):
        file = Path(file)

    data: bytes = content.encode('ascii')
    with control_file(file) as fd:
        try:
            written = os.write(fd, data)
        except OSError as ex:
            raise ControlFileWriteError(file, ex.errno, ex.strerror or str(ex)) from ex

        if written != len(data):
            raise ControlFileWriteError(file, None, f"short write, {written} of {len(data)} bytes")

        _sync(fd, file)

    logger.debug(f"Wrote {data!r} to {file}")
    return written
