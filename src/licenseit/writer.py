"""Writing the rendered license to disk."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from collections.abc import Callable
from pathlib import Path

from licenseit.errors import AbortedByUserError, DirectoryError, WriteError

logger = logging.getLogger(__name__)

ConfirmOverwrite = Callable[[Path], bool]


def always_overwrite(_path: Path) -> bool:
    """Confirmation callback for non-interactive use."""
    return True


def _target_mode(path: Path) -> int:
    """Mode for the written file: keep an existing file's mode, else honor the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _write_all_or_nothing(path: Path, content: str) -> None:
    """Write to a temp file next to `path`, then move it into place.

    Surrogate-escaped characters (undecodable bytes from argv) are written
    back as the original bytes.
    """
    mode = _target_mode(path)
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(
            fd, "w", encoding="utf-8", errors="surrogateescape", newline=""
        ) as f:
            f.write(content)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def write_license(
    content: str,
    file_name: str,
    directory: Path,
    confirm_overwrite: ConfirmOverwrite,
) -> Path:
    """Write license content to `directory / file_name`.

    Creates the directory (and parents) if needed. If the file already
    exists, `confirm_overwrite` decides whether to replace it.

    Returns:
        The absolute path of the written file.

    Raises:
        DirectoryError: If the directory cannot be created.
        AbortedByUserError: If overwriting was declined.
        WriteError: If the file cannot be written.
    """
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryError(directory, e) from e

    path = directory / file_name

    if path.exists():
        if not confirm_overwrite(path):
            raise AbortedByUserError(path)
        logger.debug("Overwriting existing file %s", path)

    try:
        _write_all_or_nothing(path, content)
    except (OSError, UnicodeError) as e:
        raise WriteError(path, e) from e

    resolved = path.resolve()
    logger.debug("Wrote %d characters to %s", len(content), resolved)
    return resolved
