"""Unpacking of node log archives on the host."""

from __future__ import annotations

import logging
import os
import tarfile
from typing import BinaryIO

_log = logging.getLogger(__name__)

_CHUNK = 64 * 1024


def _target(directory: str | os.PathLike, name: str) -> str:
    rel = name.replace("/", os.sep).lstrip(os.sep)
    return os.path.normpath(os.path.join(os.fspath(directory), rel))


def _next_member(archive: tarfile.TarFile) -> tarfile.TarInfo | None:
    try:
        return archive.next()
    except tarfile.TarError as exc:
        raise OSError(f"tar reading error: {exc}") from exc


def _write_member(archive: tarfile.TarFile, member: tarfile.TarInfo, path: str) -> None:
    source = archive.extractfile(member)
    fd = os.open(path, os.O_CREAT | os.O_RDWR, member.mode & 0o7777)
    written = 0
    try:
        with os.fdopen(fd, "wb") as handle:
            if source is not None:
                while chunk := source.read(_CHUNK):
                    handle.write(chunk)
                    written += len(chunk)
    except (OSError, tarfile.TarError) as exc:
        raise OSError(f"error writing to {path}: {exc}") from exc
    if written != member.size:
        raise OSError(
            f"only wrote {written} bytes to {path}; expected {member.size}"
        )


def untar(reader: BinaryIO, directory: str | os.PathLike) -> None:
    """Read a tar stream from reader and write its files and directories into directory.

    Regular files and directories are extracted; other entry types are
    skipped with a warning. Parent directories of files are not created.
    """
    try:
        archive = tarfile.open(fileobj=reader, mode="r|")
    except tarfile.ReadError as exc:
        if str(exc) == "empty file":
            return
        raise OSError(f"tar reading error: {exc}") from exc

    with archive:
        while (member := _next_member(archive)) is not None:
            path = _target(directory, member.name)
            if member.isreg():
                _write_member(archive, member, path)
            elif member.isdir():
                if not os.path.exists(path):
                    os.makedirs(path, mode=0o755, exist_ok=True)
            else:
                _log.warning(
                    "tar file entry %s contained unsupported file type %r",
                    member.name,
                    member.type,
                )