from __future__ import annotations

import os
from pathlib import Path

from armirror.models import (
    LocalFileNode,
    LocalFolderNode,
    RemoteEntity,
    RemoteFileName,
    RemoteFolderName,
    RemoteNameIndex,
)


def mk_file(
    path: str,
    *,
    size: int = 0,
    mod_time: int = 0,
    content_type: str = "text/plain",
    remote_id: str | None = None,
) -> LocalFileNode:
    return LocalFileNode(
        path=Path(path),
        size=size,
        content_type=content_type,
        mod_time=mod_time,
        remote_id=remote_id,
    )


def mk_folder(
    path: str,
    *,
    remote_id: str | None = None,
    files: list[LocalFileNode] | None = None,
    folders: list[LocalFolderNode] | None = None,
) -> LocalFolderNode:
    return LocalFolderNode(
        path=Path(path),
        remote_id=remote_id,
        files=list(files or []),
        folders=list(folders or []),
    )


def mk_index(
    *,
    files: dict[str, tuple[str, int]] | None = None,
    folders: dict[str, str] | None = None,
) -> RemoteNameIndex:
    return RemoteNameIndex(
        files=tuple(
            RemoteFileName(name=name, id=file_id, mod_time=mod_time)
            for name, (file_id, mod_time) in (files or {}).items()
        ),
        folders=tuple(
            RemoteFolderName(name=name, id=folder_id)
            for name, folder_id in (folders or {}).items()
        ),
    )


class FakeNameFetcher:
    def __init__(self, indexes: dict[str, RemoteNameIndex] | None = None) -> None:
        self.indexes: dict[str, RemoteNameIndex] = dict(indexes or {})
        self.failures: dict[str, Exception] = {}
        self.calls: list[str] = []

    def __call__(self, folder_id: str) -> RemoteNameIndex:
        self.calls.append(folder_id)
        err = self.failures.get(folder_id)
        if err is not None:
            raise err
        return self.indexes.get(folder_id, RemoteNameIndex())


class RecordingWriter:
    def __init__(self, payloads: dict[str, bytes] | None = None) -> None:
        self.payloads: dict[str, bytes] = dict(payloads or {})
        self.calls: list[tuple[str, Path]] = []

    def __call__(self, entity: RemoteEntity, path: Path) -> None:
        self.calls.append((entity.entity_id, path))
        path.write_bytes(self.payloads.get(entity.entity_id, b""))


def write_file(path: Path, data: bytes = b"", *, mtime: int | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path
