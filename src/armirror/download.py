from __future__ import annotations

from typing import TypeAlias

import logging
import os
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import UnsupportedEntityKindError
from .models import ConflictPolicy, EntityKind, RemoteEntity
from .planner_local import may_write_file, may_write_folder

logger = logging.getLogger(__name__)

EntityWriter: TypeAlias = Callable[[RemoteEntity, Path], None]


@dataclass
class DownloadResult:
    written_files: list[Path] = field(default_factory=list)
    created_folders: list[Path] = field(default_factory=list)
    skipped_paths: list[Path] = field(default_factory=list)

    @property
    def total(self) -> int:
        return (
            len(self.written_files)
            + len(self.created_folders)
            + len(self.skipped_paths)
        )


def _relative_to_base(path: str, base: str) -> str:
    if base and path.startswith(base + "/"):
        path = path[len(base) + 1 :]
    return path.lstrip("/")


def _set_local_mtime(path: Path, mod_time: int) -> None:
    os.utime(path, (time.time(), mod_time))


def download_file(
    entity: RemoteEntity,
    dest_path: str | os.PathLike[str],
    *,
    policy: ConflictPolicy = ConflictPolicy.UPSERT,
    writer: EntityWriter,
) -> bool:
    """Write one remote file to ``dest_path`` if the policy allows it.

    The bytes are produced by ``writer``; afterwards the local modification
    time is set to the remote one so a later download can detect it as
    unchanged. Returns whether anything was written.
    """
    path = Path(dest_path)
    if not may_write_file(path, entity.mod_time, policy):
        logger.debug("Not overwriting %s under %s policy", path, ConflictPolicy(policy).value)
        return False
    writer(entity, path)
    _set_local_mtime(path, entity.mod_time)
    logger.info("Downloaded %s to %s", entity.entity_id, path)
    return True


def download_folder(
    entities: Sequence[RemoteEntity],
    dest_root: str | os.PathLike[str],
    *,
    policy: ConflictPolicy = ConflictPolicy.UPSERT,
    writer: EntityWriter,
) -> DownloadResult:
    """Recreate a listed remote folder tree under ``dest_root``.

    ``entities`` is a flattened listing that starts with the root folder; the
    root folder itself is recreated as a child of ``dest_root``.
    """
    result = DownloadResult()
    if not entities:
        return result

    root_path = entities[0].path
    base = root_path.rpartition("/")[0]
    target_root = Path(dest_root)
    refused: list[str] = []

    for entity in entities:
        full_path = target_root / _relative_to_base(entity.path, base)
        if any(entity.path.startswith(prefix + "/") for prefix in refused):
            logger.debug("Skipping %s: its folder could not be created", full_path)
            result.skipped_paths.append(full_path)
        elif entity.entity_kind == EntityKind.FOLDER:
            if may_write_folder(full_path, policy):
                full_path.mkdir()
                result.created_folders.append(full_path)
            else:
                if not full_path.is_dir():
                    refused.append(entity.path)
                result.skipped_paths.append(full_path)
        elif entity.entity_kind == EntityKind.FILE:
            if download_file(entity, full_path, policy=policy, writer=writer):
                result.written_files.append(full_path)
            else:
                result.skipped_paths.append(full_path)
        else:
            raise UnsupportedEntityKindError(str(entity.entity_kind), entity.path)

    return result
