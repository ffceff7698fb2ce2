from __future__ import annotations

from typing import TypeAlias

import logging
from collections.abc import Callable

from .exceptions import RemoteIdConflictError
from .models import LocalFileNode, LocalFolderNode, RemoteNameIndex

logger = logging.getLogger(__name__)

FetchNames: TypeAlias = Callable[[str], RemoteNameIndex]


def _assign_remote_id(node: LocalFileNode | LocalFolderNode, remote_id: str) -> None:
    if node.remote_id is not None and node.remote_id != remote_id:
        raise RemoteIdConflictError(str(node.path), node.remote_id, remote_id)
    node.remote_id = remote_id


def _resolve_file(file_node: LocalFileNode, existing: RemoteNameIndex) -> None:
    name = file_node.base_name

    if existing.folder_named(name) is not None:
        file_node.collides_with_folder = True
        logger.debug("File %s collides with an existing remote folder", file_node.path)
        return

    remote_file = existing.file_named(name)
    if remote_file is None:
        return

    # Same name means a new revision of the existing file.
    _assign_remote_id(file_node, remote_file.id)
    if remote_file.mod_time == file_node.mod_time:
        file_node.same_timestamp = True
    logger.debug(
        "File %s revises %s (same timestamp: %s)",
        file_node.path,
        remote_file.id,
        file_node.same_timestamp,
    )


def resolve_existing_names(folder: LocalFolderNode, fetch_names: FetchNames) -> None:
    """Annotate ``folder``'s children with what already exists remotely.

    Nothing happens unless ``folder`` is bound to a remote id. Files sharing a
    name with a remote file take its id; folders sharing a name with a remote
    folder reuse it and are resolved recursively against a fresh listing.
    A name taken by the other entity type is flagged as a collision: on the
    file itself, or on the parent folder when a local folder meets a remote
    file. The parent also records the subfolder name in
    ``colliding_folders`` and that subfolder is not descended into.

    Errors raised by ``fetch_names`` propagate unchanged.
    """
    if folder.remote_id is None:
        return

    existing = fetch_names(folder.remote_id)

    for file_node in folder.files:
        _resolve_file(file_node, existing)

    for child in folder.folders:
        name = child.base_name

        if existing.file_named(name) is not None:
            folder.collides_with_file = True
            if name not in folder.colliding_folders:
                folder.colliding_folders.append(name)
            logger.debug("Folder %s collides with an existing remote file", child.path)
            continue

        remote_folder = existing.folder_named(name)
        if remote_folder is None:
            continue

        _assign_remote_id(child, remote_folder.id)
        resolve_existing_names(child, fetch_names)
