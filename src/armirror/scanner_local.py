from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from pathlib import Path

from .config import DEFAULT_CONFIG, MirrorConfig
from .exceptions import SizeExceededError
from .excludes import is_excluded_file_name
from .models import LocalFileNode, LocalFolderNode, LocalNode, NodeKind

logger = logging.getLogger(__name__)


def _build_file(
    path: Path, st: os.stat_result, encrypted: bool, config: MirrorConfig
) -> LocalFileNode:
    limit = config.max_file_size(encrypted)
    if st.st_size > limit:
        raise SizeExceededError(str(path), st.st_size, limit)
    return LocalFileNode(
        path=path,
        size=st.st_size,
        content_type=config.content_type_for(path.name),
        mod_time=int(st.st_mtime),
    )


def _build_folder(path: Path, encrypted: bool, config: MirrorConfig) -> LocalFolderNode:
    folder = LocalFolderNode(path=path)
    for name in sorted(os.listdir(path)):
        child_path = path / name
        st = child_path.stat()
        if stat.S_ISDIR(st.st_mode):
            folder.folders.append(_build_folder(child_path, encrypted, config))
        elif is_excluded_file_name(name, config):
            logger.debug("Skipping excluded file %s", child_path)
        else:
            folder.files.append(_build_file(child_path, st, encrypted, config))
    return folder


def build_tree(
    path: str | os.PathLike[str],
    *,
    encrypted: bool = False,
    config: MirrorConfig = DEFAULT_CONFIG,
) -> LocalNode:
    """Snapshot ``path`` into a tree of local file and folder nodes.

    Directories are walked recursively with children in name order; symlinks
    are followed. A file over the size ceiling raises ``SizeExceededError``,
    which aborts the whole build.
    """
    root = Path(path)
    st = root.stat()
    if stat.S_ISDIR(st.st_mode):
        return _build_folder(root, encrypted, config)
    return _build_file(root, st, encrypted, config)


def iter_files(node: LocalNode) -> Iterator[LocalFileNode]:
    match node.kind:
        case NodeKind.FILE:
            yield node
        case NodeKind.FOLDER:
            for child in node.files:
                yield child
            for folder in node.folders:
                yield from iter_files(folder)


def iter_folders(node: LocalNode) -> Iterator[LocalFolderNode]:
    if node.kind != NodeKind.FOLDER:
        return
    yield node
    for folder in node.folders:
        yield from iter_folders(folder)


def total_byte_count(node: LocalNode, *, encrypted: bool = False) -> int:
    total = 0
    for file_node in iter_files(node):
        total += file_node.encrypted_data_size() if encrypted else file_node.size
    return total
