from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from .exceptions import TypeConflictError
from .models import ConflictPolicy

logger = logging.getLogger(__name__)

_OVERWRITING_POLICIES = {ConflictPolicy.REPLACE, ConflictPolicy.UPSERT}


def _file_ancestor(path: Path) -> Path:
    return next((parent for parent in reversed(path.parents) if parent.is_file()), path.parent)


def _stat_or_none(path: Path) -> os.stat_result | None:
    try:
        return path.stat()
    except FileNotFoundError:
        return None
    except NotADirectoryError:
        raise TypeConflictError(str(_file_ancestor(path)), "file", "folder") from None


def _refuse(path: Path, error: TypeConflictError, policy: ConflictPolicy) -> bool:
    if policy in _OVERWRITING_POLICIES:
        raise error
    logger.debug("Skipping %s: %s", path, error)
    return False


def may_write_file(
    dest_path: str | os.PathLike[str],
    remote_mod_time: int,
    policy: ConflictPolicy,
) -> bool:
    """Tell whether a remote file may be written at ``dest_path``.

    ``remote_mod_time`` is in whole seconds. Replacing a directory with a
    file, or writing below an existing file, raises ``TypeConflictError``
    unless the policy is ``SKIP``.
    """
    policy = ConflictPolicy(policy)
    path = Path(dest_path)
    try:
        st = _stat_or_none(path)
    except TypeConflictError as error:
        return _refuse(path, error, policy)
    if st is None:
        return True

    if stat.S_ISDIR(st.st_mode):
        return _refuse(path, TypeConflictError(str(path), "directory", "file"), policy)

    if st.st_mtime_ns == remote_mod_time * 1_000_000_000:
        return policy == ConflictPolicy.REPLACE
    return policy in _OVERWRITING_POLICIES


def may_write_folder(
    dest_path: str | os.PathLike[str],
    policy: ConflictPolicy,
) -> bool:
    policy = ConflictPolicy(policy)
    path = Path(dest_path)
    try:
        st = _stat_or_none(path)
    except TypeConflictError as error:
        return _refuse(path, error, policy)
    if st is None:
        return True

    if stat.S_ISDIR(st.st_mode):
        return False
    return _refuse(path, TypeConflictError(str(path), "file", "folder"), policy)
