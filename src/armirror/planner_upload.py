from __future__ import annotations

from dataclasses import dataclass

from .exceptions import MissingCostError
from .models import (
    ConflictPolicy,
    LocalFileNode,
    LocalFolderNode,
    LocalNode,
    NodeKind,
    UploadCosts,
)

OP_CREATE_FOLDER = "create_folder"
OP_REUSE_FOLDER = "reuse_folder"
OP_CREATE_FILE = "create_file"
OP_REVISE_FILE = "revise_file"
OP_SKIP_EXISTING = "skip_existing"
OP_SKIP_UNCHANGED = "skip_unchanged"
OP_SKIP_COLLISION = "skip_collision"

SKIP_KINDS = {OP_SKIP_EXISTING, OP_SKIP_UNCHANGED, OP_SKIP_COLLISION}


@dataclass(frozen=True)
class UploadOperation:
    kind: str
    node: LocalNode

    @property
    def path(self) -> str:
        return str(self.node.path)


@dataclass(frozen=True)
class UploadSummary:
    create_folder: int = 0
    reuse_folder: int = 0
    create_file: int = 0
    revise_file: int = 0
    skip_existing: int = 0
    skip_unchanged: int = 0
    skip_collision: int = 0

    @property
    def skipped(self) -> int:
        return self.skip_existing + self.skip_unchanged + self.skip_collision

    @property
    def total(self) -> int:
        return (
            self.create_folder
            + self.reuse_folder
            + self.create_file
            + self.revise_file
            + self.skipped
        )


def _file_op(file_node: LocalFileNode, policy: ConflictPolicy) -> str:
    if file_node.collides_with_folder:
        return OP_SKIP_COLLISION
    if file_node.remote_id is None:
        return OP_CREATE_FILE
    if policy == ConflictPolicy.SKIP:
        return OP_SKIP_EXISTING
    if policy == ConflictPolicy.UPSERT and file_node.same_timestamp:
        return OP_SKIP_UNCHANGED
    return OP_REVISE_FILE


def _plan_folder(
    folder: LocalFolderNode, policy: ConflictPolicy, ops: list[UploadOperation]
) -> None:
    kind = OP_CREATE_FOLDER if folder.remote_id is None else OP_REUSE_FOLDER
    ops.append(UploadOperation(kind, folder))
    for file_node in folder.files:
        ops.append(UploadOperation(_file_op(file_node, policy), file_node))
    for child in folder.folders:
        # A remote file holds this name; nothing below it can be placed.
        if child.base_name in folder.colliding_folders and child.remote_id is None:
            ops.append(UploadOperation(OP_SKIP_COLLISION, child))
            continue
        _plan_folder(child, policy, ops)


def plan_upload(
    root: LocalNode, policy: ConflictPolicy = ConflictPolicy.UPSERT
) -> list[UploadOperation]:
    policy = ConflictPolicy(policy)
    ops: list[UploadOperation] = []
    match root.kind:
        case NodeKind.FILE:
            ops.append(UploadOperation(_file_op(root, policy), root))
        case NodeKind.FOLDER:
            _plan_folder(root, policy, ops)
    return ops


def summarize_upload(ops: list[UploadOperation]) -> UploadSummary:
    counts = {
        OP_CREATE_FOLDER: 0,
        OP_REUSE_FOLDER: 0,
        OP_CREATE_FILE: 0,
        OP_REVISE_FILE: 0,
        OP_SKIP_EXISTING: 0,
        OP_SKIP_UNCHANGED: 0,
        OP_SKIP_COLLISION: 0,
    }
    for op in ops:
        if op.kind in counts:
            counts[op.kind] += 1
    return UploadSummary(**counts)


def require_base_costs(node: LocalNode) -> UploadCosts:
    if node.base_costs is None:
        raise MissingCostError(str(node.path))
    return node.base_costs


def planned_reward(ops: list[UploadOperation]) -> int:
    total = 0
    for op in ops:
        # Reused folders need no new metadata.
        if op.kind in SKIP_KINDS or op.kind == OP_REUSE_FOLDER:
            continue
        total += require_base_costs(op.node).total
    return total
