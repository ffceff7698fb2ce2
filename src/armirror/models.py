from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .config import ENCRYPTION_BLOCK_SIZE


class NodeKind(str, Enum):
    FILE = "file"
    FOLDER = "folder"


class EntityKind(str, Enum):
    FILE = "file"
    FOLDER = "folder"
    DRIVE = "drive"


class ConflictPolicy(str, Enum):
    SKIP = "skip"
    REPLACE = "replace"
    UPSERT = "upsert"


@dataclass(frozen=True)
class UploadCosts:
    metadata_reward: int
    data_reward: int | None = None

    @property
    def total(self) -> int:
        return self.metadata_reward + (self.data_reward or 0)


@dataclass
class LocalFileNode:
    path: Path
    size: int
    content_type: str
    mod_time: int
    remote_id: str | None = None
    same_timestamp: bool = False
    collides_with_folder: bool = False
    base_costs: UploadCosts | None = None
    kind: NodeKind = field(default=NodeKind.FILE, init=False)

    @property
    def base_name(self) -> str:
        return self.path.name

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()

    def encrypted_data_size(self) -> int:
        """Size after padding to whole cipher blocks, always at least one block."""
        blocks = self.size // ENCRYPTION_BLOCK_SIZE + 1
        return blocks * ENCRYPTION_BLOCK_SIZE


@dataclass
class LocalFolderNode:
    path: Path
    remote_id: str | None = None
    collides_with_file: bool = False
    colliding_folders: list[str] = field(default_factory=list)
    files: list[LocalFileNode] = field(default_factory=list)
    folders: list[LocalFolderNode] = field(default_factory=list)
    base_costs: UploadCosts | None = None
    kind: NodeKind = field(default=NodeKind.FOLDER, init=False)

    @property
    def base_name(self) -> str:
        return self.path.name


LocalNode: TypeAlias = LocalFileNode | LocalFolderNode


def is_folder(node: LocalNode) -> bool:
    return node.kind == NodeKind.FOLDER


@dataclass(frozen=True)
class RemoteFileName:
    name: str
    id: str
    mod_time: int


@dataclass(frozen=True)
class RemoteFolderName:
    name: str
    id: str


@dataclass(frozen=True)
class RemoteNameIndex:
    files: tuple[RemoteFileName, ...] = ()
    folders: tuple[RemoteFolderName, ...] = ()

    def file_named(self, name: str) -> RemoteFileName | None:
        for entry in self.files:
            if entry.name == name:
                return entry
        return None

    def folder_named(self, name: str) -> RemoteFolderName | None:
        for entry in self.folders:
            if entry.name == name:
                return entry
        return None


@dataclass(frozen=True)
class UploadedEntry:
    path: str
    content_id: str
    content_type: str
    entity_kind: str = EntityKind.FILE.value


@dataclass(frozen=True)
class RemoteEntity:
    entity_kind: str
    path: str
    entity_id: str
    data_id: str | None = None
    mod_time: int = 0
    size: int = 0
