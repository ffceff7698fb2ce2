from __future__ import annotations

import json
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from urllib.parse import quote

from .config import (
    DEFAULT_GATEWAY_URL,
    INDEX_FILE_NAME,
    MANIFEST_CONTENT_TYPE,
    MANIFEST_SPEC,
    MANIFEST_VERSION,
)
from .exceptions import EmptyManifestError
from .models import EntityKind, UploadedEntry

# Characters encodeURIComponent leaves untouched on top of quote()'s defaults.
_SEGMENT_SAFE = "!'()*"


@dataclass(frozen=True)
class Manifest:
    index_path: str
    paths: dict[str, str] = field(default_factory=dict)

    def to_document(self) -> dict[str, object]:
        return {
            "manifest": MANIFEST_SPEC,
            "version": MANIFEST_VERSION,
            "index": {"path": self.index_path},
            "paths": {path: {"id": content_id} for path, content_id in self.paths.items()},
        }

    def to_bytes(self) -> bytes:
        return json.dumps(self.to_document(), separators=(",", ":")).encode("utf-8")


def _base_folder(path: str) -> str:
    head, sep, _tail = path.rpartition("/")
    return head if sep else ""


def _relative_path(path: str, base: str) -> str:
    if base and path.startswith(base + "/"):
        path = path[len(base) + 1 :]
    return path.lstrip("/").replace(" ", "_")


def generate_manifest(entries: Iterable[UploadedEntry]) -> Manifest:
    """Build a path manifest from the entries of an uploaded tree.

    Paths are made relative to the folder holding the first path in sorted
    order (or to that path itself when it is a folder entry) and spaces
    become underscores. Folders and earlier manifests are left out.
    ``index.html`` is the index when present, otherwise the first path in
    sorted order.
    """
    ordered = sorted(entries, key=lambda entry: entry.path)
    if not ordered:
        raise EmptyManifestError("Cannot generate a manifest without entries")

    first = ordered[0]
    # A listing that includes its root folder sorts that folder first.
    base = first.path if first.entity_kind == EntityKind.FOLDER else _base_folder(first.path)
    paths: dict[str, str] = {}
    for entry in ordered:
        if entry.entity_kind == EntityKind.FOLDER:
            continue
        if entry.content_type == MANIFEST_CONTENT_TYPE:
            continue
        paths[_relative_path(entry.path, base)] = entry.content_id

    if not paths:
        raise EmptyManifestError("No file entries left to put in the manifest")

    index_path = INDEX_FILE_NAME if INDEX_FILE_NAME in paths else min(paths)
    return Manifest(index_path=index_path, paths=paths)


def encode_path(path: str) -> str:
    return "/".join(quote(segment, safe=_SEGMENT_SAFE) for segment in path.split("/"))


def manifest_links(
    manifest: Manifest,
    manifest_id: str,
    gateway_url: str = DEFAULT_GATEWAY_URL,
) -> list[str]:
    root = f"{gateway_url.rstrip('/')}/{manifest_id}"
    return [root, *(f"{root}/{encode_path(path)}" for path in manifest.paths)]


class ManifestToUpload:
    """Presents a manifest through the same accessors as a local file node."""

    content_type = MANIFEST_CONTENT_TYPE

    def __init__(self, manifest: Manifest, name: str) -> None:
        self.manifest = manifest
        self.name = name
        self.mod_time = int(time.time())
        self._data = manifest.to_bytes()

    @property
    def base_name(self) -> str:
        return self.name

    @property
    def size(self) -> int:
        return len(self._data)

    def read_bytes(self) -> bytes:
        return self._data
