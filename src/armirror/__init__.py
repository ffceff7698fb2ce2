"""Mirror local directory trees onto a content-addressed remote entity store."""

from .config import DEFAULT_CONFIG, MirrorConfig
from .download import DownloadResult, download_file, download_folder
from .exceptions import (
    EmptyManifestError,
    MirrorError,
    MissingCostError,
    RemoteIdConflictError,
    SizeExceededError,
    TypeConflictError,
    UnsupportedEntityKindError,
)
from .manifest import Manifest, ManifestToUpload, generate_manifest, manifest_links
from .models import (
    ConflictPolicy,
    EntityKind,
    LocalFileNode,
    LocalFolderNode,
    NodeKind,
    RemoteEntity,
    RemoteFileName,
    RemoteFolderName,
    RemoteNameIndex,
    UploadCosts,
    UploadedEntry,
    is_folder,
)
from .planner_local import may_write_file, may_write_folder
from .planner_upload import plan_upload, planned_reward, summarize_upload
from .resolver import resolve_existing_names
from .scanner_local import build_tree, total_byte_count

__all__ = [
    "DEFAULT_CONFIG",
    "ConflictPolicy",
    "DownloadResult",
    "EmptyManifestError",
    "EntityKind",
    "LocalFileNode",
    "LocalFolderNode",
    "Manifest",
    "ManifestToUpload",
    "MirrorConfig",
    "MirrorError",
    "MissingCostError",
    "NodeKind",
    "RemoteEntity",
    "RemoteFileName",
    "RemoteFolderName",
    "RemoteIdConflictError",
    "RemoteNameIndex",
    "SizeExceededError",
    "TypeConflictError",
    "UnsupportedEntityKindError",
    "UploadCosts",
    "UploadedEntry",
    "build_tree",
    "download_file",
    "download_folder",
    "generate_manifest",
    "is_folder",
    "manifest_links",
    "may_write_file",
    "may_write_folder",
    "plan_upload",
    "planned_reward",
    "resolve_existing_names",
    "summarize_upload",
    "total_byte_count",
]
