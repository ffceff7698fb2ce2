from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from types import MappingProxyType

EXCLUDED_FILE_NAMES = frozenset({".DS_Store"})

MAX_FILE_SIZE = 2_147_483_647
# Private files leave one byte of headroom for cipher block padding.
MAX_ENCRYPTED_FILE_SIZE = 2_147_483_646
ENCRYPTION_BLOCK_SIZE = 16

DEFAULT_CONTENT_TYPE = "application/octet-stream"
MANIFEST_CONTENT_TYPE = "application/x.arweave-manifest+json"
MANIFEST_SPEC = "arweave/paths"
MANIFEST_VERSION = "0.1.0"
INDEX_FILE_NAME = "index.html"

DEFAULT_GATEWAY_URL = "https://arweave.net"

MIME_TYPES: Mapping[str, str] = MappingProxyType(
    {
        ".7z": "application/x-7z-compressed",
        ".aac": "audio/aac",
        ".avi": "video/x-msvideo",
        ".bmp": "image/bmp",
        ".bz2": "application/x-bzip2",
        ".css": "text/css",
        ".csv": "text/csv",
        ".doc": "application/msword",
        ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        ".epub": "application/epub+zip",
        ".flac": "audio/flac",
        ".gif": "image/gif",
        ".gz": "application/gzip",
        ".htm": "text/html",
        ".html": "text/html",
        ".ico": "image/vnd.microsoft.icon",
        ".jpeg": "image/jpeg",
        ".jpg": "image/jpeg",
        ".js": "application/javascript",
        ".json": "application/json",
        ".md": "text/markdown",
        ".mjs": "application/javascript",
        ".mov": "video/quicktime",
        ".mp3": "audio/mpeg",
        ".mp4": "video/mp4",
        ".mpeg": "video/mpeg",
        ".odt": "application/vnd.oasis.opendocument.text",
        ".oga": "audio/ogg",
        ".ogg": "audio/ogg",
        ".ogv": "video/ogg",
        ".otf": "font/otf",
        ".pdf": "application/pdf",
        ".png": "image/png",
        ".ppt": "application/vnd.ms-powerpoint",
        ".pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        ".rar": "application/vnd.rar",
        ".rtf": "application/rtf",
        ".svg": "image/svg+xml",
        ".tar": "application/x-tar",
        ".tif": "image/tiff",
        ".tiff": "image/tiff",
        ".ttf": "font/ttf",
        ".txt": "text/plain",
        ".wasm": "application/wasm",
        ".wav": "audio/wav",
        ".weba": "audio/webm",
        ".webm": "video/webm",
        ".webp": "image/webp",
        ".woff": "font/woff",
        ".woff2": "font/woff2",
        ".xhtml": "application/xhtml+xml",
        ".xls": "application/vnd.ms-excel",
        ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        ".xml": "application/xml",
        ".yaml": "application/yaml",
        ".yml": "application/yaml",
        ".zip": "application/zip",
    }
)


@dataclass(frozen=True)
class MirrorConfig:
    mime_types: Mapping[str, str] = field(default_factory=lambda: MIME_TYPES)
    default_content_type: str = DEFAULT_CONTENT_TYPE
    excluded_file_names: frozenset[str] = EXCLUDED_FILE_NAMES
    max_file_size_public: int = MAX_FILE_SIZE
    max_file_size_encrypted: int = MAX_ENCRYPTED_FILE_SIZE

    def max_file_size(self, encrypted: bool) -> int:
        return self.max_file_size_encrypted if encrypted else self.max_file_size_public

    def content_type_for(self, name: str) -> str:
        suffix = PurePosixPath(name).suffix.lower()
        return self.mime_types.get(suffix, self.default_content_type)


DEFAULT_CONFIG = MirrorConfig()
