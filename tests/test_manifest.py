from __future__ import annotations

import json

import pytest

from armirror.config import MANIFEST_CONTENT_TYPE
from armirror.exceptions import EmptyManifestError
from armirror.manifest import (
    ManifestToUpload,
    encode_path,
    generate_manifest,
    manifest_links,
)
from armirror.models import UploadedEntry


def _entry(path: str, content_id: str, *, kind: str = "file", content_type: str = "text/html"):
    return UploadedEntry(
        path=path, content_id=content_id, content_type=content_type, entity_kind=kind
    )


def test_paths_are_relative_and_spaces_become_underscores():
    manifest = generate_manifest(
        [_entry("site/index.html", "id-index"), _entry("site/a b.png", "id-png")]
    )

    assert manifest.paths == {"a_b.png": "id-png", "index.html": "id-index"}
    assert list(manifest.paths) == ["a_b.png", "index.html"]
    assert manifest.index_path == "index.html"


def test_index_falls_back_to_smallest_path():
    manifest = generate_manifest(
        [
            _entry("/drive/site/zeta.txt", "z"),
            _entry("/drive/site/alpha.txt", "a"),
            _entry("/drive/site/sub/beta.txt", "b"),
        ]
    )

    assert manifest.index_path == "alpha.txt"
    assert set(manifest.paths) == {"alpha.txt", "sub/beta.txt", "zeta.txt"}
    assert all(not path.startswith("/") for path in manifest.paths)


def test_folders_and_manifests_are_excluded():
    manifest = generate_manifest(
        [
            _entry("site/docs", "folder-id", kind="folder"),
            _entry("site/docs/a.html", "a"),
            _entry("site/docs/old-manifest", "m", content_type=MANIFEST_CONTENT_TYPE),
        ]
    )

    assert "old-manifest" not in " ".join(manifest.paths)
    assert list(manifest.paths.values()) == ["a"]


def test_empty_input_raises():
    with pytest.raises(EmptyManifestError):
        generate_manifest([])
    with pytest.raises(EmptyManifestError):
        generate_manifest([_entry("site/docs", "f", kind="folder")])


def test_document_layout():
    manifest = generate_manifest([_entry("site/index.html", "id-index")])

    document = manifest.to_document()

    assert document == {
        "manifest": "arweave/paths",
        "version": "0.1.0",
        "index": {"path": "index.html"},
        "paths": {"index.html": {"id": "id-index"}},
    }
    assert json.loads(manifest.to_bytes()) == document
    assert b" " not in manifest.to_bytes()


def test_links_encode_each_segment():
    manifest = generate_manifest(
        [_entry("site/index.html", "i"), _entry("site/zdir/ä+b.html", "d")]
    )

    links = manifest_links(manifest, "MANIFEST", gateway_url="https://gw.example/")

    assert links == [
        "https://gw.example/MANIFEST",
        "https://gw.example/MANIFEST/index.html",
        "https://gw.example/MANIFEST/zdir/%C3%A4%2Bb.html",
    ]


def test_listing_with_root_folder_is_relative_to_that_folder():
    manifest = generate_manifest(
        [
            _entry("/drive/site", "root", kind="folder"),
            _entry("/drive/site/index.html", "i"),
            _entry("/drive/site/img/logo.png", "l"),
        ]
    )

    assert manifest.paths == {"img/logo.png": "l", "index.html": "i"}


def test_default_gateway_links():
    manifest = generate_manifest([_entry("site/a b.html", "x")])

    assert manifest_links(manifest, "M") == [
        "https://arweave.net/M",
        "https://arweave.net/M/a_b.html",
    ]


def test_encode_path_keeps_component_safe_characters():
    assert encode_path("a/b c/(x)!*'~.txt") == "a/b%20c/(x)!*'~.txt"


def test_manifest_to_upload_exposes_file_accessors():
    manifest = generate_manifest([_entry("site/index.html", "i")])

    upload = ManifestToUpload(manifest, "DriveManifest.json")

    assert upload.base_name == "DriveManifest.json"
    assert upload.content_type == MANIFEST_CONTENT_TYPE
    assert upload.read_bytes() == manifest.to_bytes()
    assert upload.size == len(manifest.to_bytes())
    assert upload.mod_time > 0
