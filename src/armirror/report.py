from __future__ import annotations

from rich.text import Text
from rich.tree import Tree

from .models import LocalFileNode, LocalFolderNode, LocalNode, NodeKind
from .scanner_local import iter_files, iter_folders


def _file_badge(node: LocalFileNode) -> str:
    if node.collides_with_folder:
        return "Folder conflict"
    if node.remote_id is None:
        return "New"
    if node.same_timestamp:
        return "Unchanged"
    return "Revision"


def _folder_badge(node: LocalFolderNode) -> str:
    if node.collides_with_file:
        return "File conflict"
    if node.remote_id is None:
        return "New"
    return "Existing"


def resolution_label(node: LocalNode) -> Text:
    match node.kind:
        case NodeKind.FILE:
            badge = _file_badge(node)
            return Text.assemble(
                (node.base_name, "white"), "  ", (f"[{badge}]", "yellow")
            )
        case NodeKind.FOLDER:
            badge = _folder_badge(node)
            return Text.assemble(
                (node.base_name, "bold"), "  ", (f"[{badge}]", "cyan")
            )
    raise ValueError(f"unknown node kind: {node.kind}")


def _add_children(branch: Tree, folder: LocalFolderNode) -> None:
    for child in folder.folders:
        _add_children(branch.add(resolution_label(child)), child)
    for file_node in folder.files:
        branch.add(resolution_label(file_node))


def render_resolution(root: LocalNode) -> Tree:
    tree = Tree(resolution_label(root))
    if root.kind == NodeKind.FOLDER:
        _add_children(tree, root)
    return tree


def collision_paths(root: LocalNode) -> list[str]:
    paths = [str(folder.path) for folder in iter_folders(root) if folder.collides_with_file]
    paths.extend(
        str(file_node.path) for file_node in iter_files(root) if file_node.collides_with_folder
    )
    return paths
