from typing import Iterator, Sequence

from constants import FOLDER_STRUCTURE
from models import FolderNode

DOCUMENTS_ROOT = '$HOME\\Documents'
SUCCESS_LINE = (
    'Write-Host "Success! Your new structure has been created in Documents." '
    "-ForegroundColor Green"
)


def iter_folder_paths(forest: Sequence[FolderNode], parent: str = "") -> Iterator[str]:
    """
    Yield the backslash-joined path of every node, parents before children.
    """
    for node in forest:
        current = f"{parent}\\{node.name}" if parent else node.name
        yield current
        yield from iter_folder_paths(node.subfolders, current)


def generate_baseline_script(forest: Sequence[FolderNode] = FOLDER_STRUCTURE) -> str:
    """
    PowerShell script that recreates the folder tree inside Documents.
    New-Item -Force makes every line safe to re-run.
    """
    lines = [f'Set-Location "{DOCUMENTS_ROOT}"']
    for path in iter_folder_paths(forest):
        lines.append(f'New-Item -ItemType Directory -Force -Path "{path}" | Out-Null')
    lines.append(SUCCESS_LINE)
    return "\n".join(lines)
