"""
JSON file helpers for graph documents

Documents are written as UTF-8 JSON with two-space indentation.
"""
import json
from pathlib import Path
from typing import Union

from freeblock.utils.message import Log

PathLike = Union[str, Path]


def write_document(path: PathLike, document: dict) -> Path:
    """
    Write a document to path, creating parent directories.

    Returns:
        The path written
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(document, f, indent=2, ensure_ascii=False)
    Log.info(f"DocumentFile: Saved document to {file_path}")
    return file_path


def read_document(path: PathLike) -> dict:
    """
    Read a document from path.

    Raises:
        FileNotFoundError: If path does not exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    file_path = Path(path)
    with open(file_path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    Log.debug(f"DocumentFile: Loaded document from {file_path}")
    return data
