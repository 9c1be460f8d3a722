"""JSON document storage.

One JSON object per file. Every method returns a Result; I/O errors are
turned into messages here so the repository never sees an exception.
Writes land in a sibling `.tmp` file first and are moved into place
with `os.replace`, so a reader sees either the old document or the new
one.
"""

import json
import os
from pathlib import Path
from typing import Any

from pulseboard.domain.shared.result import Err, Ok, Result

Document = dict[str, Any]


def _describe(action: str, path: Path, error: OSError) -> str:
    if isinstance(error, PermissionError):
        return f"Permission denied {action} {path}"
    return f"Error {action} {path}: {error}"


class JsonStorage:
    """File-per-document JSON store.

    Example:
        storage = JsonStorage()
        loaded = storage.load_json(data_dir / "projects" / "abc.json")
        if isinstance(loaded, Err):
            logger.warning(loaded.error)
    """

    def list_documents(self, directory: Path) -> Result[list[Path], str]:
        """Paths of the `*.json` files in a directory, sorted by name.

        A missing directory holds no documents.
        """
        if not directory.exists():
            return Ok([])
        try:
            return Ok(sorted(directory.glob("*.json")))
        except OSError as e:
            return Err(_describe("listing", directory, e))

    def load_json(self, path: Path) -> Result[Document, str]:
        """Read one document.

        Returns:
            Ok(dict), or Err(str) if the file is missing, unreadable,
            not valid JSON, or holds something other than an object.
        """
        if not path.exists():
            return Err(f"File not found: {path}")

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path}: {e}")
        except OSError as e:
            return Err(_describe("reading", path, e))

        if not isinstance(data, dict):
            return Err(f"Expected a JSON object in {path}")
        return Ok(data)

    def save_json(self, path: Path, data: Document, indent: int = 2) -> Result[None, str]:
        """Replace a document atomically, creating parent folders as needed."""
        try:
            text = json.dumps(data, indent=indent)
        except TypeError as e:
            return Err(f"Document for {path.name} is not JSON serializable: {e}")

        staging = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            staging.write_text(text, encoding="utf-8")
            os.replace(staging, path)
        except OSError as e:
            return Err(_describe("writing", path, e))
        return Ok(None)

    def delete(self, path: Path) -> Result[None, str]:
        try:
            path.unlink()
        except FileNotFoundError:
            return Err(f"File not found: {path}")
        except OSError as e:
            return Err(_describe("deleting", path, e))
        return Ok(None)
