"""Persistence of snippets in a JSON file under the user's home directory."""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Iterable

from .snippet import Snippet

SNIPPETS_FILE_NAME = "snippets.json"
CONFIG_DIR_NAME = ".snippet-manger"

_lock = threading.Lock()


class StoreError(Exception):
    """Raised when the snippet file cannot be located, read or written."""


def snippets_file_path(home: str | Path | None = None) -> Path:
    """Return the snippet file path inside ``home`` (default: the user's home)."""
    if home is None:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as exc:
            raise StoreError(f"failed to get users homedir: {exc}") from exc
    return Path(home) / CONFIG_DIR_NAME / SNIPPETS_FILE_NAME


def load_snippets(path: str | Path | None = None) -> list[Snippet]:
    """Read all snippets; a missing file yields an empty list."""
    with _lock:
        file_path = Path(path) if path is not None else snippets_file_path()
        try:
            raw = file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StoreError("failed to read file") from exc
        try:
            data = json.loads(raw)
            if data is None:
                return []
            if not isinstance(data, list):
                raise TypeError("snippet file must hold a list")
            return [Snippet.from_dict(entry) for entry in data]
        except (ValueError, TypeError) as exc:
            raise StoreError("failed to load snippets data") from exc


def save_snippets(snippets: Iterable[Snippet], path: str | Path | None = None) -> None:
    """Write all snippets, creating the directory if needed."""
    with _lock:
        file_path = Path(path) if path is not None else snippets_file_path()
        try:
            file_path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(f"failed to create config directory: {exc}") from exc
        text = json.dumps(
            [s.to_dict() for s in snippets], indent=2, ensure_ascii=False
        )
        try:
            file_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"failed to write snippets file: {exc}") from exc