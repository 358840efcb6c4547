"""
__all__ = ['ListStore', 'StoreError', 'ListNotFoundError', 'ListExistsError', 'CorruptListError', 'InvalidListNameError']

File storage for todo lists: one JSON document per list, named <list>.todo
"""

import json
import os
from pathlib import Path
from typing import Any, Iterator

from .config import Config
from .todo_manager import TodoList

LIST_EXTENSION = ".todo"


class StoreError(Exception):
    """Base class for every storage failure reported to the user"""


class ListNotFoundError(StoreError):
    pass


class ListExistsError(StoreError):
    pass


class CorruptListError(StoreError):
    pass


class InvalidListNameError(StoreError):
    pass


def serialize(todo_list: TodoList) -> str:
    return json.dumps(todo_list.to_dict(), indent=2) + "\n"


def deserialize(content: str) -> TodoList:
    """Parse a list document, rejecting anything that isn't the expected shape"""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise CorruptListError(f"not valid JSON ({e})") from e

    if not isinstance(data, dict) or not isinstance(data.get("notes"), list):
        raise CorruptListError("expected an object with a 'notes' array")
    for item in data["notes"]:
        if not _is_note(item):
            raise CorruptListError("every note needs a string 'text' and a boolean 'checked'")
    return TodoList.from_dict(data)


def _is_note(item: Any) -> bool:
    return (isinstance(item, dict)
            and isinstance(item.get("text"), str)
            and isinstance(item.get("checked"), bool))


class ListStore:
    def __init__(self, config: Config):
        self.config = config
        self.root = config.data_dir

    def path_for(self, name: str) -> Path:
        """Map a list name to its file, refusing names that would escape the storage root"""
        separators = {"/", os.sep}
        if os.altsep:
            separators.add(os.altsep)
        if name in ("", ".", "..") or "\0" in name or any(sep in name for sep in separators):
            raise InvalidListNameError(f"Invalid list name: {name!r}")
        return self.root / f"{name}{LIST_EXTENSION}"

    def load(self, name: str) -> TodoList:
        path = self.path_for(name)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError as e:
            raise ListNotFoundError(f"List '{name}' does not exist") from e
        except UnicodeDecodeError as e:
            raise CorruptListError(f"List '{name}' is malformed: not valid UTF-8 ({e})") from e
        except OSError as e:
            raise StoreError(f"Failed to read list '{name}': {e}") from e

        try:
            return deserialize(content)
        except CorruptListError as e:
            raise CorruptListError(f"List '{name}' is malformed: {e}") from e

    def save(self, name: str, todo_list: TodoList):
        """Overwrite an existing list file; never creates one"""
        path = self.path_for(name)
        content = serialize(todo_list)
        try:
            with open(path, 'r+', encoding='utf-8') as f:
                f.seek(0)
                f.write(content)
                f.truncate()
        except FileNotFoundError as e:
            raise ListNotFoundError(f"List '{name}' does not exist") from e
        except OSError as e:
            raise StoreError(f"Failed to write list '{name}': {e}") from e

    def create(self, name: str):
        path = self.path_for(name)
        try:
            with open(path, 'x', encoding='utf-8') as f:
                f.write(serialize(TodoList()))
        except FileExistsError as e:
            raise ListExistsError(f"List '{name}' already exists") from e
        except OSError as e:
            raise StoreError(f"Failed to create list '{name}': {e}") from e

    def delete(self, name: str):
        path = self.path_for(name)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise ListNotFoundError(f"List '{name}' does not exist") from e
        except OSError as e:
            raise StoreError(f"Failed to delete list '{name}': {e}") from e

    def enumerate(self) -> Iterator[str]:
        """Yield the names of all stored lists"""
        try:
            entries = sorted(self.root.iterdir())
        except OSError as e:
            raise StoreError(f"Failed to read data directory {self.root}: {e}") from e
        for entry in entries:
            if entry.suffix == LIST_EXTENSION and entry.is_file():
                yield entry.stem

