"""
__all__ = ['Note', 'TodoList', 'parse_index', 'parse_indices']

In-memory model of a todo list.
Notes are addressed only by position: 0-based here, 1-based on the command line.
"""

from typing import Dict, List, Optional, Any, Iterable, Tuple


class Note:
    def __init__(self, text: str, checked: bool = False):
        """Build a note from raw input, trimming surrounding whitespace"""
        self.text = text.strip()
        self.checked = checked

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "checked": self.checked}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Note":
        return cls(data["text"], data["checked"])

    def __eq__(self, other):
        if not isinstance(other, Note):
            return NotImplemented
        return self.text == other.text and self.checked == other.checked

    def __repr__(self):
        return f"Note({self.text!r}, checked={self.checked})"


class TodoList:
    def __init__(self, notes: Optional[List[Note]] = None):
        self.notes: List[Note] = list(notes) if notes else []

    def __len__(self):
        return len(self.notes)

    def __eq__(self, other):
        if not isinstance(other, TodoList):
            return NotImplemented
        return self.notes == other.notes

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self.notes)

    def add_note(self, text: str) -> Note:
        """Append a new unchecked note"""
        note = Note(text)
        self.notes.append(note)
        return note

    def get_note(self, index: int) -> Optional[Note]:
        if self._in_bounds(index):
            return self.notes[index]
        return None

    def check_note(self, index: int):
        """Mark the note at index as done; out-of-range indices are ignored"""
        if self._in_bounds(index):
            self.notes[index].checked = True

    def uncheck_note(self, index: int):
        if self._in_bounds(index):
            self.notes[index].checked = False

    def check_all(self):
        for note in self.notes:
            note.checked = True

    def uncheck_all(self):
        for note in self.notes:
            note.checked = False

    def remove_note(self, index: int):
        """Remove the note at index; later notes shift down by one"""
        if self._in_bounds(index):
            del self.notes[index]

    def remove_notes(self, indices: Iterable[int]):
        """
        Remove several notes at once.
        Indices refer to positions before any removal, so they are applied highest first.
        """
        for index in sorted(set(indices), reverse=True):
            self.remove_note(index)

    def remove_all(self):
        self.notes = []

    def remove_checked(self):
        self.notes = [note for note in self.notes if not note.checked]

    def remove_unchecked(self):
        self.notes = [note for note in self.notes if note.checked]

    def to_dict(self) -> Dict[str, Any]:
        return {"notes": [note.to_dict() for note in self.notes]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TodoList":
        return cls([Note.from_dict(item) for item in data["notes"]])


def parse_index(token: str) -> Optional[int]:
    """Turn a 1-based index token into a 0-based index, or None if it isn't one"""
    digits = token[1:] if token.startswith("+") else token
    if not digits.isdecimal():
        return None
    value = int(digits)
    if value == 0:
        return None
    return value - 1


def parse_indices(tokens: Iterable[str]) -> Tuple[List[int], List[str]]:
    """Split tokens into sorted 0-based indices and the tokens that were rejected"""
    indices = []
    invalid = []
    for token in tokens:
        index = parse_index(token)
        if index is None:
            invalid.append(token)
        else:
            indices.append(index)
    return sorted(indices), invalid
