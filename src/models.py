"""Data models for the terminal notepad.

Currently only exposes the Note dataclass. In memory the completion flag is
called ``done``; on disk the same flag is stored under the key "status" so
files stay compatible with earlier notepad saves.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping

NoteRecord = Dict[str, Any]

@dataclass
class Note:
    """A single note.

    Fields:
        text: Note body; never empty after stripping.
        done: Completion flag, False on creation.
    """
    text: str
    done: bool = False

    def to_record(self) -> NoteRecord:
        return {'text': self.text, 'status': self.done}

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> 'Note':
        return cls(text=str(raw['text']), done=bool(raw['status']))

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Note(text={self.text!r}, done={self.done})"
