"""Notepad logic: holds the ordered notes, validates arguments, mutates notes.

Operations receive the argument words exactly as the command loop tokenized
them. Users address notes by 1-based position; internally notes live in a
plain list, so position == index + 1 and there are never holes. Every
operation validates fully before touching the list, so a raised
NotepadError always leaves the notes unchanged.
"""
import re
from typing import Iterable, List, Mapping, Any, Sequence, Tuple
from errors import InvalidArgument, NotANumber, InvalidPosition
from models import Note, NoteRecord
from storage import Storage, PathLike
from theme import color, POSITION_COLOR, DONE_COLOR, EMPTY_COLOR

POSITION_RE = re.compile(r'[+-]?\d+', re.ASCII)
EMPTY_TEXT = '(empty)'
DONE_SUFFIX = ' / Status: Done'

class Notepad:
    def __init__(self, notes: Iterable[Note] = ()):
        self._notes: List[Note] = list(notes)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> 'Notepad':
        return cls(Note.from_record(raw) for raw in records)

    # -------------------- queries --------------------
    @property
    def notes(self) -> Tuple[Note, ...]:
        return tuple(self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def to_records(self) -> List[NoteRecord]:
        return [note.to_record() for note in self._notes]

    # -------------------- argument helpers --------------------
    @staticmethod
    def _require_count(words: Sequence[str], count: int) -> None:
        if len(words) != count:
            raise InvalidArgument('invalid argument')

    def _index_for(self, word: str) -> int:
        if not POSITION_RE.fullmatch(word):
            raise NotANumber(f'not a number: {word}')
        try:
            position = int(word)
        except ValueError:
            # digit count past the int conversion limit
            raise InvalidPosition(f'invalid position: {word[:20]}...') from None
        if position < 1 or position > len(self._notes):
            raise InvalidPosition(f'invalid position: {position}')
        return position - 1

    @staticmethod
    def _join_text(words: Sequence[str]) -> str:
        text = ' '.join(words).strip()
        if not text:
            raise InvalidArgument('missing note text')
        return text

    # -------------------- note operations --------------------
    def create(self, words: Sequence[str]) -> Note:
        note = Note(text=self._join_text(words))
        self._notes.append(note)
        return note

    def set_status(self, words: Sequence[str], done: bool) -> bool:
        """Set the done flag; returns False if the note already had it."""
        self._require_count(words, 1)
        note = self._notes[self._index_for(words[0])]
        if note.done == done:
            return False
        note.done = done
        return True

    def update(self, words: Sequence[str]) -> Note:
        if len(words) < 2:
            raise InvalidArgument('invalid argument')
        idx = self._index_for(words[0])
        text = self._join_text(words[1:])
        note = self._notes[idx]
        note.text = text
        return note

    def delete(self, words: Sequence[str]) -> Note:
        self._require_count(words, 1)
        return self._notes.pop(self._index_for(words[0]))

    def clear(self, words: Sequence[str] = ()) -> int:
        self._require_count(words, 0)
        removed = len(self._notes)
        self._notes.clear()
        return removed

    # -------------------- persistence --------------------
    def save(self, words: Sequence[str]) -> PathLike:
        self._require_count(words, 1)
        Storage.save_notes(words[0], self.to_records())
        return words[0]

    def load(self, words: Sequence[str]) -> int:
        """Replace the notes with the file's contents; returns the new count."""
        self._require_count(words, 1)
        records = Storage.load_notes(words[0])
        self._notes = [Note.from_record(raw) for raw in records]
        return len(self._notes)

    # -------------------- display --------------------
    def list(self, words: Sequence[str] = ()) -> List[str]:
        self._require_count(words, 0)
        return self.render_lines()

    def render_lines(self) -> List[str]:
        if not self._notes:
            return [color(EMPTY_TEXT, EMPTY_COLOR)]
        lines: List[str] = []
        for position, note in enumerate(self._notes, start=1):
            line = color(f'{position}:', POSITION_COLOR) + f' {note.text}'
            if note.done:
                line += color(DONE_SUFFIX, DONE_COLOR)
            lines.append(line)
        return lines

    def __str__(self) -> str:
        done = sum(1 for n in self._notes if n.done)
        return f'Notes: {len(self._notes)}, Done: {done}'
