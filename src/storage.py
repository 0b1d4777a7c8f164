"""Persistence helpers (save/load) for the notepad.

File format: a JSON array of {"text": str, "status": bool} records,
pretty-printed. Saves go through a temporary file in the target directory
followed by os.replace, so an interrupted save leaves the previous file
intact ("last successful save wins").
"""
import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, List, Union

from errors import DecodeError, StorageError
from logger import get_logger
from models import NoteRecord

PathLike = Union[str, Path]

log = get_logger('storage')

class Storage:
    @staticmethod
    def save_notes(path: PathLike, records: List[NoteRecord]) -> None:
        """Write records to path atomically.

        Raises StorageError when the directory or file cannot be written.
        """
        target = Path(path)
        payload = json.dumps(records, indent=4)
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=str(target.parent), prefix=f'.{target.name}.', suffix='.tmp'
            )
        except OSError as e:
            raise StorageError(f'cannot write {target}: {e.strerror or e}') from e
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(payload)
            os.chmod(tmp_name, _file_mode(target))
            os.replace(tmp_name, target)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f'cannot write {target}: {e.strerror or e}') from e
        log.info('Saved %d notes to %s', len(records), target)

    @staticmethod
    def load_notes(path: PathLike) -> List[NoteRecord]:
        """Read and validate the records stored at path.

        Raises StorageError if the file cannot be read and DecodeError if
        its contents are not a notes array.
        """
        source = Path(path)
        try:
            text = source.read_text(encoding='utf-8')
        except OSError as e:
            raise StorageError(f'cannot read {source}: {e.strerror or e}') from e
        except UnicodeDecodeError as e:
            raise DecodeError(f'{source} is not a text file') from e
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(f'invalid JSON in {source}: {e.msg} (line {e.lineno})') from e
        except (ValueError, RecursionError) as e:
            # too deeply nested, or an integer past the digit limit
            raise DecodeError(f'invalid JSON in {source}: {type(e).__name__}') from e
        records = validate_records(data, source)
        log.info('Loaded %d notes from %s', len(records), source)
        return records

def _file_mode(target: Path) -> int:
    """Mode for a saved file: keep the existing target's, else 0666 minus umask."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

def validate_records(data: Any, source: PathLike) -> List[NoteRecord]:
    if not isinstance(data, list):
        raise DecodeError(f'{source} does not contain a list of notes')
    for idx, raw in enumerate(data, start=1):
        if not isinstance(raw, dict):
            raise DecodeError(f'note #{idx} in {source} is not an object')
        text = raw.get('text')
        if not isinstance(text, str) or not text.strip():
            raise DecodeError(f'note #{idx} in {source} has no text')
        if not isinstance(raw.get('status'), bool):
            raise DecodeError(f'note #{idx} in {source} has no boolean status')
    return data
