"""Command-line interface loop for the notepad.

One command per line: the first whitespace-separated word is the verb, the
rest are argument words handed to the Notepad unchanged. Verbs are
case-sensitive. Errors are printed and the loop keeps going; only the
"exit" command (or end of input) ends the session.
"""
import sys
from typing import Callable, Dict, List, Optional, Sequence, TextIO, Tuple
from errors import InvalidArgument, NotepadError
from logger import get_logger
from notepad import Notepad, EMPTY_TEXT
from theme import ok, error, info, prompt

log = get_logger('cli')

EXIT_OK = 0
EXIT_INTERRUPTED = 130

Handler = Callable[[Sequence[str]], Optional[int]]


def parse_command(line: str) -> Tuple[str, List[str]]:
    """Split a line into (verb, words); blank input gives ("", [])."""
    parts = line.split()
    if not parts:
        return '', []
    return parts[0], parts[1:]


class CLI:
    def __init__(self, notepad: Notepad, stdin: Optional[TextIO] = None, show_prompt: bool = True):
        self.notepad: Notepad = notepad
        self.stdin: TextIO = stdin if stdin is not None else sys.stdin
        self.show_prompt: bool = show_prompt
        self.commands: Dict[str, Handler] = {
            'create': self._cmd_create,
            'done': self._cmd_done,
            'undone': self._cmd_undone,
            'update': self._cmd_update,
            'delete': self._cmd_delete,
            'list': self._cmd_list,
            'clear': self._cmd_clear,
            'save': self._cmd_save,
            'load': self._cmd_load,
            'help': self._cmd_help,
            'exit': self._cmd_exit,
        }

    def run(self) -> int:
        """Main REPL loop; returns the process exit status."""
        try:
            while True:
                if self.show_prompt:
                    print(prompt(), end='', flush=True)
                line = self.stdin.readline()
                if not line:
                    log.debug('End of input')
                    return EXIT_OK
                status = self.handle_line(line)
                if status is not None:
                    return status
        except KeyboardInterrupt:
            print()
            print(info('Interrupted. Goodbye!'))
            return EXIT_INTERRUPTED

    # -------------------- command dispatch --------------------
    def handle_line(self, line: str) -> Optional[int]:
        """Run one command line; returns an exit status when the session ends."""
        verb, words = parse_command(line)
        if not verb:
            return None
        handler = self.commands.get(verb)
        if handler is None:
            print(error(f'unknown command: {verb}'))
            return None
        log.debug('Dispatching %s with %d argument(s)', verb, len(words))
        try:
            return handler(words)
        except NotepadError as e:
            log.debug('%s failed: %s: %s', verb, type(e).__name__, e)
            print(error(str(e)))
            return None

    # ---- individual command handlers ----
    def _cmd_create(self, words: Sequence[str]) -> None:
        self.notepad.create(words)
        print(ok('Note was successfully created'))

    def _cmd_done(self, words: Sequence[str]) -> None:
        if self.notepad.set_status(words, True):
            print(ok('Note marked as done'))
        else:
            print(info(f'Note {words[0]} is already done'))

    def _cmd_undone(self, words: Sequence[str]) -> None:
        if self.notepad.set_status(words, False):
            print(ok('Note marked as not done'))
        else:
            print(info(f'Note {words[0]} is already not done'))

    def _cmd_update(self, words: Sequence[str]) -> None:
        self.notepad.update(words)
        print(ok('Note updated'))

    def _cmd_delete(self, words: Sequence[str]) -> None:
        self.notepad.delete(words)
        print(ok('Note deleted'))

    def _cmd_list(self, words: Sequence[str]) -> None:
        if words:
            raise InvalidArgument('invalid argument')
        if not len(self.notepad):
            print(info(EMPTY_TEXT))
            return
        for line in self.notepad.render_lines():
            print(line)

    def _cmd_clear(self, words: Sequence[str]) -> None:
        removed = self.notepad.clear(words)
        print(ok(f'Notepad cleared ({removed} removed)'))

    def _cmd_save(self, words: Sequence[str]) -> None:
        path = self.notepad.save(words)
        print(ok(f'Notepad saved to {path}'))

    def _cmd_load(self, words: Sequence[str]) -> None:
        count = self.notepad.load(words)
        print(ok(f'Notepad loaded from {words[0]} ({count} notes)'))

    def _cmd_help(self, words: Sequence[str]) -> None:
        if words:
            raise InvalidArgument('invalid argument')
        print("Commands:")
        print("  create <text...>         Add a new note")
        print("  list                     Show all notes with their positions")
        print("  done <position>          Mark a note as done")
        print("  undone <position>        Mark a note as not done")
        print("  update <position> <text> Replace a note's text")
        print("  delete <position>        Remove a note; later notes move up")
        print("  clear                    Remove all notes")
        print("  save <file>              Write notes to a JSON file")
        print("  load <file>              Replace notes with a JSON file's contents")
        print("  help                     Show this help")
        print("  exit                     Quit")

    def _cmd_exit(self, words: Sequence[str]) -> int:
        if words:
            raise InvalidArgument('invalid argument')
        print(info('Goodbye!'))
        return EXIT_OK
