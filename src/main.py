"""Main entry point for the terminal notepad."""
import sys
from cli import CLI
from logger import configure_logging
from notepad import Notepad


def main() -> int:
    configure_logging()
    cli = CLI(Notepad())
    return cli.run()

if __name__ == "__main__":
    sys.exit(main())
