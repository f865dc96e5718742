"""Interactive read-dispatch loop."""

from typing import Callable, Dict, Optional

from rich.markup import escape

from .commands import Command, Session
from .errors import ExitRequested, PokedexError
from .utils import get_logger

logger = get_logger(__name__)

PROMPT = "Pokedex > "
UNKNOWN_COMMAND = "Unknown command. Type 'help' for a list of commands."


def run_repl(
    session: Session,
    commands: Dict[str, Command],
    read_line: Optional[Callable[[str], str]] = None,
) -> None:
    """
    Read commands until ``exit``, end of input, or Ctrl-C.

    Args:
        session: Session state passed to every command
        commands: Registry from build_commands()
        read_line: Prompt-and-read function, defaults to session.console.input
    """
    console = session.console
    read_line = read_line or console.input

    console.print("Welcome to the Pokedex!")
    while True:
        try:
            line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        parts = line.split()
        if not parts:
            console.print(UNKNOWN_COMMAND)
            continue

        name, args = parts[0].lower(), parts[1:]
        command = commands.get(name)
        if command is None:
            console.print(UNKNOWN_COMMAND)
            continue

        try:
            command.callback(session, args)
        except ExitRequested:
            break
        except PokedexError as e:
            console.print("[red]Error:[/red]", escape(str(e)), highlight=False)
        except Exception as e:
            logger.exception(f"Command '{name}' failed")
            console.print("[red]Error:[/red]", escape(str(e)), highlight=False)
