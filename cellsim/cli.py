"""Main menu of the cellular network simulator."""

import argparse

from cellsim.console import Console
from cellsim.exceptions import InvalidInputException, OutOfRangeException
from cellsim.filemode import DEFAULT_INPUT_FILE, run_file_mode
from cellsim.interactive import run_interactive_mode

_MAIN_MENU = (
    "\n=== Cellular Network Simulator ===\n"
    "1. Interactive Mode (User-Driven)\n"
    "2. File Mode (Input File Simulation)\n"
    "3. Exit\n"
    "Choose mode (1-3): "
)


def run(console, path=DEFAULT_INPUT_FILE):
    """Run the main menu until the user exits or input ends."""
    managers = {}
    while True:
        try:
            console.write(_MAIN_MENU)
            mode = console.read_int(1, 3)
            if mode == 1:
                run_interactive_mode(console, managers)
            elif mode == 2:
                run_file_mode(console, path)
            else:
                console.write("Goodbye!\n")
                return
        except (OutOfRangeException, InvalidInputException) as exc:
            console.error(f"ERROR: {exc}")
            console.write("\n")
        except EOFError:
            return


def main(argv=None):
    """Start the simulator on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="cellsim", description="Cellular network capacity simulator."
    )
    parser.add_argument(
        "--input",
        default=DEFAULT_INPUT_FILE,
        help="file of users for file mode (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    try:
        run(Console(), args.input)
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())