"""Simulation driven by an input file of users, one per line."""

import os
import re
from pathlib import Path

from cellsim.core import CellularCore
from cellsim.exceptions import CellularException, CoreCapacityError
from cellsim.interactive import (
    CORE_MESSAGE_LIMIT,
    show_network_stats,
    show_spectrum_status,
    show_technology_menu,
    show_users_on_frequency,
)
from cellsim.manager import GenerationManager

DEFAULT_INPUT_FILE = "input.txt"
MAX_FILE_BYTES = 8191
MAX_LINE_LENGTH = 254

_GENERATION_DIGITS = "234567"
_SERVICE_DIGITS = "1234"
_BLANKS = " \t"
_LEADING_DIGITS = re.compile(r"[0-9]*")
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

_ACTIONS = (
    "1. Remove User\n"
    "2. View Spectrum Status\n"
    "3. View Users on Frequency\n"
    "4. View Network Stats\n"
    "5. Switch Technology\n"
    "6. Save & Return to Main Menu\n"
    "Choice: "
)


def parse_input_file(text, gen):
    """Return the ``(service_type, freq)`` entries of generation ``gen``.

    Each data line is a generation digit (2-7), a service digit (1-4) and
    a frequency, separated by spaces or tabs. Comment lines start with
    ``#``; lines that do not fit the form are skipped. A missing frequency
    reads as zero, except on a final line with no newline, which is dropped.
    """
    pieces = text.split("\n")
    entries = []
    for number, line in enumerate(pieces):
        is_final = number == len(pieces) - 1
        if not line or line[0] not in _GENERATION_DIGITS:
            continue
        if int(line[0]) != gen:
            continue
        rest = line[1:].lstrip(_BLANKS)
        if not rest or rest[0] not in _SERVICE_DIGITS:
            continue
        service = int(rest[0])
        rest = rest[1:].lstrip(_BLANKS)
        if not rest and is_final:
            break
        digits = _LEADING_DIGITS.match(rest).group()
        entries.append((service, int(digits) if digits else 0))
    return entries


def remove_generation_entry(text, gen, index):
    """Return ``text`` without the ``index``-th (1-based) line of generation ``gen``.

    Lines of other generations, comments and other lines are kept. Data
    lines are cut to 254 characters and always end in a newline.
    """
    pieces = text.split("\n")
    kept = []
    counter = 0
    for number, line in enumerate(pieces):
        is_final = number == len(pieces) - 1
        if is_final and not line:
            break
        if not line or line[0] not in _GENERATION_DIGITS:
            kept.append(line if is_final else line + "\n")
            continue
        if int(line[0]) == gen:
            counter += 1
            if counter == index:
                continue
        kept.append(line[:MAX_LINE_LENGTH] + "\n")
    return "".join(kept)


def _read_input(path):
    with open(path, "rb") as handle:
        data = handle.read(MAX_FILE_BYTES)
    return data.decode(_ENCODING, _ERRORS)


def _replace_file(path, text):
    target = Path(path)
    temp = target.with_name("temp_" + target.name)
    temp.write_bytes(text.encode(_ENCODING, _ERRORS))
    os.replace(temp, target)


def load_manager(path, gen):
    """Build a manager for ``gen`` and add the users listed in ``path``.

    Returns ``(manager, rejected)``: the manager, with its own core, and
    the errors raised for entries that could not be added. A missing file
    gives a manager with no users.
    """
    manager = GenerationManager(gen, CellularCore(CORE_MESSAGE_LIMIT))
    rejected = []
    try:
        text = _read_input(path)
    except OSError:
        return manager, rejected
    for service, freq in parse_input_file(text, gen):
        try:
            manager.add_user(service, freq)
        except CellularException as exc:
            rejected.append(exc)
    return manager, rejected


def _rejection_message(exc):
    if isinstance(exc, CoreCapacityError):
        return f"❌ Rejected: {exc}\n"
    return f"❌ ERROR: {exc}\n"


def _remove_user(console, manager, path):
    if manager.user_count == 0:
        console.write("No users to remove.\n")
        return
    console.write(f"User ID to remove (1-{manager.user_count}): ")
    position = console.read_int(1, manager.user_count)
    try:
        text = _read_input(path)
    except OSError:
        manager.remove_user(position)
        console.write("User removed.\n")
        return
    try:
        _replace_file(path, remove_generation_entry(text, manager.current_gen, position))
    except OSError:
        pass
    manager.remove_user(position)
    console.write("User removed and file updated.\n")


def run_file_mode(console, path=DEFAULT_INPUT_FILE):
    """Choose a generation, load its users from ``path`` and run the file menu.

    Errors while reading the generation choice propagate to the caller;
    errors inside the menu are reported and the menu goes on.
    """
    show_technology_menu(console)
    gen = console.read_int(0, 7)
    if gen == 0:
        return
    if gen < 2:
        console.write("Invalid choice.\n")
        return

    manager, rejected = load_manager(path, gen)
    for _ in range(manager.user_count):
        console.write("✅ User added successfully.\n")
    for exc in rejected:
        console.error(_rejection_message(exc))

    while True:
        try:
            console.write(f"\n[File Mode - {manager.tech_name}]\n")
            console.write(_ACTIONS)
            choice = console.read_int(1, 6)
            if choice == 1:
                _remove_user(console, manager, path)
            elif choice == 2:
                show_spectrum_status(console, manager)
            elif choice == 3:
                show_users_on_frequency(console, manager)
            elif choice == 4:
                show_network_stats(console, manager)
            elif choice == 5:
                run_file_mode(console, path)
                return
            else:
                console.write("💾 File updated. Returning to main menu...\n")
                return
        except CellularException as exc:
            console.error(f"❌ ERROR: {exc}\n")