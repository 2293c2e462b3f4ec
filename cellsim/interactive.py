"""Interactive, menu-driven management of the network generations."""

from cellsim.core import CellularCore
from cellsim.device import service_label
from cellsim.exceptions import CoreCapacityError, FrequencyFullError
from cellsim.manager import GenerationManager

CORE_MESSAGE_LIMIT = 100
MAX_INTERACTIVE_USERS = 1000
MAX_FREQUENCY_MHZ = 100000

_TECHNOLOGY_MENU = (
    "\n--- Select Network Technology ---\n"
    "2: 2G (TDMA) - Voice:15, Data:5 msgs\n"
    "3: 3G (CDMA) - Fixed 10 msgs\n"
    "4: 3.5G (HSPA) - Fixed 8 msgs\n"
    "5: 4G (OFDM) - Service-based messages\n"
    "6: 4G+ (LTE-A) - Enhanced capacity\n"
    "7: 5G (Massive MIMO) - 16x antenna reuse\n"
    "0: Return to Main Menu\n"
    "Choice (2-7, 0 to exit): "
)

_SERVICE_MENU = (
    "\n--- Service Type ---\n"
    "1: Voice Call\n"
    "2: SMS\n"
    "3: Mobile Data\n"
    "4: Voice + Data\n"
    "Choice (1-4): "
)

_ACTIONS = (
    "1. Add User\n"
    "2. Remove User\n"
    "3. View Spectrum Status\n"
    "4. View Users on Frequency\n"
    "5. View Network Stats\n"
    "6. Switch Technology\n"
    "7. Return to Main Menu\n"
    "Choice: "
)


def show_technology_menu(console):
    """Print the list of network generations and the choice prompt."""
    console.write(_TECHNOLOGY_MENU)


def report_invalid_frequency(console, manager, freq):
    """Report on the error stream that ``freq`` is not a slot of ``manager``."""
    console.error(
        f"❌ ERROR: Frequency {freq} MHz is not valid for "
        f"{manager.tech_name} generation.\n"
    )


def show_spectrum_status(console, manager):
    """Print the occupancy of every frequency slot."""
    console.write("\n--- SPECTRUM STATUS ---\n")
    for slot in manager.slots:
        used, total = slot.current_users, slot.max_users
        share = f"{used * 100 // total}%)" if total > 0 else "Invalid%)"
        console.write(
            f"  {slot.frequency_mhz} MHz: {used}/{total} users ({share}\n"
        )


def show_users_on_frequency(console, manager):
    """Ask for a frequency and list its users; return the users shown."""
    console.write("Frequency to query (MHz): ")
    freq = console.read_int(1, MAX_FREQUENCY_MHZ)
    if not manager.is_valid_frequency(freq):
        report_invalid_frequency(console, manager, freq)
        return []
    users = manager.users_on_frequency(freq)
    console.write(f"\nUsers on {freq} MHz:\n")
    if not users:
        console.write("  (None)\n")
    for device in users:
        console.write(
            f"  {device.user_id} | {device.messages} msgs | "
            f"{service_label(device.service_type)}\n"
        )
    return users


def show_network_stats(console, manager):
    """Print the configuration and capacity figures of ``manager``."""
    console.write(
        "\n--- Network Configuration ---\n"
        f"Technology: {manager.tech_name}\n"
        f"Protocol: {manager.protocol}\n"
        f"Spectrum: {int(manager.total_spectrum_mhz)} MHz\n"
        f"Max Users (Spectrum): {manager.max_users_by_spectrum()}\n"
        f"Current Users: {manager.user_count}\n"
        f"Cores Needed for Full Capacity: {manager.cores_needed_for_full()}\n"
    )


def _add_user(console, manager):
    if manager.user_count >= MAX_INTERACTIVE_USERS:
        console.write(f"❌ Max users ({MAX_INTERACTIVE_USERS}) reached.\n")
        return
    console.write(_SERVICE_MENU)
    service = console.read_int(1, 4)

    console.write("\n--- Available Frequencies ---\n")
    open_slots = [slot for slot in manager.slots if slot.has_space]
    for slot in open_slots:
        console.write(
            f"  {slot.frequency_mhz} MHz "
            f"({slot.current_users}/{slot.max_users} users)\n"
        )
    if not open_slots:
        console.write("  (No frequencies with available space)\n")
    console.write("\nEnter Frequency (MHz): ")
    freq = console.read_int(1, MAX_FREQUENCY_MHZ)

    if not manager.is_valid_frequency(freq):
        report_invalid_frequency(console, manager, freq)
        return
    try:
        manager.add_user(service, freq)
    except FrequencyFullError:
        console.error(f"❌ ERROR: Frequency {freq} MHz is full.\n")
    except CoreCapacityError:
        console.error(
            "❌ Rejected: Cellular core cannot accommodate additional "
            "messages due to overhead limit.\n"
        )
    else:
        console.write("✅ User added successfully.\n")


def _remove_user(console, manager):
    if manager.user_count == 0:
        console.write("No users to remove.\n")
        return
    console.write(f"User ID to remove (1-{manager.user_count}): ")
    position = console.read_int(1, manager.user_count)
    manager.remove_user(position)
    console.write("User removed.\n")


def _manager_for(managers, gen):
    if gen not in managers:
        managers[gen] = GenerationManager(gen, CellularCore(CORE_MESSAGE_LIMIT))
    return managers[gen]


def run_interactive_mode(console, managers):
    """Run the interactive menus until the user returns to the main menu.

    ``managers`` maps generation numbers to their managers and keeps them
    between calls; a manager with its own core is created on first use.
    Input errors propagate to the caller.
    """
    while True:
        show_technology_menu(console)
        gen = console.read_int(0, 7)
        if gen == 0:
            return
        if gen < 2:
            console.write("Invalid choice.\n")
            continue
        manager = _manager_for(managers, gen)

        while True:
            console.write(f"\n[Interactive Mode - {manager.tech_name}]\n")
            console.write(_ACTIONS)
            choice = console.read_int(1, 7)
            if choice == 1:
                _add_user(console, manager)
            elif choice == 2:
                _remove_user(console, manager)
            elif choice == 3:
                show_spectrum_status(console, manager)
            elif choice == 4:
                show_users_on_frequency(console, manager)
            elif choice == 5:
                show_network_stats(console, manager)
            elif choice == 6:
                break
            else:
                return