# cellsim

`cellsim` is a small console simulator of cellular network capacity. It models
how users spread over the frequency slots of a radio technology and how many
signalling messages they place on a cellular core. It covers six technologies:

| Choice | Technology | Protocol                                          |
|--------|------------|---------------------------------------------------|
| 2      | 2G         | TDMA (Time Division Multiple Access)              |
| 3      | 3G         | CDMA (Code Division Multiple Access)              |
| 4      | 3.5G       | HSPA (High-Speed Packet Access)                   |
| 5      | 4G         | OFDM (Orthogonal Frequency Division Multiplexing) |
| 6      | 4G+        | LTE-Advanced (Carrier Aggregation + OFDM)         |
| 7      | 5G         | OFDM + Massive MIMO                               |

Each technology has a fixed set of frequency slots, and each slot holds a fixed
number of users. A user also costs a number of messages. For 2G, 4G, 4G+ and 5G
this number depends on the service: voice (1), SMS (2), data (3) or voice +
data (4). For 3G and 3.5G it is fixed. In the menus, each technology gets a core
that accepts 100 messages. A user is turned away when the frequency does not
belong to the technology, when the slot is full, or when the core has no room
left.

## Installation

```
pip install .
```

## Running

```
cellsim
cellsim --input users.txt
```

The main menu has three choices: interactive mode, file mode and exit. If you
type something that is not a number, or a number out of range, the program
prints an error and shows the main menu again. It stops at end of input.

* **Interactive mode.** You pick a technology, then add users (up to 1000 per
  technology) and remove them. You can also view spectrum use per slot, list
  the users on a frequency, and view network statistics. Each technology keeps
  its users until the program exits, so you can switch between them.
* **File mode.** You pick a technology. Its users are then loaded from the
  input file, which is `input.txt` in the current directory unless you pass
  `--input`. Only the first 8191 bytes of the file are read. A data line has the
  form `<generation> <service> <frequency>`, with the fields separated by spaces
  or tabs, for example `2 1 1800`. Lines that begin with `#` are comments.
  Lines that do not fit this form are skipped. Entries that cannot be added are
  reported on standard error. If you remove a user, its line is removed from
  the file. The lines of other technologies, comments and all other lines are
  kept. The new text goes to a `temp_` file first, which then replaces the
  original.

Example input file:

```
# gen service freq
2 1 1800
2 3 2000
5 4 1810
```

## Using the library

```python
from cellsim.core import CellularCore
from cellsim.manager import GenerationManager

core = CellularCore(100)
manager = GenerationManager(2, core)       # 2G
device = manager.add_user(1, 1800)         # a voice user on 1800 MHz
print(device.user_id, device.messages)     # U1 15
print(manager.max_users_by_spectrum())     # 80
print(manager.cores_needed_for_full())     # 12
manager.remove_user(1)
```

`GenerationManager.add_user` returns the new `UserDevice`. If the user cannot be
added, it raises one of these errors from `cellsim.exceptions`, all of them
subclasses of `CellularException`:

* `InvalidFrequencyError`: the frequency is not one of the technology's slots.
* `FrequencyFullError`: the slot is full.
* `CoreCapacityError`: the core cannot take the extra messages.

`remove_user` takes a 1-based position. It raises `ValueError` when no user is
at that position. Removing a user does not lower the core's load.

Other modules:

* `cellsim.config.NetworkConfig` gives the static capacity figures of each
  technology: `for_2g()` to `for_5g()`, `max_users()` and
  `cores_needed_for_full()`, using a fixed core capacity of 10000.
* `cellsim.tower` models single towers: `G2Tower`, `G3Tower`, `G35Tower`,
  `G4Tower`, `G4PlusTower` and `G5Tower`, all subclasses of `CellTower`.
* `cellsim.device.UserDevice` can be turned into a comma-separated line and
  read back with `serialize()` and `UserDevice.deserialize()`.
* `cellsim.filemode` has `parse_input_file`, `remove_generation_entry` and
  `load_manager`, for working with input files without the menus.
* `cellsim.console` has `Console`, which reads and writes text streams, and
  `parse_int`, which checks typed numbers.

## Limitations

* Users added in interactive mode are kept in memory only, and are lost when
  the program exits.
* File mode never adds users to the file. The only change it makes is removing
  the line of a removed user. "Save & Return" writes nothing.
* The tower classes, `NetworkConfig` and `validate_spectrum` can be used from
  code, but none of the menus use them.

## Tests

```
pip install .[test]
pytest
```