"""Cell towers of each network generation and their frequency slots."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cellsim.device import UserDevice, format_user_id
from cellsim.exceptions import (
    CellularException,
    CoreCapacityError,
    FrequencyFullError,
    InvalidFrequencyError,
)

MAX_TOWER_USERS = 10000
BASE_FREQUENCY_MHZ = 1800
_NAME_LIMIT = 31


@dataclass
class FreqSlot:
    """One carrier frequency and how many users it holds."""

    freq_mhz: int
    current_users: int = 0
    max_users: int = 0

    @property
    def has_space(self):
        return self.current_users < self.max_users


class CellTower(ABC):
    """A tower that admits users onto its frequency slots and into a core."""

    def __init__(
        self,
        tech_name,
        protocol,
        total_spectrum_mhz,
        channel_bandwidth_mhz,
        users_per_channel,
        antenna_factor,
        mimo_enabled,
        core,
    ):
        self.tech_name = tech_name[:_NAME_LIMIT]
        self.protocol = protocol[:_NAME_LIMIT]
        self.total_spectrum_mhz = total_spectrum_mhz
        self.channel_bandwidth_mhz = channel_bandwidth_mhz
        self.users_per_channel = users_per_channel
        self.antenna_factor = antenna_factor
        self.mimo_enabled = mimo_enabled
        self.core = core
        self.users = []
        self.slots = []
        self.initialize_slots()

    def __repr__(self):
        return (
            f"{type(self).__name__}(tech_name={self.tech_name!r}, "
            f"users={self.user_count}, slots={self.slot_count})"
        )

    @property
    def user_count(self):
        return len(self.users)

    @property
    def slot_count(self):
        return len(self.slots)

    def _fill_slots(self, count, step, max_users):
        self.slots = [
            FreqSlot(BASE_FREQUENCY_MHZ + i * step, 0, max_users)
            for i in range(count)
        ]

    @abstractmethod
    def initialize_slots(self):
        """Create the tower's frequency slots, all empty."""

    @abstractmethod
    def compute_messages(self, service_type):
        """Return the message load a user of ``service_type`` puts on the core."""

    def _slot_for(self, freq_mhz):
        return next((s for s in self.slots if s.freq_mhz == freq_mhz), None)

    def add_user(self, service_type, freq_mhz):
        """Admit a user on ``freq_mhz`` and return its device.

        Raises CoreCapacityError when the core is full, InvalidFrequencyError
        for a frequency the tower does not carry and FrequencyFullError when
        the slot has no room.
        """
        if len(self.users) >= MAX_TOWER_USERS:
            raise CellularException("Tower has reached its maximum number of users")
        messages = self.compute_messages(service_type)
        if not self.core.can_register(messages):
            raise CoreCapacityError()
        slot = self._slot_for(freq_mhz)
        if slot is None:
            raise InvalidFrequencyError(freq_mhz, self.tech_name)
        if not slot.has_space:
            raise FrequencyFullError(freq_mhz)
        device = UserDevice(
            user_id=format_user_id(len(self.users) + 1),
            frequency_mhz=freq_mhz,
            messages=messages,
            service_type=service_type,
        )
        self.core.register_user(device.user_id, messages)
        slot.current_users += 1
        self.users.append(device)
        return device

    def max_users_by_spectrum(self):
        """Users the spectrum can carry, with MIMO reuse when enabled."""
        channels = int(self.total_spectrum_mhz / self.channel_bandwidth_mhz)
        reuse = self.antenna_factor if self.mimo_enabled else 1
        return channels * self.users_per_channel * reuse

    def first_channel_users(self):
        """Return the ids of the users that fit on the first channel."""
        if not self.slots:
            return []
        count = min(len(self.users), self.slots[0].max_users)
        return [device.user_id for device in self.users[:count]]

    def cores_needed_for_full(self):
        """Cores of this tower's core capacity needed for a full voice load."""
        full_load = self.max_users_by_spectrum() * self.compute_messages(1)
        cap = self.core.max_capacity
        if cap <= 0:
            return 1
        return -(-full_load // cap)


class G2Tower(CellTower):
    """2G tower using TDMA."""

    _MESSAGES = {1: 15, 2: 2, 3: 5}

    def __init__(self, core):
        super().__init__("2G", "TDMA", 1.0, 0.2, 16, 1, False, core)

    def initialize_slots(self):
        self._fill_slots(5, 200, 16)

    def compute_messages(self, service_type):
        return self._MESSAGES.get(service_type, 20)


class G3Tower(CellTower):
    """3G tower using CDMA."""

    def __init__(self, core):
        super().__init__("3G", "CDMA", 1.0, 0.2, 32, 1, False, core)

    def initialize_slots(self):
        self._fill_slots(5, 200, 32)

    def compute_messages(self, service_type):
        return 10


class G35Tower(CellTower):
    """3.5G tower using HSPA."""

    def __init__(self, core):
        super().__init__("3.5G", "HSPA", 1.0, 0.2, 64, 1, False, core)

    def initialize_slots(self):
        self._fill_slots(5, 200, 64)

    def compute_messages(self, service_type):
        return 8


class G4Tower(CellTower):
    """4G tower using OFDM with MIMO reuse."""

    _MESSAGES = {1: 15, 2: 2, 3: 25}

    def __init__(self, core):
        super().__init__("4G", "OFDM", 1.0, 0.01, 30, 4, True, core)

    def initialize_slots(self):
        self._fill_slots(10, 10, 30 * 4)

    def compute_messages(self, service_type):
        return self._MESSAGES.get(service_type, 40)


class G4PlusTower(CellTower):
    """4G+ tower using LTE-Advanced."""

    _MESSAGES = {1: 12, 2: 2, 3: 20}

    def __init__(self, core):
        super().__init__("4G+", "LTE-A", 1.0, 0.01, 40, 4, True, core)

    def initialize_slots(self):
        self._fill_slots(10, 10, 40 * 4)

    def compute_messages(self, service_type):
        return self._MESSAGES.get(service_type, 32)


class G5Tower(CellTower):
    """5G tower using massive MIMO."""

    _MESSAGES = {1: 10, 2: 2, 3: 25}

    def __init__(self, core):
        super().__init__("5G", "Massive MIMO", 11.0, 1.0, 30, 16, True, core)

    def initialize_slots(self):
        self._fill_slots(11, 1000, 30 * 16)

    def compute_messages(self, service_type):
        return self._MESSAGES.get(service_type, 15)