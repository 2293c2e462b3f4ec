"""Per-generation user management over frequency slots and a core."""

from dataclasses import dataclass, replace

from cellsim.device import UserDevice, format_user_id
from cellsim.exceptions import (
    CellularException,
    CoreCapacityError,
    FrequencyFullError,
    InvalidFrequencyError,
)

MAX_MANAGER_USERS = 10000
MAX_FREQUENCY_QUERY = 100
BASE_FREQUENCY_MHZ = 1800


@dataclass
class FrequencySlot:
    """One carrier frequency and how many users it holds."""

    frequency_mhz: int
    current_users: int = 0
    max_users: int = 0

    @property
    def has_space(self):
        return self.current_users < self.max_users


@dataclass(frozen=True)
class _GenerationSpec:
    tech_name: str
    protocol: str
    messages_per_user: int
    total_spectrum_mhz: int
    channel_bandwidth_mhz: float
    users_per_channel: int
    antenna_factor: int
    mimo_enabled: bool
    slot_count: int
    slot_step: int
    slot_max: int
    service_messages: tuple = None  # (voice, sms, data, other)


_GENERATIONS = {
    2: _GenerationSpec(
        "2G", "TDMA (Time Division Multiple Access)",
        15, 1, 0.2, 16, 1, False, 5, 200, 16, (15, 2, 5, 20),
    ),
    3: _GenerationSpec(
        "3G", "CDMA (Code Division Multiple Access)",
        10, 1, 0.2, 32, 1, False, 5, 200, 32,
    ),
    4: _GenerationSpec(
        "3.5G", "HSPA (High-Speed Packet Access)",
        8, 1, 0.2, 64, 1, False, 5, 200, 64,
    ),
    5: _GenerationSpec(
        "4G", "OFDM (Orthogonal Frequency Division Multiplexing)",
        10, 1, 0.01, 30, 4, True, 10, 10, 120, (15, 2, 25, 40),
    ),
    6: _GenerationSpec(
        "4G+", "LTE-Advanced (Carrier Aggregation + OFDM)",
        8, 1, 0.01, 40, 4, True, 10, 10, 160, (12, 2, 20, 32),
    ),
    7: _GenerationSpec(
        "5G", "OFDM + Massive MIMO",
        10, 11, 1.0, 30, 16, True, 11, 1000, 480, (10, 2, 25, 15),
    ),
}


class GenerationManager:
    """Users, frequency slots and capacity figures of one network generation."""

    def __init__(self, gen, core):
        self.core = core
        self.users = []
        self.slots = []
        self.initialize_from_generation(gen)

    def __repr__(self):
        return (
            f"GenerationManager(gen={self.current_gen}, "
            f"tech_name={self.tech_name!r}, users={self.user_count})"
        )

    def initialize_from_generation(self, gen):
        """Load the parameters and empty slots of generation ``gen`` (2 to 7)."""
        try:
            spec = _GENERATIONS[gen]
        except KeyError:
            raise ValueError(f"unknown network generation: {gen}") from None
        self.current_gen = gen
        self.tech_name = spec.tech_name
        self.protocol = spec.protocol
        self.messages_per_user = spec.messages_per_user
        self.total_spectrum_mhz = spec.total_spectrum_mhz
        self.channel_bandwidth_mhz = spec.channel_bandwidth_mhz
        self.users_per_channel = spec.users_per_channel
        self.antenna_factor = spec.antenna_factor
        self.mimo_enabled = spec.mimo_enabled
        self._service_messages = spec.service_messages
        self.slots = [
            FrequencySlot(BASE_FREQUENCY_MHZ + i * spec.slot_step, 0, spec.slot_max)
            for i in range(spec.slot_count)
        ]

    @property
    def user_count(self):
        return len(self.users)

    @property
    def slot_count(self):
        return len(self.slots)

    def _slot_for(self, freq):
        return next((s for s in self.slots if s.frequency_mhz == freq), None)

    def is_valid_frequency(self, freq):
        """Return whether ``freq`` is one of this generation's slots."""
        return self._slot_for(freq) is not None

    def messages_for(self, service_type):
        """Return the message load of a user of ``service_type``."""
        if self._service_messages is None:
            return self.messages_per_user
        voice, sms, data, other = self._service_messages
        return {1: voice, 2: sms, 3: data}.get(service_type, other)

    def add_user(self, service_type, freq):
        """Admit a user on ``freq`` and return its device.

        Raises FrequencyFullError or InvalidFrequencyError for slot problems
        and CoreCapacityError when the core cannot take the load.
        """
        if len(self.users) >= MAX_MANAGER_USERS:
            raise CellularException("Maximum number of users reached")
        slot = self._slot_for(freq)
        if slot is None:
            raise InvalidFrequencyError(freq, self.tech_name)
        if not slot.has_space:
            raise FrequencyFullError(freq)
        messages = self.messages_for(service_type)
        if not self.core.can_register(messages):
            raise CoreCapacityError()
        device = UserDevice(
            user_id=format_user_id(len(self.users) + 1),
            frequency_mhz=freq,
            messages=messages,
            service_type=service_type,
        )
        self.users.append(device)
        slot.current_users += 1
        self.core.register_user(device.user_id, messages)
        return device

    def remove_user(self, user_id):
        """Remove the user at 1-based position ``user_id`` and return it.

        The core's load is left as it was.
        """
        if not 1 <= user_id <= len(self.users):
            raise ValueError(f"no user at position {user_id}")
        device = self.users.pop(user_id - 1)
        slot = self._slot_for(device.frequency_mhz)
        if slot is not None and slot.current_users > 0:
            slot.current_users -= 1
        return device

    def max_users_by_spectrum(self):
        """Users the spectrum can carry, with MIMO reuse when enabled."""
        channels = int(self.total_spectrum_mhz / self.channel_bandwidth_mhz)
        total = channels * self.users_per_channel
        if self.mimo_enabled:
            total *= self.antenna_factor
        return total

    def cores_needed_for_full(self):
        """Cores of this manager's core capacity needed for a full load."""
        full_load = self.max_users_by_spectrum() * self.messages_per_user
        cap = self.core.max_capacity
        if cap <= 0:
            return 1
        return -(-full_load // cap)

    def first_channel_users(self):
        """Return copies of the users that fit on one channel."""
        reuse = self.antenna_factor if self.mimo_enabled else 1
        cap = self.users_per_channel * reuse
        return [replace(device) for device in self.users[:cap]]

    def users_on_frequency(self, freq):
        """Return copies of up to 100 users on ``freq``, in order of addition."""
        found = [replace(d) for d in self.users if d.frequency_mhz == freq]
        return found[:MAX_FREQUENCY_QUERY]