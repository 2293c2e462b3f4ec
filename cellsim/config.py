"""Static radio parameters of each network generation."""

import math
from dataclasses import dataclass

CORE_CAPACITY = 10000
_NAME_LIMIT = 15


@dataclass
class NetworkConfig:
    """Spectrum and capacity parameters of a network generation."""

    name: str = ""
    total_spectrum_mhz: float = 1.0
    channel_bandwidth_mhz: float = 0.2
    users_per_channel: int = 16
    messages_per_user: int = 15
    antenna_factor: int = 1
    mimo_enabled: bool = False

    def __post_init__(self):
        self.name = self.name[:_NAME_LIMIT]

    @classmethod
    def for_2g(cls):
        return cls("2G", 1.0, 0.2, 16, 15, 1, False)

    @classmethod
    def for_3g(cls):
        return cls("3G", 1.0, 0.2, 32, 10, 1, False)

    @classmethod
    def for_35g(cls):
        return cls("3.5G", 1.0, 0.2, 64, 8, 1, False)

    @classmethod
    def for_4g(cls):
        return cls("4G", 1.0, 0.01, 30, 10, 4, True)

    @classmethod
    def for_4g_plus(cls):
        return cls("4G+", 1.0, 0.01, 40, 8, 4, True)

    @classmethod
    def for_5g(cls):
        return cls("5G", 11.0, 1.0, 30, 10, 16, True)

    def max_users(self):
        """Users the spectrum can carry, with MIMO reuse when enabled."""
        channels = int(self.total_spectrum_mhz / self.channel_bandwidth_mhz)
        total = channels * self.users_per_channel
        if self.mimo_enabled:
            total *= self.antenna_factor
        return total

    def cores_needed_for_full(self):
        """Cores of the fixed capacity needed to carry a fully loaded network."""
        full_load = self.max_users() * self.messages_per_user
        return math.ceil(full_load / CORE_CAPACITY)