"""The cellular core that tracks registered users and message load."""

from cellsim.exceptions import CoreCapacityError

MAX_REGISTERED_USERS = 10000
_ID_LIMIT = 31


class CellularCore:
    """Message-load accounting for one core."""

    def __init__(self, max_capacity=10000):
        self.max_capacity = max_capacity
        self.current_load = 0
        self._ids = []

    def __repr__(self):
        return (
            f"CellularCore(max_capacity={self.max_capacity}, "
            f"current_load={self.current_load}, "
            f"registered_count={self.registered_count})"
        )

    @property
    def registered_count(self):
        return len(self._ids)

    @property
    def registered_ids(self):
        return tuple(self._ids)

    def can_register(self, user_messages):
        """Return whether the core can take ``user_messages`` more load."""
        return self.current_load + user_messages <= self.max_capacity

    def register_user(self, user_id, user_messages):
        """Record a user and add its load; raise CoreCapacityError if it won't fit."""
        if (
            not self.can_register(user_messages)
            or len(self._ids) >= MAX_REGISTERED_USERS
        ):
            raise CoreCapacityError()
        self._ids.append(user_id[:_ID_LIMIT])
        self.current_load += user_messages

    def reset(self):
        """Forget every registration and clear the load."""
        self.current_load = 0
        self._ids.clear()