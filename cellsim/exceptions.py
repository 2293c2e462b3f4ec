"""Exceptions raised by the cellular network simulator."""

_MESSAGE_LIMIT = 127


class CellularException(Exception):
    """Base class for every simulator error."""

    default_message = "Cellular network error"

    def __init__(self, message=None):
        text = self.default_message if message is None else message
        self.message = text[:_MESSAGE_LIMIT]
        super().__init__(self.message)

    def __str__(self):
        return self.message


class InvalidInputException(CellularException):
    """Input could not be read as a whole number."""

    default_message = "Invalid input: not a valid number"


class OutOfRangeException(CellularException):
    """A number was read but lies outside the accepted range."""

    default_message = "Input out of valid range"


class InvalidSpectrumException(CellularException):
    """Assigned spectrum exceeds what the hardware allows."""

    default_message = "Spectrum exceeds hardware limits"


class InvalidFrequencyError(CellularException):
    """A frequency is not one of the slots of a generation."""

    def __init__(self, freq, tech_name):
        self.freq = freq
        self.tech_name = tech_name
        super().__init__(
            f"Frequency {freq} MHz is not valid for {tech_name} generation."
        )


class FrequencyFullError(CellularException):
    """A frequency slot has no room for another user."""

    def __init__(self, freq):
        self.freq = freq
        super().__init__(f"Frequency {freq} MHz is full.")


class CoreCapacityError(CellularException):
    """The cellular core cannot take on more message load."""

    default_message = (
        "Cellular core cannot accommodate additional messages "
        "due to overhead limit."
    )