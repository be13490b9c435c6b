"""Define the fixed constants of the departure simulation and their checks."""
DEFAULT_SIMULATION_TICKS = 50
DEFAULT_FUEL_LEVEL = 150
DEFAULT_DEPARTURE_THRESHOLD = 3
DEFAULT_FUEL_REQUIRED_FOR_DEPARTURE = 100


def check_int(name: str, value) -> None:
    """Raise a ValueError unless value is an int (bools are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {value!r}")


def check_non_negative(name: str, value) -> None:
    """Raise a ValueError unless value is an int no smaller than zero."""
    check_int(name, value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def check_positive(name: str, value) -> None:
    """Raise a ValueError unless value is an int greater than zero."""
    check_non_negative(name, value)
    if value == 0:
        raise ValueError(f"{name} must be positive, got {value}")
