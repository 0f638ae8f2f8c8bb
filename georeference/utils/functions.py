"""Module for miscellaneous multi-use functions"""

__all__ = [
    'normalize_bearing', 'round_half_up', 'wrap_longitude_delta'
]


def normalize_bearing(degrees: float) -> float:
    """
    Reduces an angle in degrees to the [0, 360) bearing convention.

    Args:
        degrees:
            Any finite angle, in degrees

    Returns:
        float
    """
    bearing = degrees % 360
    # -1e-17 % 360 rounds up to exactly 360
    return 0.0 if bearing == 360 else bearing


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def wrap_longitude_delta(delta: float) -> float:
    """Brings a longitude difference (degrees) into [-180, 180] by a single turn"""
    if delta > 180:
        delta -= 360
    if delta < -180:
        delta += 360
    return delta
