"""Human-readable formatting of speed and per-interaction time."""


def format_hertz(hertz: float) -> str:
    """Format interactions per second.

    Args:
        hertz: Speed in Hz

    Returns:
        4 decimals above 1 Hz, 8 decimals down to 0.00001 Hz, raw value below
    """
    if hertz > 1:
        return f"{hertz:.4f} Hz"
    if hertz > 0.00001:
        return f"{hertz:.8f} Hz"
    return f"{hertz} Hz"


def format_interaction_time(ms: float) -> str:
    """Format the time of a single interaction, picking sec, ms or µs.

    Args:
        ms: Time per interaction in milliseconds

    Returns:
        Formatted string with unit suffix
    """
    if ms >= 2000:
        return f"{ms / 1000:.3f} sec"
    if ms > 1000:
        return f"{ms / 1000:.6f} sec"
    if ms >= 1:
        return f"{ms:.3f} ms"
    micros = ms * 1000
    if micros >= 100:
        return f"{micros:.3f} µs"
    return f"{micros:.6f} µs"
