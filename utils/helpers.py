"""
Helper utility functions for the simulator
"""


def clamp(value, min_value, max_value):
    """
    Clamp a value between min and max.

    Args:
        value: Value to clamp
        min_value: Minimum value
        max_value: Maximum value

    Returns:
        float: Clamped value
    """
    return max(min_value, min(max_value, value))


def ns_to_seconds(nanoseconds):
    return nanoseconds * 1e-9
