"""
Formatting utilities for display.

Used by the service, the API and the CLI.
"""


def format_training_info(
    training_type: str,
    duration: float,
    distance_km: float,
    speed_kmh: float,
    calories: float,
) -> str:
    """
    Format a training summary as fixed-layout text.

    Consumers parse this output line by line, so label text,
    field order and 2-decimal formatting must stay as is.

    Returns:
        Multi-line string ending with a newline
    """
    return (
        f"Training type: {training_type}\n"
        f"Duration: {duration:.2f} h.\n"
        f"Distance: {distance_km:.2f} km.\n"
        f"Speed: {speed_kmh:.2f} km/h\n"
        f"Calories burned: {calories:.2f}\n"
    )
