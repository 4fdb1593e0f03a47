"""Number and time formatting for display."""


def pretty_number(num: int) -> str:
    """
    Shorten large counts with a suffix.

    Examples:
        9999 -> "9999"
        12500 -> "12.50k"
        2500000 -> "2.50m"
    """
    if num >= 1_000_000_000:
        return f"{num / 1_000_000_000:.2f}b"
    if num >= 1_000_000:
        return f"{num / 1_000_000:.2f}m"
    if num >= 10_000:
        return f"{num / 1_000:.2f}k"
    return str(num)


def format_duration(seconds: float) -> str:
    """
    Render simulated time using its two largest units.

    Examples:
        45 -> "45s"
        100 -> "1m 40s"
        3661 -> "1h 01m"
        604800 -> "7d 00h"
    """
    total = int(seconds)
    days, rest = divmod(total, 86_400)
    hours, rest = divmod(rest, 3_600)
    minutes, secs = divmod(rest, 60)

    if days:
        return f"{days}d {hours:02d}h"
    if hours:
        return f"{hours}h {minutes:02d}m"
    if minutes:
        return f"{minutes}m {secs:02d}s"
    return f"{secs}s"
