from decimal import ROUND_HALF_UP, Decimal

TWO_PLACES = Decimal("0.01")


def format_minutes(minutes: int) -> str:
    if minutes < 0:
        raise ValueError("Minutes must be non-negative")

    hours, remainder = divmod(int(minutes), 60)

    if hours == 0:
        return f"{remainder}m"

    if remainder == 0:
        return f"{hours}h"

    return f"{hours}h {remainder}m"


def format_percent(successes: int, total: int) -> str:
    if total == 0:
        return "--%"

    # exact binary value of the float, ties rounded up
    percent = Decimal(successes / total * 100).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)

    return f"{percent}%"
