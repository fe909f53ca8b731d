"""Validation of the ``minSubscribers`` / ``maxSubscribers`` query parameters."""
import math
import re

from pydantic import BaseModel

MAX_ALLOWED_SUBSCRIBERS = 10_000

DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?|[+-]?Infinity")
RADIX_PATTERN = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


class InvalidQueryParameterError(ValueError):
    pass


class SubscriberBounds(BaseModel):
    min_subscribers: int = 0
    max_subscribers: int = MAX_ALLOWED_SUBSCRIBERS


def parse_bound(value: str | None, fallback: int) -> int:
    if value is None or value.strip() == "":
        return fallback
    text = value.strip()
    if RADIX_PATTERN.fullmatch(text):
        num = int(text, 0)
    elif DECIMAL_PATTERN.fullmatch(text):
        num = float(text)
    else:
        raise InvalidQueryParameterError("Invalid numeric parameter")
    if not math.isfinite(num) or num < 0:
        raise InvalidQueryParameterError("Invalid numeric parameter")
    return math.floor(num)


def resolve_subscriber_bounds(min_value: str | None, max_value: str | None) -> SubscriberBounds:
    """Parse both bounds.

    A lower bound above MAX_ALLOWED_SUBSCRIBERS is rejected while an upper
    bound above it is clamped.
    """
    min_subscribers = parse_bound(min_value, 0)
    max_subscribers = parse_bound(max_value, MAX_ALLOWED_SUBSCRIBERS)

    if min_subscribers > MAX_ALLOWED_SUBSCRIBERS:
        raise InvalidQueryParameterError(
            f"minSubscribers must be less than or equal to {MAX_ALLOWED_SUBSCRIBERS}"
        )

    if max_subscribers > MAX_ALLOWED_SUBSCRIBERS:
        max_subscribers = MAX_ALLOWED_SUBSCRIBERS

    if min_subscribers > max_subscribers:
        raise InvalidQueryParameterError(
            "minSubscribers must be less than or equal to maxSubscribers"
        )

    return SubscriberBounds(min_subscribers=min_subscribers, max_subscribers=max_subscribers)
