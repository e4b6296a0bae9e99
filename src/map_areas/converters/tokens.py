"""Numeric token coercion shared by the decoders."""

import math
from collections.abc import Sequence
from typing import Any


def to_int(token: Any) -> int | None:
    """Coerce a decoded token to an int, or None when it is not a finite integer."""
    if isinstance(token, bool):
        return None
    if isinstance(token, int):
        return token
    if isinstance(token, float):
        if math.isfinite(token) and token.is_integer():
            return int(token)
        return None
    if isinstance(token, str):
        try:
            return int(token.strip())
        except ValueError:
            return None
    return None


def to_ints(tokens: Sequence[Any]) -> list[int] | None:
    """Coerce every token; None if any one of them fails."""
    values = []
    for token in tokens:
        value = to_int(token)
        if value is None:
            return None
        values.append(value)
    return values
