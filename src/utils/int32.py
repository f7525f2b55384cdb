from __future__ import annotations

import numpy as np

_INFO = np.iinfo(np.int32)

INT32_MIN = int(_INFO.min)
INT32_MAX = int(_INFO.max)


def is_int32(value) -> bool:
    """True если value — целое (не bool) в диапазоне int32."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, (int, np.integer)):
        return False
    return INT32_MIN <= int(value) <= INT32_MAX


def as_int32(value) -> int:
    """
    Привести значение к int32 и вернуть обычный Python int.

    Допускаются int и целые скаляры numpy.
    bool и нецелые типы -> TypeError, выход за диапазон -> OverflowError.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"Ожидалось целое int32, получено {type(value).__name__}")
    v = int(value)
    if v < INT32_MIN or v > INT32_MAX:
        raise OverflowError(f"{v} вне диапазона int32 [{INT32_MIN}, {INT32_MAX}]")
    return v
