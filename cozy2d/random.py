"""A small seedable PCG random generator and helpers built on it."""

from __future__ import annotations

import math
import struct
import threading
from typing import Iterator, MutableSequence, Optional, Sequence, TypeVar, Union

from cozy2d.primitives import Vec2

T = TypeVar("T")
Number = Union[int, float]

_DEFAULT_INC = 1442695040888963407
_MULTIPLIER = 6364136223846793005
_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1

_state = 0
_lock = threading.Lock()


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


_U32_MAX_F32 = _f32(float(_MASK32))


def _step() -> int:
    global _state
    old = _state
    _state = (old * _MULTIPLIER + _DEFAULT_INC) & _MASK64
    xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
    rot = old >> 59
    return ((xorshifted >> rot) | (xorshifted << ((32 - rot) & 31))) & _MASK32


def srand(seed: int) -> None:
    """Seed the generator used by :func:`rand`."""
    global _state
    with _lock:
        _state = 0
        _step()
        _state = (_state + seed) & _MASK64
        _step()


def rand() -> int:
    """Return a pseudo-random integer from 0 to 2**32 - 1."""
    with _lock:
        return _step()


def _unit() -> float:
    return _f32(_f32(float(rand())) / _U32_MAX_F32)


def gen_range(low: Number, high: Number) -> Number:
    """Return a value between ``low`` and ``high``.

    Integer bounds give an integer (computed in single precision and
    truncated); any float bound gives a float.
    """
    r = _unit()
    ints = (
        isinstance(low, int)
        and isinstance(high, int)
        and not isinstance(low, bool)
        and not isinstance(high, bool)
    )
    if ints:
        lo = _f32(float(low))
        hi = _f32(float(high))
        value = _f32(lo + _f32(_f32(hi - lo) * r))
        return int(value)
    return low + (high - low) * r


class FisherYates:
    """In-place Fisher-Yates shuffle driven by the module generator."""

    _WORD_BYTES = 8

    def __init__(self) -> None:
        self._buffer = bytearray(self._WORD_BYTES)

    def shuffle(self, data: MutableSequence[T]) -> None:
        for i in range(1, len(data)):
            j = self._gen_range(i)
            data[i], data[j] = data[j], data[i]

    def _gen_range(self, top: int) -> int:
        bit_width = top.bit_length()
        byte_count = (bit_width - 1) // 8 + 1
        mask = (1 << bit_width) - 1
        while True:
            for i in range(byte_count):
                self._buffer[i] = gen_range(0, 255) & 0xFF
            result = int.from_bytes(self._buffer, "little") & mask
            if result < top:
                return result


def shuffle(data: MutableSequence[T]) -> None:
    """Shuffle ``data`` in place."""
    FisherYates().shuffle(data)


def choose(seq: Sequence[T]) -> Optional[T]:
    """Pick a random element, or ``None`` when none was picked."""
    ix = gen_range(0, len(seq))
    return seq[ix] if 0 <= ix < len(seq) else None


def choose_multiple(seq: Sequence[T], amount: int) -> Iterator[T]:
    """Yield ``amount`` elements picked without repetition.

    When ``amount`` exceeds the length of ``seq`` the remainder repeats the
    first element.
    """
    indices = list(range(len(seq)))
    shuffle(indices)
    indices = indices[:amount] + [0] * max(0, amount - len(indices))
    return (seq[ix] for ix in indices)


def random_i32(low: int, high: int) -> int:
    return gen_range(int(low), int(high))


def random_usize(low: int, high: int) -> int:
    return gen_range(int(low), int(high))


def toss_coin(p: float) -> bool:
    """Return ``True`` with probability ``p``."""
    return gen_range(0.0, 1.0) < p


def flip_coin(p: float) -> bool:
    return toss_coin(p)


def coin_toss(p: float) -> bool:
    return toss_coin(p)


def random_angle() -> float:
    return gen_range(0.0, 2.0 * math.pi)


def random_range(low: float, high: float) -> float:
    return gen_range(float(low), float(high))


def random_dir() -> Vec2:
    """A random unit vector."""
    angle = gen_range(0.0, math.pi * 2.0)
    return Vec2(math.cos(angle), math.sin(angle))


def random_vec(low: float, high: float) -> Vec2:
    direction = random_dir()
    return direction * gen_range(float(low), float(high))


def random_offset(radius: float) -> Vec2:
    direction = random_dir()
    return direction * gen_range(0.0, float(radius))


def random_circle(radius: float) -> Vec2:
    return random_offset(radius)


def random_box(center: Vec2, size: Vec2) -> Vec2:
    dx = gen_range(-float(size.x), float(size.x)) / 2.0
    dy = gen_range(-float(size.y), float(size.y)) / 2.0
    return center + Vec2(dx, dy)


def random_around(position: Vec2, low: float, high: float) -> Vec2:
    return position + random_vec(low, high)


def random() -> float:
    return gen_range(0.0, 1.0)