from __future__ import annotations

import math
from typing_extensions import (
    TypeAlias,
)

RGBATupleType: TypeAlias = 'tuple[int, int, int, int]'
Vec4TupleType: TypeAlias = 'tuple[float, float, float, float]'


def _raw_byte(value: float) -> int:
    return math.floor(value * 127.5 + 127.5)


def in_range(value: float) -> bool:
    '''True if value quantizes without clamping'''
    return 0 <= _raw_byte(value) <= 255


def quantize(value: float) -> int:
    '''Map a value in [-1, 1] to a byte in [0, 255], clamping outliers'''
    return min(max(_raw_byte(value), 0), 255)


def dequantize(byte: int) -> float:
    return byte / 127.5 - 1.0


def quantize_sample(sample: Vec4TupleType) -> RGBATupleType:
    red, green, blue, alpha = (quantize(i) for i in sample)

    # Consumers divide by the stored pdf
    if alpha == 0:
        alpha = 1

    return (red, green, blue, alpha)


def dequantize_texel(texel: RGBATupleType) -> Vec4TupleType:
    red, green, blue, alpha = texel
    return (
        dequantize(red),
        dequantize(green),
        dequantize(blue),
        dequantize(alpha),
    )
