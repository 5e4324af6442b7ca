from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import struct
import time
import typing
from typing import Union
from typing_extensions import (
    TypeAlias,
)

import panda3d.core as p3d

from . import logging
from .config import add_prc_fields
from ._quantize import (
    dequantize_texel,
    in_range,
    quantize_sample,
)
from ._sampling import (
    sample_half_vector,
    texel_coords,
    validate_shininess,
)


FilenameType: TypeAlias = Union[p3d.Filename, Path, str]

DEFAULT_LUT_SIZE = 512
PIXEL_SIZE = 4


@dataclass(frozen=True)
@add_prc_fields
class LutConfig:
    '''Parameters for a single half-vector LUT bake

    ``size`` falls back to the ``ashikhminlut-size`` PRC variable.
    '''
    shininess_u: float
    shininess_v: float
    size: int = DEFAULT_LUT_SIZE

    def __post_init__(self) -> None:
        validate_shininess(self.shininess_u, self.shininess_v)
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ValueError(f'LUT size must be an integer, got {self.size!r}')
        if self.size <= 0:
            raise ValueError(f'LUT size must be positive, got {self.size}')


def _to_filename(filename: FilenameType) -> p3d.Filename:
    if isinstance(filename, Path):
        filename = p3d.Filename(filename)

    if not isinstance(filename, p3d.Filename):
        filename = p3d.Filename.from_os_specific(filename)

    return filename


def _check_buffer(buffer: bytearray, size: int) -> None:
    expected = size * size * PIXEL_SIZE
    if len(buffer) != expected:
        raise ValueError(
            f'buffer holds {len(buffer)} bytes, expected {expected} for a {size}x{size} LUT'
        )


def gen_half_vector_buffer(config: LutConfig) -> bytearray:
    '''Bake the Ashikhmin-Shirley half-vector distribution into RGBA bytes

    Rows are stored top to bottom, so row 0 holds v close to 1. RGB is the
    quantized half-vector and A the density cos(theta)^exponent without the
    normalization constant (see ``normalization_constant()``). The alpha
    byte is never 0.
    '''
    size = config.size
    nu = config.shininess_u
    nv = config.shininess_v
    buffer = bytearray(size * size * PIXEL_SIZE)

    clamped = 0
    starttime = time.perf_counter()
    for ycoord in range(size):
        for xcoord in range(size):
            u, v = texel_coords(xcoord, ycoord, size)
            sample = sample_half_vector(u, v, nu, nv)
            if not all(in_range(i) for i in sample):
                clamped += 1
            offset = (ycoord * size + xcoord) * PIXEL_SIZE
            struct.pack_into('BBBB', buffer, offset, *quantize_sample(sample))

    tottime = (time.perf_counter() - starttime) * 1000
    logging.info(
        f'Half-vector LUT [{nu},{nv}] of size {size} '
        f'calculated in {tottime:.3f}ms'
    )
    if clamped:
        logging.warning(
            f'{clamped} of {size * size} texels had values outside [-1, 1] '
            f'and were clamped, the pdf exceeds 1 for shininess below 0'
        )

    return buffer


def decode_texel(
    buffer: bytearray,
    size: int,
    xcoord: int,
    ycoord: int
) -> tuple[float, float, float, float]:
    offset = (ycoord * size + xcoord) * PIXEL_SIZE
    red, green, blue, alpha = buffer[offset:offset + PIXEL_SIZE]
    return dequantize_texel((red, green, blue, alpha))


def make_texture(buffer: bytearray, size: int, name: str = 'half_vector_lut') -> p3d.Texture:
    _check_buffer(buffer, size)

    lut = p3d.Texture(name)
    lut.setup_2d_texture(size, size, p3d.Texture.T_unsigned_byte, p3d.Texture.F_rgba8)
    lut.wrap_u = p3d.SamplerState.WM_clamp
    lut.wrap_v = p3d.SamplerState.WM_clamp
    # Neighboring texels may sit on opposite sides of the phi seam
    lut.minfilter = p3d.SamplerState.FT_nearest
    lut.magfilter = p3d.SamplerState.FT_nearest

    handle = typing.cast(memoryview, lut.modify_ram_image())
    pixelsize = lut.component_width * lut.num_components

    # Panda stores rows bottom to top with BGRA components
    for ycoord in range(size):
        texrow = size - ycoord - 1
        for xcoord in range(size):
            src = (ycoord * size + xcoord) * PIXEL_SIZE
            red, green, blue, alpha = buffer[src:src + PIXEL_SIZE]
            idx = (texrow * size + xcoord) * pixelsize
            struct.pack_into('BBBB', handle, idx, blue, green, red, alpha)

    return lut


def gen_half_vector_lut(config: LutConfig) -> p3d.Texture:
    buffer = gen_half_vector_buffer(config)
    return make_texture(
        buffer,
        config.size,
        name=f'half_vector_lut_{config.shininess_u}_{config.shininess_v}'
    )


def write_png(buffer: bytearray, size: int, filename: FilenameType) -> None:
    _check_buffer(buffer, size)
    path = _to_filename(filename)

    image = p3d.PNMImage(size, size, 4, 255)
    for ycoord in range(size):
        for xcoord in range(size):
            offset = (ycoord * size + xcoord) * PIXEL_SIZE
            red, green, blue, alpha = buffer[offset:offset + PIXEL_SIZE]
            image.set_xel_val(xcoord, ycoord, red, green, blue)
            image.set_alpha_val(xcoord, ycoord, alpha)

    if not image.write(path):
        raise RuntimeError(f'Failed to write {path}')
    logging.debug(f'Wrote half-vector LUT to {path}')


def read_png(filename: FilenameType) -> tuple[bytearray, int]:
    path = _to_filename(filename)
    if not path.is_regular_file():
        raise RuntimeError(f'Failed to find file {path}')

    image = p3d.PNMImage()
    if not image.read(path):
        raise RuntimeError(f'Failed to read {path}')

    xsize, ysize = image.get_size()
    if xsize != ysize:
        raise RuntimeError(f'{path} is using unsupported, non-square dimensions')
    if not image.has_alpha():
        raise RuntimeError(f'{path} has no alpha channel to hold the pdf')
    if image.get_maxval() != 255:
        raise RuntimeError(f'{path} is not an 8-bit image')

    size = xsize
    buffer = bytearray(size * size * PIXEL_SIZE)
    for ycoord in range(size):
        for xcoord in range(size):
            offset = (ycoord * size + xcoord) * PIXEL_SIZE
            struct.pack_into(
                'BBBB', buffer, offset,
                image.get_red_val(xcoord, ycoord),
                image.get_green_val(xcoord, ycoord),
                image.get_blue_val(xcoord, ycoord),
                image.get_alpha_val(xcoord, ycoord),
            )

    return buffer, size


def load_half_vector_lut(filename: FilenameType) -> p3d.Texture:
    '''Load a baked LUT image from the model path as a texture'''
    path = _to_filename(filename)
    vfs = p3d.VirtualFileSystem.get_global_ptr()
    failed = (
        not vfs.resolve_filename(path, p3d.get_model_path().value)
        or not path.is_regular_file()
    )
    if failed:
        raise RuntimeError(f'Failed to find file {filename}')

    buffer, size = read_png(path)
    return make_texture(buffer, size, name=path.get_basename_wo_extension())
