from __future__ import annotations

from .lut import (
    LutConfig,
    decode_texel,
    gen_half_vector_buffer,
    gen_half_vector_lut,
    load_half_vector_lut,
    make_texture,
    read_png,
    write_png,
)
from ._sampling import (
    InvalidShininessError,
    cos_theta,
    directional_exponent,
    normalization_constant,
    partial_phi,
    phi,
    sample_half_vector,
    texel_coords,
)
from ._quantize import (
    dequantize,
    quantize,
    quantize_sample,
)
from .naming import (
    ShininessParseError,
    find_free_path,
    format_shininess,
    output_filename,
    parse_shininess,
)
from . import logging


__all__ = [
    'LutConfig',
    'InvalidShininessError',
    'ShininessParseError',
    'gen_half_vector_buffer',
    'gen_half_vector_lut',
    'load_half_vector_lut',
    'make_texture',
    'read_png',
    'write_png',
    'decode_texel',
    'cos_theta',
    'directional_exponent',
    'normalization_constant',
    'partial_phi',
    'phi',
    'sample_half_vector',
    'texel_coords',
    'dequantize',
    'quantize',
    'quantize_sample',
    'find_free_path',
    'format_shininess',
    'output_filename',
    'parse_shininess',
    'logging',
]
