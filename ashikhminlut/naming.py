from __future__ import annotations

import math
from pathlib import Path
from typing import Union

import panda3d.core as p3d


DEFAULT_BASE_NAME = 'halfVectorSampling'
LUT_EXTENSION = 'png'


class ShininessParseError(ValueError):
    pass


def parse_shininess(text: str) -> float:
    try:
        value = float(text.strip())
    except ValueError as exc:
        raise ShininessParseError(f'could not parse shininess from {text!r}') from exc

    if not math.isfinite(value):
        raise ShininessParseError(f'shininess must be finite, got {text!r}')

    return value


def format_shininess(value: float) -> str:
    '''Render a shininess for a filename: 3.0 -> "3", 0.25 -> "0.25"'''
    text = f'{value:f}'
    return text.rstrip('0').rstrip('.')


def output_filename(base_name: str, nu: float, nv: float, index: int = 0) -> str:
    shininess = f'[{format_shininess(nu)},{format_shininess(nv)}]'
    if index:
        return f'{base_name} {shininess} {index}.{LUT_EXTENSION}'
    return f'{base_name} {shininess}.{LUT_EXTENSION}'


def find_free_path(
    directory: Union[p3d.Filename, Path, str],
    base_name: str,
    nu: float,
    nv: float
) -> p3d.Filename:
    '''Return the first LUT path in directory that does not exist yet'''
    if isinstance(directory, Path):
        directory = p3d.Filename(directory)

    if not isinstance(directory, p3d.Filename):
        directory = p3d.Filename.from_os_specific(directory)

    index = 0
    path = p3d.Filename(directory, output_filename(base_name, nu, nv))
    while path.exists():
        index += 1
        path = p3d.Filename(directory, output_filename(base_name, nu, nv, index))

    return path
