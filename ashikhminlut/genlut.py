#!/usr/bin/env python
from __future__ import annotations

import argparse
from dataclasses import dataclass
import sys
from typing import (
    Callable,
    Optional,
    TextIO,
)

import panda3d.core as p3d

from . import logging
from .config import add_prc_fields
from .lut import (
    LutConfig,
    gen_half_vector_buffer,
    write_png,
)
from .naming import (
    DEFAULT_BASE_NAME,
    ShininessParseError,
    find_free_path,
    parse_shininess,
)


@dataclass
@add_prc_fields
class OutputConfig:
    base_name: str = DEFAULT_BASE_NAME
    output_dir: str = '.'


def prompt_shininess(
    label: str,
    *,
    read: Optional[Callable[[str], str]] = None,
    out: Optional[TextIO] = None,
) -> float:
    '''Ask for a shininess value until one parses'''
    if read is None:
        read = input
    if out is None:
        out = sys.stdout

    while True:
        try:
            return parse_shininess(read(f'Insert value for {label}: '))
        except ShininessParseError:
            print('Invalid input; please re-enter.', file=out)


def _shininess_arg(text: str) -> float:
    try:
        return parse_shininess(text)
    except ShininessParseError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def make_parser() -> argparse.ArgumentParser:
    outconfig = OutputConfig()

    parser = argparse.ArgumentParser(
        description='CLI tool to bake an Ashikhmin-Shirley half-vector sampling LUT to a PNG',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        'nu',
        type=_shininess_arg,
        nargs='?',
        help='shininess along the tangent, prompted for if omitted'
    )
    parser.add_argument(
        'nv',
        type=_shininess_arg,
        nargs='?',
        help='shininess along the bitangent, prompted for if omitted'
    )
    parser.add_argument(
        '--size',
        type=int,
        help='the size to use for both dimensions of the LUT (defaults to ashikhminlut-size)',
        default=None
    )
    parser.add_argument(
        '--output-dir',
        type=str,
        help='directory to write the LUT to',
        default=outconfig.output_dir
    )
    parser.add_argument(
        '--base-name',
        type=str,
        help='file name prefix, shininess values are appended',
        default=outconfig.base_name
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true'
    )

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = make_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        p3d.load_prc_file_data('', 'notify-level-ashikhminlut debug')
        logging.set_verbose(True)

    nu = args.nu if args.nu is not None else prompt_shininess('nU')
    nv = args.nv if args.nv is not None else prompt_shininess('nV')

    try:
        if args.size is None:
            config = LutConfig(nu, nv)
        else:
            config = LutConfig(nu, nv, size=args.size)
    except ValueError as exc:
        parser.error(str(exc))

    outpath = find_free_path(args.output_dir, args.base_name, nu, nv)
    logging.debug(f'Baking {config} to {outpath}')

    buffer = gen_half_vector_buffer(config)
    write_png(buffer, config.size, outpath)

    print(outpath.to_os_specific())


if __name__ == '__main__':
    main()
