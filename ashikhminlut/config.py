from __future__ import annotations

from dataclasses import (
    field,
    Field,
    MISSING,
)
import functools
from typing_extensions import (
    Any,
    TypeVar,
)

import panda3d.core as p3d


PRC_PREFIX = 'ashikhminlut'


def prc_name(attrname: str) -> str:
    return f'{PRC_PREFIX}-{attrname.replace("_", "-")}'


TypeT = TypeVar('TypeT', bound=type)
def add_prc_fields(cls: TypeT) -> TypeT:
    '''Give every defaulted field a PRC variable that can override the default

    A field ``size: int = 512`` becomes backed by ``ashikhminlut-size``. The
    variable is read when an instance is created, not at import time.
    '''
    prc_types = {
        'int': p3d.ConfigVariableInt,
        'bool': p3d.ConfigVariableBool,
        'float': p3d.ConfigVariableDouble,
        'str': p3d.ConfigVariableString,
    }

    def factoryfn(attrname: str, attrtype: str, default_value: Any) -> Any:
        if isinstance(default_value, Field):
            if default_value.default_factory is not MISSING:
                default_value = default_value.default_factory()
            elif default_value.default is not MISSING:
                default_value = default_value.default
        return prc_types[attrtype](
            name=prc_name(attrname),
            default_value=default_value,
        ).value

    annotations = cls.__dict__.get('__annotations__', {})
    for attrname, attrtype in annotations.items():
        if attrname.startswith('_') or not hasattr(cls, attrname):
            # Private or required member, skip
            continue

        if attrtype not in prc_types:
            continue

        default_value = getattr(cls, attrname)
        # pylint:disable-next=invalid-field-call
        setattr(cls, attrname, field(
            default_factory=functools.partial(factoryfn, attrname, attrtype, default_value)
        ))
    return cls
