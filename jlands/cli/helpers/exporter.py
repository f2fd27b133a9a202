import datetime
from decimal import Decimal
from json import dumps
from typing import Any, Optional, Type

import yaml
from pydantic import BaseModel


class ConversionError(RuntimeError):
    """ Raised when the data conversion fails """


def normalize(content: Any, map_decimal: Type = str, sort_keys: bool = True) -> Any:
    """
    Normalize the content for data export

    .. note:: This is not designed for two-way data conversion.
    """
    if isinstance(content, Decimal):
        return map_decimal(content)
    elif isinstance(content, BaseModel):
        return normalize(content.model_dump(), map_decimal=map_decimal, sort_keys=sort_keys)
    elif isinstance(content, dict):
        # Handle a dictionary
        DEFAULT_WEIGHT = 99999
        FIXED_WEIGHTS = {
            'index': 0,
            'id': 1,
            'name': 2,
        }

        properties = (
            sorted(content.keys(),
                   key=lambda k: f'{FIXED_WEIGHTS.get(k) if k in FIXED_WEIGHTS else DEFAULT_WEIGHT:0>8}//{k}')
            if sort_keys
            else list(content.keys())
        )

        return {
            p_name: normalize(content[p_name], map_decimal=map_decimal, sort_keys=sort_keys)
            for p_name in properties
        }
    elif isinstance(content, (tuple, list, set)):
        return [normalize(i, map_decimal=map_decimal, sort_keys=sort_keys) for i in content]
    elif isinstance(content, (datetime.datetime, datetime.date, datetime.time)):
        return content.isoformat()
    else:
        return content


def to_json(content: Any, indent: Optional[int] = 2):
    try:
        return dumps(content, indent=indent)
    except Exception as e:
        raise ConversionError(f'Failed to convert:\n\n{content}\n\nas JSON string') from e


def to_yaml(content: Any, indent: Optional[int] = 2):
    try:
        return yaml.dump(content, Dumper=yaml.SafeDumper, indent=indent, sort_keys=False)
    except Exception as e:
        raise ConversionError(f'Failed to convert:\n\n{content}\n\nas YAML string') from e
