"""
JSON <-> YAML transcoding.

Both directions go through the plain Python value tree (None, bool, int,
float, str, list, dict) produced by the standard parsers. YAML input is
loaded with ``yaml.safe_load`` only; no arbitrary object construction.
"""

import datetime
import json
import math

import yaml

from fileconv.core.errors import ParseError, SerializeError

__all__ = ["json_to_yaml", "yaml_to_json"]


def _reject_constant(name: str):
    # json.loads accepts NaN/Infinity/-Infinity, which are not JSON
    raise ValueError(f"Non-standard JSON constant: {name}")


def json_to_yaml(text: str) -> str:
    """
    Convert a JSON document to YAML.

    Args:
        text: JSON source text

    Returns:
        YAML text in block style with the original key order

    Raises:
        ParseError: If the text is not well-formed JSON
        SerializeError: If the YAML emitter rejects the value
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise ParseError(f"Invalid JSON: {e}") from e

    try:
        return yaml.safe_dump(
            data,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
    except yaml.YAMLError as e:
        raise SerializeError(f"Cannot serialize to YAML: {e}") from e
    except RecursionError as e:
        raise SerializeError("Cannot serialize to YAML: value is nested too deeply") from e


def _to_json_value(value, path: str, ancestors: frozenset):
    """Validate a loaded YAML value for JSON output, converting timestamps."""
    if isinstance(value, (dict, list)):
        if id(value) in ancestors:
            raise ParseError(f"Cyclic alias reference at {path}")
        ancestors = ancestors | {id(value)}

        if isinstance(value, dict):
            result = {}
            for key, item in value.items():
                if not isinstance(key, str):
                    raise SerializeError(
                        f"Mapping key {key!r} at {path} is not a string"
                    )
                result[key] = _to_json_value(item, f"{path}.{key}", ancestors)
            return result

        return [
            _to_json_value(item, f"{path}[{index}]", ancestors)
            for index, item in enumerate(value)
        ]

    # datetime is a subclass of date
    if isinstance(value, datetime.date):
        return value.isoformat()

    if isinstance(value, float) and not math.isfinite(value):
        raise SerializeError(f"Value {value!r} at {path} is not representable in JSON")

    if value is None or isinstance(value, (bool, int, float, str)):
        return value

    raise SerializeError(
        f"Value of type {type(value).__name__} at {path} has no JSON equivalent"
    )


def yaml_to_json(text: str) -> str:
    """
    Convert a single YAML document to pretty-printed JSON.

    The whole conversion fails on the first value JSON cannot hold
    (non-string keys, NaN/Infinity, binary, sets); nothing is coerced
    or dropped. Timestamps become ISO-8601 strings.

    Args:
        text: YAML source text

    Returns:
        JSON text indented by two spaces, without a trailing newline

    Raises:
        ParseError: On malformed YAML, multiple documents or cyclic aliases
        SerializeError: If a value has no JSON representation
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid YAML: {e}") from e
    except RecursionError as e:
        raise ParseError("Invalid YAML: document is nested too deeply") from e

    try:
        data = _to_json_value(data, "$", frozenset())
    except RecursionError as e:
        raise SerializeError("Cannot serialize to JSON: value is nested too deeply") from e

    try:
        return json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializeError(f"Cannot serialize to JSON: {e}") from e
