"""
Utility functions for the Xelon SDK package.

Models are plain dataclasses whose fields carry their wire names in field
metadata (see :func:`api_field` and :func:`query_field`). The helpers below
use that metadata to translate between API payloads and model instances, and
to turn list options into query strings.
"""

import dataclasses
import datetime
import re
import typing
from typing import Any, Dict, List, Optional, Tuple, Type
from urllib.parse import unquote_plus, urlencode, urlsplit, urlunsplit

from .logging import get_logger
from .exceptions import XelonDataError, XelonEncodingError

logger = get_logger(__name__)

API_FIELD = "xelon_api_field"
QUERY_FIELD = "xelon_query_field"
OMIT_EMPTY = "xelon_omitempty"

REDACTED = "REDACTED"

_PASSWORD_IN_TEXT = re.compile(r"([?&]password=)[^&\s'\"#)]*")


def api_field(
    name: str,
    default: Any = dataclasses.MISSING,
    *,
    omitempty: bool = False,
    default_factory: Any = dataclasses.MISSING,
) -> Any:
    """
    Declare a dataclass field that is serialized under the API name ``name``.

    Fields marked ``omitempty`` are left out of encoded payloads when they hold
    an empty value (``None``, ``""``, ``0``, ``False``, empty list or dict) and
    default to ``None`` unless another default is given.
    """
    if omitempty and default is dataclasses.MISSING and default_factory is dataclasses.MISSING:
        default = None
    metadata = {API_FIELD: name, OMIT_EMPTY: omitempty}
    if default_factory is not dataclasses.MISSING:
        return dataclasses.field(default_factory=default_factory, metadata=metadata)
    return dataclasses.field(default=default, metadata=metadata)


def query_field(name: str, default: Any = None, *, omitempty: bool = True) -> Any:
    """Declare a list-options field that is sent as the query parameter ``name``."""
    return dataclasses.field(
        default=default, metadata={QUERY_FIELD: name, OMIT_EMPTY: omitempty}
    )


def is_empty(value: Any) -> bool:
    """Return True for the values an ``omitempty`` field leaves out."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict)):
        return len(value) == 0
    if isinstance(value, (bool, int, float)):
        return not value
    return False


def get_api_field_mapping(model_class: Type) -> Dict[str, str]:
    """
    Create a mapping between API field names and model attribute names.

    Examines dataclass fields with metadata to find mappings between
    API field names (like 'displayName') and Python attribute names (like 'display_name').

    Args:
        model_class: The dataclass model to examine for field mappings

    Returns:
        Dictionary mapping Xelon API field names to Python model attribute names
    """
    if not dataclasses.is_dataclass(model_class):
        return {}

    field_mapping = {}

    for field in dataclasses.fields(model_class):
        if API_FIELD in field.metadata:
            field_mapping[field.metadata[API_FIELD]] = field.name

    return field_mapping


def map_api_data_to_model(
    data: Dict[str, Any], model_class: Type
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Maps API data to model fields, separating model fields from extra fields.

    Args:
        data: Input dictionary from API response
        model_class: The dataclass model to map data to

    Returns:
        Tuple containing (model_fields, extra_fields) where:
            - model_fields: Dictionary of fields that map to the model's attributes
            - extra_fields: Dictionary of fields the model does not declare
    """
    valid_fields = {
        f.name: f
        for f in dataclasses.fields(model_class)
        if f.init and not f.name.startswith("_")
    }
    field_map = get_api_field_mapping(model_class)

    model_fields = {}
    extra_fields = {}

    for api_key, value in data.items():
        if api_key in field_map and field_map[api_key] in valid_fields:
            model_fields[field_map[api_key]] = value
        elif api_key in valid_fields and API_FIELD not in valid_fields[api_key].metadata:
            model_fields[api_key] = value
        else:
            extra_fields[api_key] = value

    return model_fields, extra_fields


def decode_model(model_class: Type, data: Any) -> Any:
    """
    Build a ``model_class`` instance from a decoded JSON object.

    Nested dataclasses, lists and dicts are decoded according to the field
    annotations. Undeclared keys end up in ``_extra_fields`` when the model has
    such a field, and are dropped otherwise.

    Raises:
        XelonDataError: If ``data`` is not a JSON object.
    """
    if not isinstance(data, dict):
        raise XelonDataError(
            f"Expected a JSON object for {model_class.__name__}, got {type(data).__name__}"
        )

    hints = typing.get_type_hints(model_class)
    model_fields, extra_fields = map_api_data_to_model(data, model_class)

    kwargs = {
        name: decode_value(hints.get(name, Any), value)
        for name, value in model_fields.items()
    }
    if "_extra_fields" in {f.name for f in dataclasses.fields(model_class)}:
        kwargs["_extra_fields"] = extra_fields
    elif extra_fields:
        logger.debug(
            f"Ignoring undeclared fields for {model_class.__name__}: {sorted(extra_fields)}"
        )

    return model_class(**kwargs)


def decode_value(target_type: Any, value: Any) -> Any:
    """
    Decode a JSON value into ``target_type``.

    ``target_type`` may be a dataclass (a ``from_api`` classmethod takes
    precedence over the generic decoder), ``Optional[...]``, ``List[...]``,
    ``Dict[str, ...]``, ``Any`` or a primitive type, which is passed through.

    Raises:
        XelonDataError: If the JSON shape does not fit the target type.
    """
    if value is None or target_type is Any:
        return value

    origin = typing.get_origin(target_type)
    args = typing.get_args(target_type)

    if origin is typing.Union:
        candidates = [a for a in args if a is not type(None)]
        if len(candidates) == 1:
            return decode_value(candidates[0], value)
        return value

    if origin is list:
        if not isinstance(value, list):
            raise XelonDataError(f"Expected a JSON array, got {type(value).__name__}")
        item_type = args[0] if args else Any
        return [decode_value(item_type, item) for item in value]

    if origin is dict:
        if not isinstance(value, dict):
            raise XelonDataError(f"Expected a JSON object, got {type(value).__name__}")
        value_type = args[1] if len(args) == 2 else Any
        return {key: decode_value(value_type, item) for key, item in value.items()}

    if isinstance(target_type, type) and dataclasses.is_dataclass(target_type):
        hook = getattr(target_type, "from_api", None)
        if hook is not None:
            return hook(value)
        return decode_model(target_type, value)

    return value


def encode_model(obj: Any) -> Dict[str, Any]:
    """Encode a dataclass instance into a JSON-ready dict using its API field names."""
    payload = {}
    for field in dataclasses.fields(obj):
        api_name = field.metadata.get(API_FIELD)
        if api_name is None:
            continue
        value = getattr(obj, field.name)
        if field.metadata.get(OMIT_EMPTY) and is_empty(value):
            continue
        payload[api_name] = encode_value(value)
    return payload


def encode_value(value: Any) -> Any:
    """
    Encode a request body value into JSON-ready data.

    Dataclass instances go through their ``to_api`` method when they define
    one, or through :func:`encode_model` otherwise.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        hook = getattr(value, "to_api", None)
        if hook is not None:
            return hook()
        return encode_model(value)
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    if isinstance(value, dict):
        return {str(key): encode_value(item) for key, item in value.items()}
    if isinstance(value, (datetime.datetime, datetime.date)):
        return value.isoformat()
    return value


def _query_values(key: str, value: Any) -> List[str]:
    if value is None:
        return [""]
    if isinstance(value, bool):
        return ["true" if value else "false"]
    if isinstance(value, (str, int, float)):
        return [str(value)]
    if isinstance(value, (datetime.datetime, datetime.date)):
        return [value.isoformat()]
    if isinstance(value, (list, tuple)):
        values = []
        for item in value:
            values.extend(_query_values(key, item))
        return values
    raise XelonEncodingError(
        f"Unsupported type {type(value).__name__} for query parameter {key!r}"
    )


def encode_query(opts: Any) -> List[Tuple[str, str]]:
    """
    Collect the query parameters declared on a list-options dataclass.

    Dataclass-valued fields without query metadata (such as the shared
    ``pagination`` options) are flattened into the same parameter list.
    """
    pairs = []
    for field in dataclasses.fields(opts):
        value = getattr(opts, field.name)
        key = field.metadata.get(QUERY_FIELD)
        if key is None:
            if dataclasses.is_dataclass(value) and not isinstance(value, type):
                pairs.extend(encode_query(value))
            continue
        if field.metadata.get(OMIT_EMPTY, True) and is_empty(value):
            continue
        pairs.extend((key, item) for item in _query_values(key, value))
    return pairs


def add_options(path: str, opts: Any) -> str:
    """
    Add the parameters in ``opts`` as URL query parameters to ``path``.

    Args:
        path: Relative API path, e.g. ``"devices"``.
        opts: A list-options dataclass instance, or None.

    Returns:
        ``path`` unchanged when ``opts`` is None, otherwise ``path`` with its
        query replaced by the encoded options, keys in sorted order.

    Raises:
        XelonEncodingError: If ``path`` is not a valid URL or ``opts`` cannot be encoded.
    """
    if opts is None:
        return path

    if not dataclasses.is_dataclass(opts) or isinstance(opts, type):
        raise XelonEncodingError(
            f"Query options must be a dataclass instance, got {type(opts).__name__}"
        )

    try:
        parts = urlsplit(path)
    except ValueError as e:
        raise XelonEncodingError(f"Invalid path {path!r}: {e}") from e

    pairs = sorted(encode_query(opts), key=lambda pair: pair[0])
    return urlunsplit(parts._replace(query=urlencode(pairs)))


def sanitize_url(url: Optional[str]) -> Optional[str]:
    """
    Redact the ``password`` query parameter of ``url``.

    Every other query parameter is kept byte-for-byte and in its original
    position. Returns ``url`` unchanged when no ``password`` parameter is
    present, and None for None.
    """
    if url is None:
        return None

    try:
        parts = urlsplit(url)
    except ValueError:
        return sanitize_message(url)

    if not parts.query:
        return url

    redacted = False
    segments = []
    for segment in parts.query.split("&"):
        key = segment.split("=", 1)[0]
        if unquote_plus(key) == "password":
            segments.append(f"{key}={REDACTED}")
            redacted = True
        else:
            segments.append(segment)

    if not redacted:
        return url

    return urlunsplit(parts._replace(query="&".join(segments)))


def sanitize_message(text: str) -> str:
    """Redact ``password`` query values embedded anywhere in ``text``."""
    return _PASSWORD_IN_TEXT.sub(rf"\g<1>{REDACTED}", text)
