"""
Structured-data marshaling

Encodes documents as plain dicts/lists/str/float/bool/None (JSON-compatible)
and decodes them back, keeping every Item/Value/Key variant and the
Array/Block distinction. Each variant is an externally tagged one-key dict:

    {"Pair": {"key": {"Identifier": "x"}, "op": "Eq", "value": {"Number": 1.0}}}
    {"Value": {"Identifier": "a"}}
    {"Comment": "# note"}
    {"Array": {"values": [{"Value": {"Number": 1.0}}, {"Comment": "# c"}]}}
    {"Block": {"items": [...]}}
    {"Date": {"y": 1936, "m": 1, "d": 1, "h": None}}

Localisation files use ``{"header": {"lang": ...}, "items": [...]}``.
"""
import json
import logging
from typing import Any, List

from ..errors import MarshalError
from ..models.ast import (
    Array, Block, Boolean, Comment, Date, Document, Identifier, Number, Operator, Pair, String,
)
from ..models.localisation import LocalisationFile, LocalisationPair

logger = logging.getLogger(__name__)

_OPERATOR_TAGS = {member: member.name.capitalize() for member in Operator}
_TAG_OPERATORS = {tag: member for member, tag in _OPERATOR_TAGS.items()}


# ---------- Encoding ----------


def _date_to_data(date: Date) -> dict:
    return {"y": date.year, "m": date.month, "d": date.day, "h": date.hour}


def key_to_data(key) -> dict:
    if isinstance(key, Identifier):
        return {"Identifier": key.name}
    if isinstance(key, Number):
        return {"Number": key.value}
    return {"Date": _date_to_data(key)}


def value_to_data(value) -> dict:
    if isinstance(value, Block):
        return {"Block": {"items": [item_to_data(item) for item in value.items]}}
    if isinstance(value, Array):
        return {"Array": {"values": [_entry_to_data(entry) for entry in value.values]}}
    if isinstance(value, String):
        return {"String": value.text}
    if isinstance(value, Identifier):
        return {"Identifier": value.name}
    if isinstance(value, Number):
        return {"Number": value.value}
    if isinstance(value, Boolean):
        return {"Boolean": value.value}
    if isinstance(value, Date):
        return {"Date": _date_to_data(value)}
    raise MarshalError(f"Not a value: {value!r}")


def _entry_to_data(entry) -> dict:
    if isinstance(entry, Comment):
        return {"Comment": entry.text}
    return {"Value": value_to_data(entry)}


def item_to_data(item) -> dict:
    if isinstance(item, Pair):
        return {"Pair": {
            "key": key_to_data(item.key),
            "op": _OPERATOR_TAGS[item.operator],
            "value": value_to_data(item.value),
        }}
    if isinstance(item, Comment):
        return {"Comment": item.text}
    return {"Value": value_to_data(item)}


def to_data(document: Document) -> List[dict]:
    """Encode a document as a list of tagged items"""
    return [item_to_data(item) for item in document]


# ---------- Decoding ----------


def _untag(data: Any, allowed) -> tuple:
    if not isinstance(data, dict) or len(data) != 1:
        raise MarshalError(f"Expected a single-key tagged object, got {data!r}")
    [(tag, body)] = data.items()
    if tag not in allowed:
        raise MarshalError(f"Unexpected tag {tag!r}, expected one of {sorted(allowed)}")
    return tag, body


def _require(condition: bool, message: str):
    if not condition:
        raise MarshalError(message)


def _date_from_data(body) -> Date:
    _require(isinstance(body, dict), f"Date must be an object, got {body!r}")
    try:
        year, month, day = int(body["y"]), int(body["m"]), int(body["d"])
        hour = body.get("h")
        if hour is not None:
            hour = int(hour)
    except (KeyError, TypeError, ValueError) as e:
        raise MarshalError(f"Invalid date {body!r}") from e
    return Date(year, month, day, hour)


def _text(body, tag: str) -> str:
    _require(isinstance(body, str), f"{tag} must be a string, got {body!r}")
    return body


def _number(body) -> float:
    _require(isinstance(body, (int, float)) and not isinstance(body, bool),
             f"Number must be numeric, got {body!r}")
    return float(body)


def key_from_data(data):
    tag, body = _untag(data, ("Identifier", "Number", "Date"))
    if tag == "Identifier":
        return Identifier(_text(body, tag))
    if tag == "Number":
        return Number(_number(body))
    return _date_from_data(body)


def value_from_data(data):
    tag, body = _untag(data, ("Block", "Array", "String", "Identifier", "Number", "Boolean", "Date"))
    if tag == "Block":
        _require(isinstance(body, dict) and isinstance(body.get("items"), list),
                 f"Block must hold an 'items' list, got {body!r}")
        return Block(tuple(item_from_data(item) for item in body["items"]))
    if tag == "Array":
        _require(isinstance(body, dict) and isinstance(body.get("values"), list),
                 f"Array must hold a 'values' list, got {body!r}")
        return Array(tuple(_entry_from_data(entry) for entry in body["values"]))
    if tag == "String":
        return String(_text(body, tag))
    if tag == "Identifier":
        return Identifier(_text(body, tag))
    if tag == "Number":
        return Number(_number(body))
    if tag == "Boolean":
        _require(isinstance(body, bool), f"Boolean must be true/false, got {body!r}")
        return Boolean(body)
    return _date_from_data(body)


def _entry_from_data(data):
    tag, body = _untag(data, ("Value", "Comment"))
    if tag == "Comment":
        return Comment(_text(body, tag))
    return value_from_data(body)


def _operator_from_data(tag) -> Operator:
    operator = _TAG_OPERATORS.get(tag)
    if operator is None:
        logger.warning("Unknown operator tag %r, treating it as Eq", tag)
        return Operator.EQ
    return operator


def item_from_data(data):
    tag, body = _untag(data, ("Pair", "Value", "Comment"))
    if tag == "Comment":
        return Comment(_text(body, tag))
    if tag == "Value":
        return value_from_data(body)

    _require(isinstance(body, dict), f"Pair must be an object, got {body!r}")
    try:
        key, op, value = body["key"], body["op"], body["value"]
    except KeyError as e:
        raise MarshalError(f"Pair is missing field {e}") from e
    return Pair(key_from_data(key), _operator_from_data(op), value_from_data(value))


def from_data(data) -> Document:
    """Decode a list of tagged items into a Document

    Raises:
        MarshalError: data does not describe a document
    """
    _require(isinstance(data, list), f"Document must be a list, got {type(data).__name__}")
    return Document(tuple(item_from_data(item) for item in data))


def to_json(document: Document, indent: int = 2) -> str:
    return json.dumps(to_data(document), ensure_ascii=False, indent=indent)


def from_json(text: str) -> Document:
    return from_data(json.loads(text))


# ---------- Localisation ----------


def localisation_to_data(loc: LocalisationFile) -> dict:
    items = []
    for item in loc.items:
        if isinstance(item, Comment):
            items.append({"Comment": item.text})
        else:
            items.append({"Pair": {"key": item.key, "version": item.version, "value": item.value}})
    return {"header": {"lang": loc.language}, "items": items}


def localisation_from_data(data) -> LocalisationFile:
    _require(isinstance(data, dict), f"Localisation file must be an object, got {data!r}")
    try:
        language = data["header"]["lang"]
        raw_items = data["items"]
    except (KeyError, TypeError) as e:
        raise MarshalError(f"Localisation file is missing {e}") from e
    _require(isinstance(raw_items, list), f"Localisation items must be a list, got {raw_items!r}")

    items = []
    for raw in raw_items:
        tag, body = _untag(raw, ("Pair", "Comment"))
        if tag == "Comment":
            items.append(Comment(_text(body, tag)))
            continue
        _require(isinstance(body, dict), f"Pair must be an object, got {body!r}")
        version = body.get("version")
        _require(version is None or (isinstance(version, int) and not isinstance(version, bool)),
                 f"Localisation version must be an integer, got {version!r}")
        items.append(LocalisationPair(
            key=_text(body.get("key"), "key"),
            value=_text(body.get("value"), "value"),
            version=version,
        ))
    return LocalisationFile(_text(language, "lang"), tuple(items))
