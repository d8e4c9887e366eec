"""Form/query encoding for application/x-www-form-urlencoded bodies."""

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union
from urllib.parse import quote_plus


# Parameter variants
@dataclass(frozen=True)
class Scalar:
    """A single string value."""

    value: str


@dataclass(frozen=True)
class Nested:
    """A mapping flattened as key[sub]=value."""

    fields: Mapping[str, "Param"]


@dataclass(frozen=True)
class Indexed:
    """A sequence flattened as key[0]=value, key[1]=value, ..."""

    items: Sequence["Param"]


@dataclass(frozen=True)
class _Absent:
    """Marker for a value that must not be encoded at all."""

    def __repr__(self) -> str:
        return "Absent"


Absent = _Absent()

Param = Union[Scalar, Nested, Indexed, _Absent]
ParamBag = Mapping[str, Param]

# Brackets stay literal in keys: items[0][plan], metadata[extraInvoiceInfo]
_KEY_SAFE = "[]"


def to_param(value: Any) -> Param:
    """
    Lift a plain Python value into a Param.

    None → Absent, bool → "true"/"false", str/int/float → Scalar,
    mapping → Nested, list/tuple → Indexed. Values that are already
    Params pass through unchanged.

    Args:
        value: Plain value or Param

    Returns:
        Param variant

    Raises:
        TypeError: If the value has no form representation
    """
    if isinstance(value, (Scalar, Nested, Indexed, _Absent)):
        return value
    if value is None:
        return Absent
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return Scalar("true" if value else "false")
    if isinstance(value, (str, int, float)):
        return Scalar(str(value))
    if isinstance(value, Mapping):
        return Nested({key: to_param(sub) for key, sub in value.items()})
    if isinstance(value, (list, tuple)):
        return Indexed([to_param(item) for item in value])
    raise TypeError(f"Cannot form-encode value of type {type(value).__name__}")


def params(**values: Any) -> dict[str, Param]:
    """Build an ordered parameter bag from keyword arguments."""
    return {key: to_param(value) for key, value in values.items()}


def _flatten(key: str, param: Param) -> list[tuple[str, str]]:
    if isinstance(param, _Absent):
        return []
    if isinstance(param, Scalar):
        return [(key, param.value)]
    if isinstance(param, Nested):
        pairs: list[tuple[str, str]] = []
        for sub_key, sub in param.fields.items():
            pairs.extend(_flatten(f"{key}[{sub_key}]", sub))
        return pairs
    if isinstance(param, Indexed):
        pairs = []
        for index, item in enumerate(param.items):
            pairs.extend(_flatten(f"{key}[{index}]", item))
        return pairs
    raise TypeError(f"Unknown parameter variant: {param!r}")


def encode_pairs(bag: ParamBag) -> list[tuple[str, str]]:
    """
    Flatten a parameter bag into ordered (key, value) pairs.

    Absent entries are dropped, nested and indexed values are expanded
    with bracket syntax. Output order follows input order.

    Args:
        bag: Ordered parameter bag

    Returns:
        List of unescaped (key, value) pairs
    """
    pairs: list[tuple[str, str]] = []
    for key, param in bag.items():
        pairs.extend(_flatten(key, to_param(param)))
    return pairs


def encode(bag: ParamBag) -> bytes:
    """
    Encode a parameter bag as application/x-www-form-urlencoded bytes.

    Args:
        bag: Ordered parameter bag

    Returns:
        Encoded body, e.g. b"items[0][plan]=basic&items[0][quantity]=2"
    """
    encoded = "&".join(
        f"{quote_plus(key, safe=_KEY_SAFE)}={quote_plus(value)}"
        for key, value in encode_pairs(bag)
    )
    return encoded.encode("utf-8")
