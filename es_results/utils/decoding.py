"""
Decoders that turn raw JSON values into caller-chosen types.
"""

import dataclasses
from functools import partial
from typing import Any, Callable, Dict, Type, TypeVar

T = TypeVar("T")

Decoder = Callable[[Any], T]


def identity(value: Any) -> Any:
    return value


def decode_dataclass(cls: Type[T], data: Dict[str, Any]) -> T:
    """
    Build a dataclass instance from a JSON object.

    Keys without a matching init field are ignored, so documents may carry
    more fields than the target type declares.

    Raises:
        TypeError: If data is not an object or required fields are missing
    """
    if not isinstance(data, dict):
        raise TypeError(f"Cannot decode {type(data).__name__} into {cls.__name__}")
    names = {f.name for f in dataclasses.fields(cls) if f.init}
    return cls(**{key: value for key, value in data.items() if key in names})


def as_decoder(shape: Any) -> Decoder:
    """
    Turn a target shape into a decoding function.

    Accepted shapes, checked in order:
        None: values are returned as-is
        a class with a from_dict classmethod
        a dataclass
        any other callable taking the raw value
    """
    if shape is None:
        return identity

    from_dict = getattr(shape, "from_dict", None)
    if isinstance(shape, type) and callable(from_dict):
        return from_dict

    if isinstance(shape, type) and dataclasses.is_dataclass(shape):
        return partial(decode_dataclass, shape)

    if callable(shape):
        return shape

    raise TypeError(f"Unsupported decoder shape: {shape!r}")
