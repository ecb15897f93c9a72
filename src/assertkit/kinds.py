"""Runtime kind classification and typed references."""

from __future__ import annotations

import array
import asyncio
import collections
import queue
import weakref
from collections.abc import Mapping, MutableSequence, Sequence, Set
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Kind(str, Enum):
    INVALID = "invalid"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    COMPLEX = "complex"
    STRING = "string"
    ARRAY = "array"
    SLICE = "slice"
    MAP = "map"
    CHAN = "chan"
    FUNC = "func"
    PTR = "ptr"
    STRUCT = "struct"


NILABLE_KINDS = frozenset(
    {Kind.INVALID, Kind.CHAN, Kind.FUNC, Kind.MAP, Kind.PTR, Kind.SLICE}
)
SIZED_KINDS = frozenset({Kind.ARRAY, Kind.CHAN, Kind.MAP, Kind.SLICE, Kind.STRING})

_CHANNEL_TYPES = (queue.Queue, queue.SimpleQueue, asyncio.Queue, collections.deque)


@dataclass(frozen=True)
class PointerType:
    """Dynamic type of a :class:`Ref`, e.g. ``*int``."""

    elem: type

    def __str__(self) -> str:
        return f"*{type_name(self.elem)}"


class Ref(Generic[T]):
    """A typed reference that may point at nothing.

    ``Ref(x)`` points at ``x`` and takes its type from it; ``Ref.nil(int)``
    is a nil reference that still knows it would point at an ``int``.
    """

    __slots__ = ("target", "elem")

    def __init__(self, target: T | None = None, elem: type | None = None):
        if target is None and elem is None:
            raise TypeError("a nil Ref needs an element type")
        self.target = target
        self.elem = elem if elem is not None else type(target)

    @classmethod
    def nil(cls, elem: type) -> Ref[Any]:
        return cls(None, elem)

    @property
    def is_nil(self) -> bool:
        return self.target is None

    def __repr__(self) -> str:
        if self.is_nil:
            return f"Ref.nil({type_name(self.elem)})"
        return f"Ref({self.target!r})"


def kind_of(value: Any) -> Kind:
    """Classify ``value`` into a :class:`Kind`."""
    if value is None:
        return Kind.INVALID
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, complex):
        return Kind.COMPLEX
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (Ref, weakref.ReferenceType)):
        return Kind.PTR
    if isinstance(value, _CHANNEL_TYPES):
        return Kind.CHAN
    if isinstance(value, (Mapping, Set)):
        return Kind.MAP
    if isinstance(value, (MutableSequence, bytearray, array.array)):
        return Kind.SLICE
    if isinstance(value, Sequence):
        return Kind.ARRAY
    if callable(value):
        return Kind.FUNC
    return Kind.STRUCT


def is_nilable(value: Any) -> bool:
    """Return whether the kind of ``value`` can hold a nil.

    True for ``None`` and for channel, function, mapping, reference and
    slice kinds; false for scalars, strings, tuples and plain objects.
    """
    return kind_of(value) in NILABLE_KINDS


def is_nil(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, Ref):
        return value.is_nil
    if isinstance(value, weakref.ReferenceType):
        return value() is None
    return False


def dynamic_type(value: Any) -> PointerType | type | None:
    if value is None:
        return None
    if isinstance(value, Ref):
        return PointerType(value.elem)
    return type(value)


def type_name(tp: PointerType | type | None) -> str:
    if tp is None:
        return "None"
    if isinstance(tp, PointerType):
        return str(tp)
    if tp.__module__ == "builtins":
        return tp.__qualname__
    return f"{tp.__module__}.{tp.__qualname__}"


def length(value: Any) -> int:
    """Length of a sized-kind value; channels without ``__len__`` use ``qsize()``."""
    if kind_of(value) is Kind.CHAN and not hasattr(value, "__len__"):
        return value.qsize()
    return len(value)
