"""Deep structural equality and nil-aware equivalence."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence, Set
from typing import Any

from assertkit.kinds import Kind, Ref, dynamic_type, is_nil, is_nilable, kind_of


def deep_equal(a: Any, b: Any) -> bool:
    """Compare two values structurally.

    Values of different dynamic types are never equal, so ``1`` and ``1.0``
    or ``1`` and an ``int`` subclass holding ``1`` compare unequal.
    """
    return _deep_equal(a, b, {})


def _deep_equal(a: Any, b: Any, visited: dict[tuple[int, int], tuple[Any, Any]]) -> bool:
    if dynamic_type(a) != dynamic_type(b):
        return False
    if a is None:
        return True

    if isinstance(a, Ref):
        if a.is_nil or b.is_nil:
            return a.is_nil and b.is_nil
        if a is b:
            return True
        return _deep_equal(a.target, b.target, visited)

    if isinstance(a, (str, bytes, bytearray, int, float, complex)):
        return a == b

    # holding the pair keeps both ids from being reused while comparing
    key = (id(a), id(b))
    if key in visited:
        return True
    visited[key] = (a, b)

    if isinstance(a, Mapping):
        if len(a) != len(b):
            return False
        b_keys = {k: k for k in b}
        for k, v in a.items():
            if k not in b_keys or not _deep_equal(k, b_keys[k], visited):
                return False
            if not _deep_equal(v, b[b_keys[k]], visited):
                return False
        return True

    if isinstance(a, Set):
        if len(a) != len(b):
            return False
        b_items = {x: x for x in b}
        return all(x in b_items and _deep_equal(x, b_items[x], visited) for x in a)

    if isinstance(a, Sequence):
        if len(a) != len(b):
            return False
        return all(_deep_equal(x, y, visited) for x, y in zip(a, b))

    # functions only ever equal themselves
    if kind_of(a) is Kind.FUNC:
        return a is b

    if dataclasses.is_dataclass(a) and not isinstance(a, type):
        return all(
            _deep_equal(getattr(a, f.name), getattr(b, f.name), visited)
            for f in dataclasses.fields(a)
        )

    if type(a).__eq__ is not object.__eq__:
        return bool(a == b)

    if a is b:
        return True
    if hasattr(a, "__dict__"):
        return _deep_equal(vars(a), vars(b), visited)
    slots = _slot_names(type(a))
    if slots:
        return all(
            _deep_equal(getattr(a, s, None), getattr(b, s, None), visited)
            for s in slots
        )
    return False


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__"))
    return names


def equivalent(a: Any, b: Any) -> bool:
    """Deep equality, reconciling typed nils with ``None``.

    A typed nil is equivalent to ``None`` and to a typed nil of the same
    dynamic type, but not to a typed nil of another type.
    """
    if deep_equal(a, b):
        return True
    if not (is_nilable(a) and is_nilable(b)):
        return False
    if a is not None and b is None:
        return is_nil(a)
    if a is None and b is not None:
        return is_nil(b)
    return (
        a is not None
        and dynamic_type(a) == dynamic_type(b)
        and is_nil(a)
        and is_nil(b)
    )
