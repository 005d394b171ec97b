"""Collections under test.

Each adapter wraps one hash-based collection type behind the six
operations the runner times: create an empty instance, insert, delete,
membership test, size query, and a full traversal.

Element domain
--------------
Adapters are only ever fed non-negative integers as members.  The
runner builds its "miss" lookup keys as negative integers (``-1 - i``),
which are guaranteed absent only because of this precondition.  An
adapter for a collection whose members could legitimately be negative
must not be registered here.
"""

from __future__ import annotations

from typing import Any


class CollectionAdapter:
    """Base adapter.  Subclasses implement all six operations."""

    name = ""
    description = ""

    def create(self) -> Any:
        """Return a new, empty collection."""
        raise NotImplementedError

    def insert(self, collection: Any, value: int) -> None:
        raise NotImplementedError

    def delete(self, collection: Any, value: int) -> None:
        raise NotImplementedError

    def contains(self, collection: Any, value: int) -> bool:
        raise NotImplementedError

    def size(self, collection: Any) -> int:
        raise NotImplementedError

    def traverse(self, collection: Any) -> int:
        """Visit every element exactly once; return how many were visited."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SetAdapter(CollectionAdapter):
    """The built-in :class:`set`."""

    name = "set"
    description = "built-in set of ints"

    def create(self) -> set[int]:
        return set()

    def insert(self, collection: set[int], value: int) -> None:
        collection.add(value)

    def delete(self, collection: set[int], value: int) -> None:
        collection.discard(value)

    def contains(self, collection: set[int], value: int) -> bool:
        return value in collection

    def size(self, collection: set[int]) -> int:
        return len(collection)

    def traverse(self, collection: set[int]) -> int:
        visited = 0
        for _ in collection:
            visited += 1
        return visited


class DictAdapter(CollectionAdapter):
    """The built-in :class:`dict`, keyed by the element with itself as value."""

    name = "dict"
    description = "built-in dict of int -> int"

    def create(self) -> dict[int, int]:
        return {}

    def insert(self, collection: dict[int, int], value: int) -> None:
        collection[value] = value

    def delete(self, collection: dict[int, int], value: int) -> None:
        collection.pop(value, None)

    def contains(self, collection: dict[int, int], value: int) -> bool:
        return value in collection

    def size(self, collection: dict[int, int]) -> int:
        return len(collection)

    def traverse(self, collection: dict[int, int]) -> int:
        visited = 0
        for _key, _value in collection.items():
            visited += 1
        return visited


COLLECTIONS: dict[str, CollectionAdapter] = {
    adapter.name: adapter for adapter in (SetAdapter(), DictAdapter())
}


def available_collections() -> list[str]:
    """Names of all registered collection adapters, sorted."""
    return sorted(COLLECTIONS)


def get_collection(name: str) -> CollectionAdapter:
    """Return the adapter registered under *name*.

    Raises:
        ValueError: If no adapter has that name.
    """
    try:
        return COLLECTIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown collection '{name}'. Available: {', '.join(available_collections())}"
        ) from None
