from typing import Callable, Dict, Generic, Iterable, Iterator, List, Optional, Protocol, TypeVar

from ..exceptions import DuplicateItemError


class ItemProtocol(Protocol):
    id: str


T = TypeVar("T", bound=ItemProtocol)


class Collection(Generic[T]):
    """
    An ordered, id-keyed collection. Items keep insertion order; an id can
    only be present once.
    """

    def __init__(self, id: str, items: Optional[Iterable[T]] = None):
        self.id = id
        self._items: Dict[str, T] = {}
        for item in items or []:
            self.add(item)

    def add(self, item: T) -> "Collection[T]":
        if item.id in self._items:
            raise DuplicateItemError(f"Item '{item.id}' already exists in collection '{self.id}'.")
        self._items[item.id] = item
        return self

    def replace(self, id: str, item: T) -> "Collection[T]":
        """
        Replace the item `id` in place, or append it when absent. A rename
        onto the id of another item raises DuplicateItemError.
        """
        if id != item.id and item.id in self._items:
            raise DuplicateItemError(f"Item '{item.id}' already exists in collection '{self.id}'.")
        if id != item.id and id in self._items:
            self._items = {
                (item.id if key == id else key): (item if key == id else value)
                for key, value in self._items.items()
            }
        else:
            self._items[item.id] = item
        return self

    def remove(self, id: str) -> "Collection[T]":
        if id not in self._items:
            raise KeyError(f"Item '{id}' does not exist in collection '{self.id}'.")
        del self._items[id]
        return self

    def get(self, id: str) -> T:
        return self._items[id]

    def has(self, id: str) -> bool:
        return id in self._items

    def ids(self) -> List[str]:
        return list(self._items)

    def filter(self, predicate: Callable[[T], bool]) -> "Collection[T]":
        """New collection of the same type holding matching items."""
        return self._new(item for item in self if predicate(item))

    def sort_by(self, key: Callable[[T], object], reverse: bool = False) -> "Collection[T]":
        return self._new(sorted(self, key=key, reverse=reverse))

    def _new(self, items: Iterable[T]) -> "Collection[T]":
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._items = {}
        for item in items:
            clone._items[item.id] = item
        return clone

    def __contains__(self, id: object) -> bool:
        return id in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r}, count={len(self)})"
