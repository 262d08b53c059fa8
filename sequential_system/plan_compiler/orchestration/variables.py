"""
Ordered, case-insensitive string variables.

Used for a step's input parameters and for carrying named outputs from one
step to the next. A key keeps its first spelling and its position when it is
overwritten, so `Input` and `input` are the same variable. Bags held by a
compiled Plan are read-only; `copy()` gives a writable one.
"""


from collections.abc import MutableMapping
from typing import Dict, Iterator, Optional, Tuple


class VariableBag(MutableMapping):
    def __init__(self, initial: Optional[dict] = None, **kwargs: str):
        # folded key -> (original key, value)
        self._items: Dict[str, Tuple[str, str]] = {}
        self._read_only = False
        if initial:
            self.update(initial)
        if kwargs:
            self.update(kwargs)

    @staticmethod
    def _fold(name: str) -> str:
        return name.casefold()

    def _check_writable(self) -> None:
        if self._read_only:
            raise TypeError("VariableBag is read-only")

    @property
    def read_only(self) -> bool:
        return self._read_only

    def __getitem__(self, name: str) -> str:
        return self._items[self._fold(name)][1]

    def __setitem__(self, name: str, value: str) -> None:
        self._check_writable()
        if not isinstance(name, str) or not name:
            raise KeyError("variable name must be a non-empty string")
        key = self._fold(name)
        original = self._items[key][0] if key in self._items else name
        self._items[key] = (original, str(value))

    def __delitem__(self, name: str) -> None:
        self._check_writable()
        del self._items[self._fold(name)]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._fold(name) in self._items

    def set(self, name: str, value: Optional[str]) -> None:
        """Set a variable; a None value removes it instead."""
        if value is None:
            self.pop(name, None)
        else:
            self[name] = value

    def copy(self) -> "VariableBag":
        return VariableBag(self.to_dict())

    def freeze(self) -> "VariableBag":
        """Read-only copy of this bag."""
        bag = self.copy()
        bag._read_only = True
        return bag

    def to_dict(self) -> Dict[str, str]:
        return {original: value for original, value in self._items.values()}

    def __repr__(self) -> str:
        return f"VariableBag({self.to_dict()!r})"
