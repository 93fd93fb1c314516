"""A growable sequence with a cursor that cycles through its items."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class CycleArray:
    """An ordered collection that can be walked forwards or backwards forever.

    ``None`` is never stored: pushing it is silently ignored, and the
    accessors return ``None`` to mean "nothing there".
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._data: list[Any] = []
        self._index = -1
        for item in items or ():
            self.push(item)

    def push(self, thing: Any) -> None:
        """Append ``thing`` unless it is ``None``."""
        if thing is None:
            return
        self._data.append(thing)

    def get(self, index: int) -> Any:
        """Return the item at ``index``, or ``None`` when there is none."""
        if not 0 <= index < len(self._data):
            return None
        return self._data[index]

    def remove(self, index: int) -> Any:
        """Remove and return the item at ``index``; ``None`` if out of range."""
        if not 0 <= index < len(self._data):
            return None
        return self._data.pop(index)

    def pop(self) -> Any:
        """Remove and return the last item, or ``None`` when empty."""
        return self._data.pop() if self._data else None

    def next(self) -> Any:
        """Advance the cursor and return the item under it, wrapping around."""
        if not self._data:
            raise IndexError("next() on an empty array")
        self._index += 1
        return self._data[self._index % len(self._data)]

    def prev(self) -> Any:
        """Move the cursor back and return the item before it, wrapping around."""
        if not self._data:
            raise IndexError("prev() on an empty array")
        self._index -= 1
        length = len(self._data)
        return self._data[(self._index + length - 1) % length]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._data))

    def __str__(self) -> str:
        if not self._data:
            return "NULL"
        return ",".join(f"[{item}]" for item in self._data)