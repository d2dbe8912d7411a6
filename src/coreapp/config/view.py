"""Read-only hierarchical view over nested configuration data."""

import copy
from collections.abc import Iterator, Mapping
from typing import Any

from ..domain.exceptions import KeyNotSetError


class ConfigView:
    """Read-only accessor for one level of a nested configuration mapping.

    Values are looked up by path (``view.get("db", "host")``), by item
    (``view["db"]``) or by attribute (``view.db.host``). All three follow the
    same rules:

    - a missing key raises ``KeyNotSetError`` naming that key
    - a nested ``Mapping`` is returned wrapped in a new ``ConfigView``
    - anything else (primitives, lists, arbitrary objects) is returned as-is

    Wrapping happens at access time, so repeated lookups of the same nested
    mapping return equal but distinct views. The wrapped data is never
    modified or copied.

    Keys that share a name with a method (``get``, ``has``, ``keys``,
    ``to_dict``) or start with an underscore are only reachable through
    ``view[key]`` or ``get()``.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_data", data)

    def get(self, key: str, *more_keys: str) -> Any:
        """Descend through the data following each key in order.

        Args:
            key: First key to look up at this level
            *more_keys: Further keys, each looked up in the previous result

        Returns:
            The value at the end of the path, wrapped in a ConfigView if it
            is a nested mapping

        Raises:
            KeyNotSetError: On the first key that is not set
        """
        value: Any = self
        for name in (key, *more_keys):
            if not isinstance(value, ConfigView):
                raise KeyNotSetError(name)
            value = value._lookup(name)
        return value

    def has(self, key: str, *more_keys: str) -> bool:
        """Check whether a path is set, without raising."""
        try:
            self.get(key, *more_keys)
        except KeyNotSetError:
            return False
        return True

    def to_dict(self) -> Mapping[str, Any]:
        """Return the raw mapping behind this view.

        The same object the view was built over is returned; nested mappings
        inside it are left unwrapped.
        """
        return self._data

    def keys(self):
        return self._data.keys()

    def _lookup(self, key: str) -> Any:
        if key not in self._data:
            raise KeyNotSetError(key)
        value = self._data[key]
        if isinstance(value, Mapping):
            return ConfigView(value)
        return value

    def __getattr__(self, name: str) -> Any:
        # Private and dunder names are never configuration keys.
        if name.startswith("_"):
            raise AttributeError(name)
        return self._lookup(name)

    def __getitem__(self, key: str) -> Any:
        return self._lookup(key)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    # Slot state can't be restored through the read-only __setattr__, so
    # copies and pickles rebuild through the constructor.
    def __copy__(self) -> "ConfigView":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "ConfigView":
        return ConfigView(copy.deepcopy(self._data, memo))

    def __reduce__(self):
        return (ConfigView, (self._data,))

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigView):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"
