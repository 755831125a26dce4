"""Collision-free file names for category documents."""

from .models import Facet
from .sanitize import sanitize

EMPTY_NAME = "untitled"


class CategoryNamer:
    """Assigns category document names from one namespace shared by both facets.

    Names are claimed in call order: the first key to sanitize to ``bug``
    gets ``bug``, later ones get ``bug-2``, ``bug-3`` and so on. Callers
    must therefore resolve keys in a reproducible order. Names are compared
    case-insensitively, so ``Bug`` and ``bug`` never share a file on a
    case-insensitive filesystem.
    """

    def __init__(self) -> None:
        self._taken: set[str] = set()
        self._assigned: dict[tuple[Facet, str], str] = {}

    def _is_taken(self, name: str) -> bool:
        return name.casefold() in self._taken

    def _claim(self, name: str) -> str:
        self._taken.add(name.casefold())
        return name

    def resolve(self, facet: Facet, key: str) -> str:
        """Return the file stem for ``key`` under ``facet``.

        Resolving the same facet and key again returns the name assigned
        the first time.
        """
        assigned = self._assigned.get((facet, key))
        if assigned is not None:
            return assigned

        base = sanitize(key) or EMPTY_NAME
        if self._is_taken(base):
            suffix = 2
            while self._is_taken(f"{base}-{suffix}"):
                suffix += 1
            base = f"{base}-{suffix}"

        name = self._claim(base)
        self._assigned[(facet, key)] = name
        return name

    def resolve_all(self, facet: Facet, keys: list[str]) -> dict[str, str]:
        """Resolve ``keys`` in the given order and map each key to its name."""
        return {key: self.resolve(facet, key) for key in keys}
