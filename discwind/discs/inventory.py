# ABOUTME: The player's disc bag with add/update/delete/duplicate and persistence
# ABOUTME: Falls back to a seed bag when nothing usable is stored

import logging
from typing import Iterator, Optional

from discwind.discs.models import Disc, Stability
from discwind.storage.store import JsonStore

log = logging.getLogger(__name__)

DISCS_KEY = "myDiscs"

SEED_DISCS = (
    Disc(name="Destroyer", brand="Innova", speed=12, glide=5, turn=-1, fade=3, stability=Stability.OVERSTABLE.value),
    Disc(name="Buzzz", brand="Discraft", speed=5, glide=4, turn=-1, fade=1, stability=Stability.STABLE.value),
    Disc(name="Leopard3", brand="Innova", speed=7, glide=5, turn=-2, fade=1, stability=Stability.UNDERSTABLE.value),
    Disc(name="Firebird", brand="Innova", speed=9, glide=3, turn=0, fade=4, stability=Stability.VERY_OVERSTABLE.value),
    Disc(name="Tern", brand="Innova", speed=12, glide=6, turn=-3, fade=2, stability=Stability.UNDERSTABLE.value),
    Disc(name="Roc3", brand="Innova", speed=5, glide=4, turn=0, fade=3, stability=Stability.OVERSTABLE.value),
)


class DiscInventory:
    """
    Ordered disc bag.

    Names are matched for update and delete, but duplicate names are allowed;
    when several discs share a name only the first one is touched.
    """

    def __init__(self, store: Optional[JsonStore] = None, discs: Optional[list[Disc]] = None):
        self.store = store
        if discs is not None:
            self._discs = list(discs)
        else:
            self._discs = self._load()

    def __iter__(self) -> Iterator[Disc]:
        return iter(self._discs)

    def __len__(self) -> int:
        return len(self._discs)

    @property
    def discs(self) -> list[Disc]:
        return list(self._discs)

    def names(self) -> list[str]:
        return [disc.name for disc in self._discs]

    def find(self, name: str) -> Optional[Disc]:
        for disc in self._discs:
            if disc.name == name:
                return disc
        return None

    def add(self, disc: Disc) -> None:
        self._discs.append(disc)
        self._save()

    def update(self, disc: Disc) -> None:
        """Replace the first disc with the same name, or append if there is none."""
        index = self._index_of(disc.name)
        if index is None:
            self._discs.append(disc)
        else:
            self._discs[index] = disc
        self._save()

    def delete(self, name: str) -> bool:
        """
        Remove the first disc with this name.

        Returns:
            True if a disc was removed
        """
        index = self._index_of(name)
        if index is None:
            return False
        del self._discs[index]
        self._save()
        return True

    def duplicate(self, name: str) -> Optional[Disc]:
        """Append a copy of the named disc and return it."""
        disc = self.find(name)
        if disc is None:
            return None
        copy = disc.duplicate()
        self.add(copy)
        return copy

    def move(self, from_index: int, to_index: int) -> None:
        """Move one disc to a new position in the bag."""
        disc = self._discs.pop(from_index)
        self._discs.insert(to_index, disc)
        self._save()

    def search(self, text: str) -> list[Disc]:
        """Case-insensitive search over name, brand and stability."""
        if not text:
            return list(self._discs)
        needle = text.lower()
        return [
            disc for disc in self._discs
            if needle in disc.name.lower()
            or needle in disc.brand.lower()
            or needle in str(disc.stability).lower()
        ]

    def _index_of(self, name: str) -> Optional[int]:
        for index, disc in enumerate(self._discs):
            if disc.name == name:
                return index
        return None

    def _load(self) -> list[Disc]:
        if self.store is None:
            return list(SEED_DISCS)

        data = self.store.load(DISCS_KEY)
        if data is None:
            return list(SEED_DISCS)
        if not isinstance(data, list):
            log.error(f"Stored disc bag is not a list, using seed bag: {type(data).__name__}")
            return list(SEED_DISCS)

        try:
            return [Disc.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            log.error(f"Stored disc bag is unreadable, using seed bag: {e}")
            return list(SEED_DISCS)

    def _save(self) -> None:
        if self.store is None:
            return
        self.store.save(DISCS_KEY, [disc.to_dict() for disc in self._discs])
