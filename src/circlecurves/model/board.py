"""
Pairing Board
=============
State of the two number grids: the bottom tiles (one per intersection
number) and the top pair slots (one per curve).

The board knows nothing about curves. `PuzzleSession` decides whether two
placed numbers match and then calls `resolve_current` or `return_current`.

Tile lifecycle::

    AVAILABLE --place--> PLACED --return_current--> AVAILABLE
                            \\
                             +--delete_tiles--> DELETED (terminal)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

SLOT_SIZE = 2


class TileState(Enum):
    AVAILABLE = "available"
    PLACED = "placed"
    DELETED = "deleted"


class PairOutcome(Enum):
    """Result of offering a number to the board."""
    IGNORED = "ignored"        # nothing changed
    PENDING = "pending"        # first half of a pair placed
    MATCHED = "matched"        # pair shared a curve; curve removed
    MISMATCHED = "mismatched"  # pair returned to the bottom grid


@dataclass
class GridCell:
    """A numbered tile in the bottom grid."""
    number: int
    visible: bool = True
    deleted: bool = False

    @property
    def state(self) -> TileState:
        if self.deleted:
            return TileState.DELETED
        return TileState.AVAILABLE if self.visible else TileState.PLACED


@dataclass
class PairSlot:
    """Two top-grid cells receiving one candidate pair."""
    group: int
    numbers: list[Optional[int]] = field(default_factory=lambda: [None] * SLOT_SIZE)
    auto_filled: list[bool] = field(default_factory=lambda: [False] * SLOT_SIZE)
    resolved: bool = False

    @property
    def is_empty(self) -> bool:
        return all(n is None for n in self.numbers)

    @property
    def is_full(self) -> bool:
        return all(n is not None for n in self.numbers)

    def first_open_position(self) -> Optional[int]:
        for position, number in enumerate(self.numbers):
            if number is None:
                return position
        return None

    def placed_numbers(self) -> list[int]:
        return [n for n in self.numbers if n is not None]

    def clear(self) -> None:
        self.numbers = [None] * SLOT_SIZE
        self.auto_filled = [False] * SLOT_SIZE


class PairingBoard:
    """Bottom tiles, top slots and the cursor pointing at the slot being filled."""

    def __init__(self, total_numbers: int, group_count: int) -> None:
        if total_numbers < 0 or group_count < 0:
            raise ValueError("Board sizes must be non-negative.")
        self.total_numbers = total_numbers
        self.group_count = group_count
        self.tiles: list[GridCell] = []
        self.slots: list[PairSlot] = []
        self.current_group: int = 0
        self.reset()

    def reset(self) -> None:
        self.tiles = [GridCell(number=n) for n in range(1, self.total_numbers + 1)]
        self.slots = [PairSlot(group=g) for g in range(self.group_count)]
        self.current_group = 0

    # --- Queries ---

    def tile(self, number: int) -> Optional[GridCell]:
        if 1 <= number <= len(self.tiles):
            return self.tiles[number - 1]
        return None

    def is_available(self, number: int) -> bool:
        cell = self.tile(number)
        return cell is not None and cell.state is TileState.AVAILABLE

    @property
    def current_slot(self) -> Optional[PairSlot]:
        """Slot under the cursor, or None once every slot has been used."""
        if self.current_group < len(self.slots):
            return self.slots[self.current_group]
        return None

    @property
    def has_capacity(self) -> bool:
        return self.current_slot is not None

    @property
    def has_progress(self) -> bool:
        """True once any number sits in a slot."""
        return any(slot.placed_numbers() for slot in self.slots)

    # --- Transitions ---

    def place(self, number: int) -> Optional[PairSlot]:
        """
        Move an available tile into the first open position of the current slot.

        Returns:
            The slot that received the number, or None if the tile is not
            available or no slot is left.
        """
        if not self.is_available(number):
            return None
        slot = self.current_slot
        if slot is None:
            logger.info("No pair slot left for number %d", number)
            return None
        position = slot.first_open_position()
        if position is None:
            return None

        self.tiles[number - 1].visible = False
        slot.numbers[position] = number
        return slot

    def return_current(self) -> list[int]:
        """Send every number of the current slot back to the bottom grid."""
        slot = self.current_slot
        if slot is None:
            return []
        returned = slot.placed_numbers()
        for number in returned:
            cell = self.tile(number)
            if cell is not None and not cell.deleted:
                cell.visible = True
        slot.clear()
        return returned

    def resolve_current(self) -> None:
        """Lock the current slot and move the cursor to the next one."""
        slot = self.current_slot
        if slot is None:
            return
        slot.resolved = True
        self.current_group += 1

    def delete_tiles(self, numbers: Iterable[int]) -> None:
        """Permanently retire tiles; deleted tiles never come back."""
        for number in numbers:
            cell = self.tile(number)
            if cell is not None:
                cell.visible = False
                cell.deleted = True

    def auto_fill(self, numbers: list[int]) -> bool:
        """
        Place a known-matching pair into the current slot, tag it and advance.

        A number already sitting half-placed in the slot is returned to the
        bottom grid first. Returns False when no slot is left.
        """
        slot = self.current_slot
        if slot is None:
            logger.info("No pair slot left for auto-filled numbers %s", numbers)
            return False
        if not slot.is_empty:
            self.return_current()

        for position, number in enumerate(numbers[:SLOT_SIZE]):
            cell = self.tile(number)
            if cell is not None:
                cell.visible = False
            slot.numbers[position] = number
            slot.auto_filled[position] = True

        if slot.is_full:
            self.resolve_current()
        return True
