"""Mask – FlagSet, a named-bit flag set backed by one integer state word.

Each label owns one bit (``1 << index``) assigned in insertion order::

    flags = FlagSet(["is_admin", "dark_mode", "experimental_mode", "pro_account"])
    flags.set_flag("dark_mode")      # 2  (0b0010)
    flags.set_flag("pro_account")    # 10 (0b1010)
    flags.list_active_flags()        # ["dark_mode", "pro_account"]
    flags.remove_flag("pro_account")
    flags.get_state()                # 0

Duplicate labels, whether passed to the constructor or to :meth:`FlagSet.add_flag`,
are last-write-wins: the label moves to the newer bit and the older bit is
left orphaned (still counted, owned by no label) until the next removal
compacts the positions.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from flagmask.mask.errors import TooManyFlagsError, UnknownFlagError
from flagmask.mask.snapshot import FlagSetSnapshot
from flagmask.observability.logging import get_logger

MAX_FLAGS = 31

_log = get_logger(__name__)


class FlagSet:
    """Ordered label → bit mapping plus the state word it indexes.

    Not thread-safe. Callers sharing an instance across threads must guard
    the whole object with one lock, since :meth:`add_flag` and
    :meth:`remove_flag` rewrite both the mapping and the state.
    """

    def __init__(self, labels: Iterable[str] = ()) -> None:
        if isinstance(labels, str):
            raise TypeError("labels must be an iterable of strings, not a single str")
        labels = list(labels)
        if len(labels) > MAX_FLAGS:
            raise TooManyFlagsError(len(labels), MAX_FLAGS)

        self._bits: dict[str, int] = {}
        self._state = 0
        self._count = 0
        for label in labels:
            self._assign(label)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_flag_active(self, label: str) -> bool:
        """Return whether *label* is on. Unknown labels are reported as off."""
        bit = self._bits.get(label)
        if bit is None:
            return False
        return self._state & bit != 0

    def list_active_flags(self) -> list[str]:
        return [label for label, bit in self._bits.items() if self._state & bit]

    def list_all_flags(self) -> list[tuple[str, bool]]:
        return [(label, self._state & bit != 0) for label, bit in self._bits.items()]

    def get_state(self) -> int:
        return self._state

    def bit_for(self, label: str) -> int | None:
        """One-bit mask currently owned by *label*, or ``None`` when undefined."""
        return self._bits.get(label)

    @property
    def length(self) -> int:
        """Number of allocated bit positions."""
        return self._count

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(self._bits)

    @property
    def max_state(self) -> int:
        return (1 << self._count) - 1

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_flag(self, label: str) -> int:
        """Turn *label* on and return the new state.

        Raises
        ------
        UnknownFlagError
            When *label* is not defined; the state is left unchanged.
        """
        self._state |= self._bit_of(label)
        return self._state

    def clear_flag(self, label: str) -> int:
        """Turn *label* off and return the new state.

        Raises
        ------
        UnknownFlagError
            When *label* is not defined; the state is left unchanged.
        """
        self._state &= ~self._bit_of(label)
        return self._state

    def set_state(self, new_state: int) -> None:
        """Replace the state word, clamped into ``[0, max_state]``."""
        clamped = min(max(int(new_state), 0), self.max_state)
        if clamped != new_state:
            _log.debug("state_clamped", requested=new_state, state=clamped, max_state=self.max_state)
        self._state = clamped

    def add_flag(self, label: str) -> None:
        """Define *label* on the next free bit. The new flag starts inactive.

        Raises
        ------
        TooManyFlagsError
            When the set already tracks the maximum number of labels.
        """
        if self._count >= MAX_FLAGS:
            raise TooManyFlagsError(self._count + 1, MAX_FLAGS)
        self._assign(label)
        _log.debug("flag_added", label=label, bit=self._bits[label], length=self._count)

    def remove_flag(self, label: str) -> None:
        """Remove *label* and compact the remaining bits, keeping their status.

        Removing an unknown label is a no-op.
        """
        if label not in self._bits:
            return
        del self._bits[label]

        state = 0
        for index, (name, old_bit) in enumerate(list(self._bits.items())):
            new_bit = 1 << index
            if self._state & old_bit:
                state |= new_bit
            self._bits[name] = new_bit

        self._state = state
        self._count = len(self._bits)
        _log.debug("flag_removed", label=label, length=self._count, state=self._state)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def snapshot(self) -> FlagSetSnapshot:
        """Capture labels and status, with state expressed in label order.

        Orphaned bits left by duplicate labels are not carried over.
        """
        state = 0
        for index, (_, active) in enumerate(self.list_all_flags()):
            if active:
                state |= 1 << index
        return FlagSetSnapshot(labels=self.labels, state=state)

    @classmethod
    def from_snapshot(cls, snapshot: FlagSetSnapshot) -> "FlagSet":
        flag_set = cls(snapshot.labels)
        flag_set.set_state(snapshot.state)
        return flag_set

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._count

    def __contains__(self, label: object) -> bool:
        return label in self._bits

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._bits))

    def __repr__(self) -> str:
        return f"FlagSet(labels={list(self._bits)!r}, state=0b{self._state:0{max(self._count, 1)}b})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _assign(self, label: str) -> None:
        if label in self._bits:
            _log.warning(
                "flag_label_overwritten",
                label=label,
                orphaned_bit=self._bits[label],
                bit=1 << self._count,
            )
        self._bits[label] = 1 << self._count
        self._count += 1

    def _bit_of(self, label: str) -> int:
        bit = self._bits.get(label)
        if bit is None:
            raise UnknownFlagError(label)
        return bit


def define_mask(labels: Iterable[str]) -> FlagSet:
    """Build a :class:`FlagSet` from *labels*; all flags start off."""
    return FlagSet(labels)


__all__ = ["FlagSet", "MAX_FLAGS", "define_mask"]
