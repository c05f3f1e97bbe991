"""Deterministic random source used by the simulator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Protocol

if TYPE_CHECKING:
    from .collection import CollectionState

_MASK32 = 0xFFFFFFFF


class RandomSource(Protocol):
    """Anything exposing ``random() -> float in [0, 1)``; ``random.Random`` qualifies."""

    def random(self) -> float: ...


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK32


class Mulberry32:
    """Small 32-bit Weyl-sequence PRNG with a xorshift-multiply output mix."""

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK32

    @property
    def state(self) -> int:
        return self._state

    def random(self) -> float:
        self._state = (self._state + 0x6D2B79F5) & _MASK32
        s = self._state
        t = _imul(s ^ (s >> 15), 1 | s)
        t = ((t + _imul(t ^ (t >> 7), 61 | t)) & _MASK32) ^ t
        return ((t ^ (t >> 14)) & _MASK32) / 4294967296


def seed_from_state(state: "CollectionState", dust: int) -> int:
    """Fold bucket counts and dust into a 32-bit seed."""
    c, r, e, leg = state.commons, state.rares, state.epics, state.legendaries
    total = (
        c.at0 * 7 + c.at1 * 13 + c.at2 * 17
        + r.at0 * 31 + r.at1 * 37 + r.at2 * 41
        + e.at0 * 61 + e.at1 * 67 + e.at2 * 71
        + leg.unowned * 127 + leg.owned * 131
        + dust * 3
    )
    return total & _MASK32


def seed_from_states(states: Iterable["CollectionState"], dust: int) -> int:
    seed = (dust * 3) & _MASK32
    for state in states:
        seed = (seed + seed_from_state(state, 0)) & _MASK32
    return seed
