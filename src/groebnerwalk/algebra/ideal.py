# src/groebnerwalk/algebra/ideal.py

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Tuple

from sympy.polys.rings import PolyElement, PolyRing

__all__ = ["Ideal"]


@dataclass(frozen=True)
class Ideal:
    """
    Ordered generators in a fixed ring, plus a "known Gröbner basis" flag.

    The record is immutable; every walk step builds a new ``Ideal`` (usually
    over a new ring) instead of editing the previous one.

    Parameters
    ----------
    ring : PolyRing
        Ambient ring; its order is the order the flag refers to.
    gens : iterable of PolyElement
        Generators, all elements of ``ring``. Stored as a tuple.
    is_gb : bool, default=False
        Whether ``gens`` is known to be a Gröbner basis w.r.t. ``ring.order``.
    """

    ring: PolyRing
    gens: Tuple[PolyElement, ...]
    is_gb: bool = False

    def __post_init__(self):
        gens = tuple(self.gens)
        for g in gens:
            if not isinstance(g, PolyElement) or g.ring != self.ring:
                raise ValueError(f"generator {g!r} does not belong to {self.ring}")
        object.__setattr__(self, "gens", gens)

    def __len__(self) -> int:
        return len(self.gens)

    def __iter__(self) -> Iterator[PolyElement]:
        return iter(self.gens)

    @property
    def nvars(self) -> int:
        return self.ring.ngens

    def with_gens(self, gens: Iterable[PolyElement], *, is_gb: bool = False) -> "Ideal":
        return replace(self, gens=tuple(gens), is_gb=is_gb)

    def as_groebner(self) -> "Ideal":
        """The same generators, flagged as a Gröbner basis (caller-trusted)."""
        return self if self.is_gb else replace(self, is_gb=True)

    def leading_monomials(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(g.LM for g in self.gens if g)
