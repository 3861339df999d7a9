"""
Ring descriptor models.

A ring is a consistent-hash membership structure: every instance owns a set of
32-bit tokens, and across all instances a token is held at most once.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

MAX_TOKEN = 2**32 - 1


class InstanceState(str, Enum):
    """Lifecycle state of an instance in the ring."""

    PENDING = "PENDING"
    JOINING = "JOINING"
    ACTIVE = "ACTIVE"
    LEAVING = "LEAVING"
    LEFT = "LEFT"


@dataclass
class InstanceDesc:
    """Ring entry of a single instance."""

    id: str
    state: InstanceState = InstanceState.PENDING
    tokens: list[int] = field(default_factory=list)
    addr: str = ""
    timestamp: int = 0

    def get_tokens(self) -> list[int]:
        return list(self.tokens)


@dataclass
class RingDesc:
    """Snapshot of the ring: every registered instance keyed by id."""

    ingesters: dict[str, InstanceDesc] = field(default_factory=dict)

    def add_instance(
        self,
        instance_id: str,
        tokens: list[int],
        *,
        state: InstanceState = InstanceState.ACTIVE,
        addr: str = "",
        timestamp: int = 0,
    ) -> InstanceDesc:
        desc = InstanceDesc(
            id=instance_id,
            state=state,
            tokens=sorted(tokens),
            addr=addr,
            timestamp=timestamp,
        )
        self.ingesters[instance_id] = desc
        return desc

    def get_tokens(self) -> list[int]:
        """All tokens currently held in the ring, sorted."""
        return sorted(t for desc in self.ingesters.values() for t in desc.tokens)

    def tokens_for(self, instance_id: str) -> tuple[list[int], list[int]]:
        """Return ``(my_tokens, taken_tokens)`` for an instance.

        ``taken_tokens`` holds the tokens of every instance, including the
        caller's own. Both lists are sorted.
        """
        mine: list[int] = []
        taken: list[int] = []
        for key, desc in self.ingesters.items():
            if key == instance_id:
                mine.extend(desc.tokens)
            taken.extend(desc.tokens)
        return sorted(mine), sorted(taken)


def generate_tokens(
    num_tokens: int,
    taken_tokens: list[int] | set[int],
    rng: random.Random | None = None,
) -> list[int]:
    """Generate ``num_tokens`` random, distinct tokens not in ``taken_tokens``.

    The result is sorted. A non-positive count yields an empty list.
    """
    if num_tokens <= 0:
        return []

    rng = rng or random.Random()
    used = set(taken_tokens)
    tokens: list[int] = []
    while len(tokens) < num_tokens:
        candidate = rng.getrandbits(32)
        if candidate in used:
            continue
        used.add(candidate)
        tokens.append(candidate)

    tokens.sort()
    return tokens
