"""
Alertmanager ring join policy.

The ring framework calls these hooks under its own lock while an alertmanager
instance registers, heartbeats and shuts down. Only registration carries any
policy: the instance always (re)joins as JOINING, keeping whatever tokens it
already owned and topping them up to RING_NUM_TOKENS.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol

import structlog

from rulerkit.ring.models import InstanceDesc, InstanceState, RingDesc, generate_tokens

# Tokens each alertmanager instance owns in the ring.
RING_NUM_TOKENS = 128

TokenGenerator = Callable[[int, list[int]], list[int]]


class BasicLifecyclerDelegate(Protocol):
    """Hooks invoked by a basic ring lifecycler."""

    def on_ring_instance_register(
        self,
        lifecycler: Any,
        ring_desc: RingDesc,
        instance_exists: bool,
        instance_id: str,
        instance_desc: InstanceDesc | None,
    ) -> tuple[InstanceState, list[int]]:
        ...

    def on_ring_instance_tokens(self, lifecycler: Any, tokens: list[int]) -> None:
        ...

    def on_ring_instance_stopping(self, lifecycler: Any) -> None:
        ...

    def on_ring_instance_heartbeat(
        self,
        lifecycler: Any,
        ring_desc: RingDesc,
        instance_desc: InstanceDesc,
    ) -> None:
        ...


class AlertmanagerRingDelegate:
    """Lifecycler delegate for an alertmanager instance."""

    def __init__(
        self,
        num_tokens: int = RING_NUM_TOKENS,
        *,
        token_generator: TokenGenerator = generate_tokens,
        logger: Any = None,
    ) -> None:
        if num_tokens <= 0:
            raise ValueError(f"num_tokens must be positive, got {num_tokens}")
        self._num_tokens = num_tokens
        self._generate_tokens = token_generator
        self._logger = logger or structlog.get_logger()

    @property
    def num_tokens(self) -> int:
        return self._num_tokens

    def on_ring_instance_register(
        self,
        lifecycler: Any,
        ring_desc: RingDesc,
        instance_exists: bool,
        instance_id: str,
        instance_desc: InstanceDesc | None,
    ) -> tuple[InstanceState, list[int]]:
        """Pick the initial state and tokens for a registering instance.

        Whatever state the instance was in, it starts again from JOINING.
        Tokens it already owned are kept in front; the rest are freshly
        generated away from every token taken in the ring. Sorting is left
        to the lifecycler.
        """
        tokens: list[int] = []
        if instance_exists and instance_desc is not None:
            tokens = instance_desc.get_tokens()

        _, taken_tokens = ring_desc.tokens_for(instance_id)
        new_tokens = self._generate_tokens(self._num_tokens - len(tokens), taken_tokens)

        self._logger.debug(
            "ring_instance_registering",
            instance_id=instance_id,
            instance_exists=instance_exists,
            inherited_tokens=len(tokens),
            new_tokens=len(new_tokens),
        )

        return InstanceState.JOINING, tokens + list(new_tokens)

    def on_ring_instance_tokens(self, lifecycler: Any, tokens: list[int]) -> None:
        pass

    def on_ring_instance_stopping(self, lifecycler: Any) -> None:
        pass

    def on_ring_instance_heartbeat(
        self,
        lifecycler: Any,
        ring_desc: RingDesc,
        instance_desc: InstanceDesc,
    ) -> None:
        pass
