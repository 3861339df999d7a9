"""
Hash ring descriptor types and token generation.
"""

from rulerkit.ring.models import (
    MAX_TOKEN,
    InstanceDesc,
    InstanceState,
    RingDesc,
    generate_tokens,
)

__all__ = [
    "MAX_TOKEN",
    "InstanceDesc",
    "InstanceState",
    "RingDesc",
    "generate_tokens",
]
