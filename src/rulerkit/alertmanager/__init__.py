"""
Ring lifecycle hooks for multi-tenant alertmanager instances.
"""

from rulerkit.alertmanager.lifecycle import (
    RING_NUM_TOKENS,
    AlertmanagerRingDelegate,
    BasicLifecyclerDelegate,
)

__all__ = [
    "RING_NUM_TOKENS",
    "AlertmanagerRingDelegate",
    "BasicLifecyclerDelegate",
]
