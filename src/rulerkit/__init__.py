"""
rulerkit: tenant-scoped rule management for Cortex/Mimir rulers.

Also ships the ring join policy used by multi-tenant alertmanager instances.
"""

__version__ = "0.1.0"
