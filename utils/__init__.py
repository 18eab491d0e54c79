"""
utils/ - Shared Helpers
=======================
Logging setup and SQL fragment builders used across layers.
"""
