"""
models/ - Domain Layer
======================
Plain dataclasses for the entities the repositories read and write.
"""
