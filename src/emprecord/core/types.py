"""Core type definitions for emprecord."""

type Copy[T] = T
"""Type alias indicating a value is an independent copy.

When you see `Copy[T]` in a return type, the returned record was produced by
copy-construction. It owns its own fields and counts as a live record of its
own: mutating it never affects the source, and it must be destroyed separately.
"""
