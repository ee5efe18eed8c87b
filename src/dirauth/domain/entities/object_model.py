"""Base model for any object stored in a directory."""

from dataclasses import dataclass


@dataclass
class ObjectModel:
    """Storage row of a directory object.

    ``object_id`` is assigned by the mapper on insert. ``identifier`` is the
    stable string exposed to callers and is unique within its entity type.
    """

    object_id: int | None = None
    identifier: str | None = None
