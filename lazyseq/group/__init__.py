from .key_by import key_by, key_first_by, key_last_by, map_key_by, map_key_first_by, map_key_last_by

__all__ = (
    # Element values
    "key_by",
    "key_first_by",
    "key_last_by",
    # Mapped values
    "map_key_by",
    "map_key_first_by",
    "map_key_last_by",
)
