"""Path separator helpers."""


def to_posix_path(path: str) -> str:
    """Convert Windows backslash separators to forward slashes.

    Only the separators change; ``.`` segments, repeated separators and a
    trailing separator are kept as they are.
    """
    return path.replace("\\", "/")
