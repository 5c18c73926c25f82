from clictx.storage.paths import RESERVED_PREFIX


def validate_context_name(name):
    """Check a user-supplied context name. Returns the name or raises ValueError."""
    if name is None or not name.strip():
        raise ValueError("Context name cannot be empty")
    if name != name.strip():
        raise ValueError("Context name cannot start or end with whitespace")
    if name.startswith(RESERVED_PREFIX):
        raise ValueError(f"Context names starting with '{RESERVED_PREFIX}' are reserved")
    if name in (".", "..") or "/" in name or "\\" in name:
        raise ValueError(f"Invalid context name: {name!r}")
    return name
