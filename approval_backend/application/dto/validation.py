from typing import Any, Iterable, Mapping

# Request-level location prefixes that mean nothing to the caller
_LOCATION_PREFIXES = {"body", "query", "path", "header"}


def describe_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """
    Flatten pydantic error dicts into one readable line.

    e.g. ``password: String should have at least 8 characters; email: value is not a valid email address``
    """
    parts = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES]
        message = error.get("msg", "Invalid value")
        parts.append(f"{'.'.join(location)}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"
