from typing import Any, List, Mapping, Optional, Sequence

from .reference_resolver import lookup_reference
from ...utils.logger import Logger

logger = Logger.get_logger(__name__)


def _is_reference(value: Any) -> bool:
    return isinstance(value, Mapping) and isinstance(value.get("$ref"), str)


def dereference(
    value: Any,
    root: Mapping[str, Any],
    expanding: Optional[Sequence[str]] = None,
    path: Optional[Sequence[str]] = None,
) -> Any:
    """
    Returns a copy of ``value`` with every ``{"$ref": ...}`` node replaced by its target.

    A reference already being expanded further up the current chain is replaced
    with ``None``, so self and mutually recursive definitions terminate.

    Args:
        value: Any JSON-like value, typically a Swagger ``example``.
        root: Document holding the ``definitions`` the references point into.
        expanding: Reference strings (not key paths) being expanded on the current chain.
        path: Key path of ``value``; restarts at the reference segments after each
            followed reference.
    """
    if value is None:
        return value

    visited: List[str] = list(expanding or [])
    current_path: List[str] = list(path or [])

    if _is_reference(value):
        reference = value["$ref"]

        if reference in visited:
            logger.debug(f"Circular reference {reference} at {'/'.join(current_path) or '#'} replaced with null")
            return None

        lookup = lookup_reference(reference, root)
        return dereference(lookup.referenced, root, visited + [reference], reference.split("/"))

    if isinstance(value, list):
        return [dereference(item, root, visited, current_path) for item in value]

    if isinstance(value, Mapping):
        return {key: dereference(item, root, visited, current_path + [key]) for key, item in value.items()}

    return value
