from typing import Any, Mapping, Optional

from ...exceptions import InvalidReferenceRoot, InvalidReferenceTarget, ReferenceNotFound
from ...models import ReferenceLookup

DOCUMENT_ROOT = "#"
DEFINITIONS = "definitions"

# ['#', 'definitions']
ROOT_DEPTH = 2
DEFINITION_DEPTH = 3


def parse_reference(reference: str) -> str:
    """Returns the definition id of a bare ``#/definitions/<id>`` reference."""
    parts = reference.split("/")

    if parts[0] != DOCUMENT_ROOT:
        raise InvalidReferenceRoot(reference)

    if len(parts) != DEFINITION_DEPTH or parts[1] != DEFINITIONS:
        raise InvalidReferenceTarget(reference)

    return parts[2]


def _child(value: Any, key: str) -> Any:
    if isinstance(value, Mapping):
        if key not in value:
            raise KeyError(key)
        return value[key]
    if isinstance(value, list) and key.isdigit():
        return value[int(key)]
    raise KeyError(key)


def lookup_reference(reference: str, root: Mapping[str, Any], depth: Optional[int] = None) -> ReferenceLookup:
    """
    Resolves a reference in the given root document.

    An optional depth limits resolution to a certain level. For example
    ``#/definitions/User/properties/name`` looked up with a depth of 3 resolves
    to ``#/definitions/User`` only.

    Args:
        reference (str): Reference such as ``#/definitions/User/properties/name``.
        root (Mapping): Document holding the ``definitions`` to resolve against.
        depth (int, optional): Number of reference segments to resolve.

    Returns:
        ReferenceLookup: The top-level definition id and the resolved value.

    Raises:
        InvalidReferenceRoot: The reference does not start with ``#``.
        InvalidReferenceTarget: The reference does not point into ``#/definitions``.
        ReferenceNotFound: A segment of the reference does not exist.
    """
    parts = reference.split("/")

    if parts[0] != DOCUMENT_ROOT:
        raise InvalidReferenceRoot(reference)

    if len(parts) < ROOT_DEPTH or parts[1] != DEFINITIONS:
        raise InvalidReferenceTarget(reference)

    segments = parts[ROOT_DEPTH:]
    definition_id = segments[0] if segments else None

    value = root.get(DEFINITIONS) if isinstance(root, Mapping) else None
    if value is None:
        raise ReferenceNotFound(reference)

    current_depth = ROOT_DEPTH
    for key in segments:
        try:
            value = _child(value, key)
        except (KeyError, IndexError):
            raise ReferenceNotFound(reference) from None
        current_depth += 1

        if depth and depth == current_depth:
            break

    return ReferenceLookup(id=definition_id, referenced=value)
