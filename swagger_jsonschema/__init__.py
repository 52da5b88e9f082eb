from .configuration import Config
from .container import ConverterContainer
from .exceptions import InvalidReferenceRoot, InvalidReferenceTarget, ReferenceNotFound, SchemaReferenceError
from .models import ReferenceLookup
from .processors import SchemaConverter, convert_schema, convert_schema_definitions
from .processors.references import (
    ReferenceScanner,
    check_schema_has_references,
    dereference,
    find_references,
    lookup_reference,
    parse_reference,
)

__all__ = [
    "Config",
    "ConverterContainer",
    "InvalidReferenceRoot",
    "InvalidReferenceTarget",
    "ReferenceNotFound",
    "SchemaReferenceError",
    "ReferenceLookup",
    "SchemaConverter",
    "convert_schema",
    "convert_schema_definitions",
    "ReferenceScanner",
    "check_schema_has_references",
    "dereference",
    "find_references",
    "lookup_reference",
    "parse_reference",
]
