from .dereferencer import dereference
from .reference_resolver import lookup_reference, parse_reference
from .reference_scanner import ReferenceScanner, check_schema_has_references, find_references

__all__ = [
    "dereference",
    "lookup_reference",
    "parse_reference",
    "ReferenceScanner",
    "check_schema_has_references",
    "find_references",
]
