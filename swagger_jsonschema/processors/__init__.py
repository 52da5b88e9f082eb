from .swagger_schema_converter import SchemaConverter, convert_schema, convert_schema_definitions

__all__ = [
    "SchemaConverter",
    "convert_schema",
    "convert_schema_definitions",
]
