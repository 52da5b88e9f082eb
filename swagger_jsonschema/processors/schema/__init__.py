from .definition_closure_builder import DefinitionClosureBuilder
from .root_reference_normalizer import RootReferenceNormalizer
from .schema_node_converter import SchemaNodeConverter

__all__ = [
    "DefinitionClosureBuilder",
    "RootReferenceNormalizer",
    "SchemaNodeConverter",
]
