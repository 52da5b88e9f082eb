from dependency_injector import containers, providers

from .configuration.config import Config
from .processors.references import ReferenceScanner
from .processors.schema import DefinitionClosureBuilder, RootReferenceNormalizer, SchemaNodeConverter
from .processors.swagger_schema_converter import SchemaConverter


class ConverterContainer(containers.DeclarativeContainer):
    """Container wiring the schema conversion components."""

    config = providers.Singleton(Config)

    scanner = providers.Factory(ReferenceScanner)
    node_converter = providers.Factory(SchemaNodeConverter, config=config)
    closure_builder = providers.Factory(DefinitionClosureBuilder, scanner=scanner)
    root_normalizer = providers.Factory(RootReferenceNormalizer, scanner=scanner)

    schema_converter = providers.Factory(
        SchemaConverter,
        config=config,
        node_converter=node_converter,
        closure_builder=closure_builder,
        root_normalizer=root_normalizer,
    )
