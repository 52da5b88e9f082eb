from typing import Any, Dict, Mapping, Optional

from .references import ReferenceScanner
from .schema import DefinitionClosureBuilder, RootReferenceNormalizer, SchemaNodeConverter
from ..configuration.config import Config
from ..exceptions import SchemaReferenceError
from ..utils.logger import Logger


class SchemaConverter:
    """Converts Swagger schemas to JSON Schema by orchestrating node conversion and definition copying."""

    def __init__(
        self,
        config: Optional[Config] = None,
        node_converter: Optional[SchemaNodeConverter] = None,
        closure_builder: Optional[DefinitionClosureBuilder] = None,
        root_normalizer: Optional[RootReferenceNormalizer] = None,
    ):
        """
        Initialize the SchemaConverter.

        Args:
            config (Config): Conversion settings.
            node_converter (SchemaNodeConverter): Converts one schema and reports its references.
            closure_builder (DefinitionClosureBuilder): Copies every reachable definition.
            root_normalizer (RootReferenceNormalizer): Rewrites schemas that are a bare reference.
        """
        self.config = config or Config()
        scanner = ReferenceScanner()
        self.node_converter = node_converter or SchemaNodeConverter(self.config)
        self.closure_builder = closure_builder or DefinitionClosureBuilder(scanner)
        self.root_normalizer = root_normalizer or RootReferenceNormalizer(scanner)
        self.logger = Logger.get_logger(__name__)

    def convert_schema(
        self,
        schema: Dict[str, Any],
        root: Mapping[str, Any],
        swagger: Mapping[str, Any],
        copy_definitions: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Convert a Swagger schema to JSON Schema.

        Args:
            schema (dict): The Swagger schema to convert.
            root (Mapping): The document root holding the JSON Schema definitions.
            swagger (Mapping): The Swagger document root holding the Swagger definitions.
            copy_definitions (bool, optional): Whether to copy the referenced definitions
                into the result. Defaults to ``Config.copy_definitions``.

        Returns:
            dict: The JSON Schema, with a ``definitions`` section when references were copied.
        """
        if copy_definitions is None:
            copy_definitions = self.config.copy_definitions

        try:
            result, references = self.node_converter.convert(schema, swagger)

            if not copy_definitions:
                return result

            if references:
                result["definitions"] = self.closure_builder.build(references, root)

            return self.root_normalizer.normalize(result, root)
        except SchemaReferenceError as e:
            self.logger.error(f"Error converting schema: {e}")
            raise

    def convert_schema_definitions(self, definitions: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Converts each definition on its own, leaving references between them in place."""
        json_schema_definitions: Dict[str, Any] = {}

        if definitions:
            root = {"definitions": definitions}
            for key, schema in definitions.items():
                json_schema_definitions[key] = self.convert_schema(schema, root, root, copy_definitions=False)

        self.logger.debug(f"Converted {len(json_schema_definitions)} definitions")
        return json_schema_definitions

    def convert_document(self, swagger: Mapping[str, Any]) -> Dict[str, Any]:
        """Converts the definitions section of an in-memory Swagger document."""
        return self.convert_schema_definitions(swagger.get("definitions"))


def convert_schema(
    schema: Dict[str, Any],
    root: Mapping[str, Any],
    swagger: Mapping[str, Any],
    copy_definitions: bool = True,
) -> Dict[str, Any]:
    return SchemaConverter().convert_schema(schema, root, swagger, copy_definitions)


def convert_schema_definitions(definitions: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    return SchemaConverter().convert_schema_definitions(definitions)
