import copy
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..references import dereference
from ...configuration.config import Config
from ...utils.logger import Logger

COMBINATORS = ("allOf", "anyOf", "oneOf")
SCHEMA_MAPS = ("properties", "patternProperties")


class SchemaNodeConverter:
    """Converts a Swagger schema object into a JSON Schema node."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self.logger = Logger.get_logger(__name__)

    def convert(self, schema: Dict[str, Any], swagger: Mapping[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
        """
        Converts a schema and every sub-schema it contains.

        Referenced definitions are not followed; each ``$ref`` is left in place and
        reported so the caller can copy the definitions it needs.

        Args:
            schema (dict): Swagger schema object.
            swagger (Mapping): Swagger document root, used to expand ``example`` references.

        Returns:
            The converted node and every reference met while converting it, in traversal order.
        """
        references: List[str] = []
        node = self._convert_sub_schema(schema, references, swagger)
        if references:
            self.logger.debug(f"Collected {len(references)} schema references: {', '.join(references)}")
        return node, references

    def _strip(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        return {
            key: value
            for key, value in schema.items()
            if key not in self.config.disallowed_keys and not self.config.is_extension(key)
        }

    def _convert_sub_schema(self, schema: Dict[str, Any], references: List[str], swagger: Mapping[str, Any]):
        if not isinstance(schema, dict):
            return copy.deepcopy(schema)

        if schema.get("$ref"):
            references.append(schema["$ref"])
            return {"$ref": schema["$ref"]}

        def recurse(sub_schema):
            return self._convert_sub_schema(sub_schema, references, swagger)

        actual_schema = copy.deepcopy(self._strip(schema))

        if schema.get("type") == "file":
            # file is not a valid JSON Schema type, string is the closest
            actual_schema["type"] = "string"

        if schema.get("example"):
            actual_schema["examples"] = [dereference(schema["example"], swagger)]

        if schema.get("x-nullable"):
            self._make_nullable(actual_schema)

        for combinator in COMBINATORS:
            if schema.get(combinator):
                actual_schema[combinator] = [recurse(sub_schema) for sub_schema in schema[combinator]]

        if schema.get("not"):
            actual_schema["not"] = recurse(schema["not"])

        # Array

        items = schema.get("items")
        if isinstance(items, list):
            actual_schema["items"] = [recurse(item) for item in items]
        elif items:
            actual_schema["items"] = recurse(items)

        if isinstance(schema.get("additionalItems"), dict):
            actual_schema["additionalItems"] = recurse(schema["additionalItems"])

        # Object

        for keyword in SCHEMA_MAPS:
            if schema.get(keyword):
                actual_schema[keyword] = {key: recurse(value) for key, value in schema[keyword].items()}

        if isinstance(schema.get("additionalProperties"), dict):
            actual_schema["additionalProperties"] = recurse(schema["additionalProperties"])

        return actual_schema

    @staticmethod
    def _make_nullable(schema: Dict[str, Any]) -> None:
        schema_type = schema.get("type")
        # A list type is extended in place rather than nested as [[...], "null"]
        if isinstance(schema_type, list):
            if "null" not in schema_type:
                schema_type.append("null")
        elif schema_type:
            schema["type"] = [schema_type, "null"]
        elif "enum" not in schema:
            schema["type"] = "null"
        elif isinstance(schema["enum"], list) and None not in schema["enum"]:
            schema["enum"].append(None)
