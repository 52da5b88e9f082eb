from typing import Any, Dict, List

COMBINATORS = ("allOf", "anyOf", "oneOf")
SCHEMA_MAPS = ("properties", "patternProperties")


class ReferenceScanner:
    """Finds the references a schema pulls in without modifying it."""

    def find_references(self, schema: Dict[str, Any]) -> List[str]:
        """Traverses the schema keywords and returns each reference found, in traversal order."""
        if not isinstance(schema, dict):
            return []

        if schema.get("$ref"):
            return [schema["$ref"]]

        references: List[str] = []

        for combinator in COMBINATORS:
            for sub_schema in schema.get(combinator) or []:
                references.extend(self.find_references(sub_schema))

        if schema.get("not"):
            references.extend(self.find_references(schema["not"]))

        # Array

        items = schema.get("items")
        if isinstance(items, list):
            for item in items:
                references.extend(self.find_references(item))
        elif items:
            references.extend(self.find_references(items))

        if isinstance(schema.get("additionalItems"), dict):
            references.extend(self.find_references(schema["additionalItems"]))

        # Object

        for keyword in SCHEMA_MAPS:
            for sub_schema in (schema.get(keyword) or {}).values():
                references.extend(self.find_references(sub_schema))

        if isinstance(schema.get("additionalProperties"), dict):
            references.extend(self.find_references(schema["additionalProperties"]))

        return references

    def check_schema_has_references(self, schema: Any) -> bool:
        """Returns True if any value in the schema, at any depth, is a reference."""
        if isinstance(schema, list):
            return any(self.check_schema_has_references(item) for item in schema)

        if not isinstance(schema, dict):
            return False

        if schema.get("$ref"):
            return True

        return any(self.check_schema_has_references(value) for value in schema.values())


def find_references(schema: Dict[str, Any]) -> List[str]:
    return ReferenceScanner().find_references(schema)


def check_schema_has_references(schema: Any) -> bool:
    return ReferenceScanner().check_schema_has_references(schema)
