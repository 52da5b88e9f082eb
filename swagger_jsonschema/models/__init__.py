from swagger_jsonschema.models.reference_lookup import ReferenceLookup

__all__ = [
    "ReferenceLookup",
]
