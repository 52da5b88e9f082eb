from swagger_jsonschema.processors.schema import RootReferenceNormalizer


def test_normalize_leaves_other_schemas():
    result = {"type": "object"}

    assert RootReferenceNormalizer().normalize(result, {"definitions": {}}) is result


def test_normalize_inlines_definition_without_references():
    root = {"definitions": {"Tag": {"type": "string"}}}
    result = {"$ref": "#/definitions/Tag", "definitions": {"Tag": {"type": "string"}}}

    assert RootReferenceNormalizer().normalize(result, root) == {"type": "string"}


def test_normalize_wraps_definition_with_references():
    node = {"properties": {"next": {"$ref": "#/definitions/Node"}}}
    root = {"definitions": {"Node": node}}
    result = {"$ref": "#/definitions/Node", "definitions": {"Node": node}}

    assert RootReferenceNormalizer().normalize(result, root) == {
        "allOf": [{"$ref": "#/definitions/Node"}],
        "definitions": {"Node": node},
    }


def test_normalize_sub_path_reference_inlines_whole_definition():
    user = {"type": "object", "properties": {"name": {"type": "string"}}}
    root = {"definitions": {"User": user}}
    result = {"$ref": "#/definitions/User/properties/name", "definitions": {"User": user}}

    assert RootReferenceNormalizer().normalize(result, root) == user
