from swagger_jsonschema.configuration import DEFAULT_DISALLOWED_KEYS, Config


def test_default_config():
    config = Config()

    assert config.debug is False
    assert config.log_file is None
    assert config.copy_definitions is True
    assert config.disallowed_keys == ["discriminator", "readOnly", "xml", "externalDocs", "example"]
    assert config.extension_prefix == "x-"


def test_default_disallowed_keys_are_not_shared():
    config = Config()
    config.disallowed_keys.append("deprecated")

    assert "deprecated" not in DEFAULT_DISALLOWED_KEYS
    assert "deprecated" not in Config().disallowed_keys


def test_is_extension():
    config = Config()

    assert config.is_extension("x-nullable")
    assert not config.is_extension("xml")
    assert Config(extension_prefix="vendor-").is_extension("vendor-id")
