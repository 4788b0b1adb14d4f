from json_schema_to_dart.pipeline import CodeGeneratorConfig


class TestCodeGeneratorConfig:
    def test_defaults(self):
        config = CodeGeneratorConfig()
        assert config.ignore_classes == []
        assert config.add_generation_comment
        assert config.enums_dir_name == "enums"
        assert config.file_extension == "dart"
        assert config.deep_collection_equality
        assert not config.enum_wire_values
        assert config.validate_before_write

    def test_from_dict_ignores_unknown_keys(self):
        config = CodeGeneratorConfig.from_dict({"enum_wire_values": True, "language": "cs"})
        assert config.enum_wire_values
        assert not hasattr(config, "language")

    def test_dict_roundtrip(self):
        config = CodeGeneratorConfig(ignore_classes=["A"], global_ignore_fields=["id"], enums_dir_name="types")
        assert CodeGeneratorConfig.from_dict(config.to_dict()) == config
