"""Tests for the schema module (loader, model, registry, validator)."""

import os
from pathlib import Path

import pytest
import yaml

from ormdoc.errors import SchemaError
from ormdoc.schema.loader import load_schema, parse_classes
from ormdoc.schema.model import Category, StorageKind, base_type_name, storage_kind
from ormdoc.schema.registry import SchemaRegistry
from ormdoc.schema.validator import validate_schema


class TestLoader:
    def test_loads_fixture(self, schema):
        assert len(schema) == 9
        assert schema.list_known_classes()[:3] == ["Member", "Article", "NewsArticle"]

    def test_parses_fragments(self, schema):
        article = schema.get("Article")
        assert article.extends == "DataObject"
        assert article.db == {"Title": "Varchar(255)"}
        assert article.has_one == {"Author": "Member"}
        assert article.has_many == {}

    def test_project_defaults_to_config_parent(self, project):
        loaded = load_schema(project / "_config" / "schema.yml")
        assert loaded.project_dir == project.resolve()

    def test_single_extension_string(self):
        classes = parse_classes({"A": {"extensions": "X"}})
        assert classes["A"].extensions == ["X"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "schema.yml"
        path.write_text("")
        assert len(load_schema(path, project=tmp_path)) == 0

    def test_rejects_non_mapping(self, tmp_path):
        path = tmp_path / "schema.yml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(SchemaError):
            load_schema(path, project=tmp_path)

    def test_rejects_bad_relation_block(self):
        with pytest.raises(SchemaError, match="has_one"):
            parse_classes({"A": {"has_one": ["Member"]}})

    def test_rejects_bad_class_entry(self):
        with pytest.raises(SchemaError):
            parse_classes({"A": "DataObject"})

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "schema.yml"
        path.write_text("classes: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_schema(path, project=tmp_path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_schema(tmp_path / "nope.yml")


class TestModel:
    def test_base_type_name(self):
        assert base_type_name("Varchar(255)") == "Varchar"
        assert base_type_name("Versioned('Stage','Live')") == "Versioned"
        assert base_type_name("Int") == "Int"

    def test_storage_kind(self):
        assert storage_kind("BigInt") is StorageKind.INT
        assert storage_kind("Percentage") is StorageKind.FLOAT
        assert storage_kind("Text") is StorageKind.STRING

    def test_module(self, schema):
        assert schema.get("Article").module == "mysite"
        assert schema.get("Member").module == "framework"

    def test_extension_fragments_keyed_by_class(self, schema):
        assert schema.get("Tag").fragments(Category.EXTENSIONS) == {
            "SocialExtension": "SocialExtension('share')",
        }

    def test_owner_is_never_declared(self, schema):
        assert schema.get("SocialExtension").fragments(Category.OWNER) == {}


class TestRegistry:
    def test_own_declared_excludes_inherited(self, schema):
        fields = schema.own_declared_fragments("NewsArticle", Category.DB)
        assert fields == {"Featured": "Boolean", "Rating": "Decimal"}

    def test_ancestors(self, schema):
        assert schema.ancestors("NewsArticle") == ["Article", "DataObject"]
        assert schema.is_subclass_of("NewsArticle", "DataObject")
        assert not schema.is_subclass_of("Article", "DataExtension")

    def test_ancestors_stop_on_cycle(self):
        schema = SchemaRegistry(parse_classes({"A": {"extends": "B"}, "B": {"extends": "A"}}), "/tmp")
        assert schema.ancestors("A") == ["B"]

    def test_is_annotatable(self, schema):
        assert schema.is_annotatable("NewsArticle")
        assert schema.is_annotatable("SocialExtension")
        assert not schema.is_annotatable("ArticleController")

    def test_owners_of(self, schema):
        assert schema.owners_of("SocialExtension") == ["NewsArticle", "Tag"]
        assert schema.owners_of("Article") == []

    def test_classes_in_module(self, schema):
        assert schema.classes_in_module("mysite", "DataObject") == [
            "Article", "NewsArticle", "Comment", "Tag", "Profile", "EmptyRecord",
        ]
        assert schema.classes_in_module("mysite", "DataExtension") == ["SocialExtension"]
        assert schema.classes_in_module("framework") == ["Member"]

    def test_resolve_source_path(self, schema, project):
        assert schema.resolve_source_path("Article") == project / "mysite" / "code" / "Article.php"

    def test_resolve_missing_file(self, schema, project):
        (project / "mysite" / "code" / "Article.php").unlink()
        assert schema.resolve_source_path("Article") is None
        assert schema.resolve_source_path("Unknown") is None

    def test_resolve_read_only_file(self, schema, project, monkeypatch):
        read_only = project / "mysite" / "code" / "Article.php"
        real_access = os.access

        def access(path, mode):
            if mode == os.W_OK and Path(path) == read_only:
                return False
            return real_access(path, mode)

        monkeypatch.setattr("ormdoc.schema.registry.os.access", access)
        assert schema.resolve_source_path("Article") is None
        assert schema.resolve_source_path("Comment") is not None


class TestValidator:
    def test_fixture_passes_with_warnings(self, schema):
        result = validate_schema(schema)
        assert result.passed
        assert result.total_classes == 9
        assert any("Controller" in w for w in result.warnings)
        assert "9 classes checked" in result.summary()

    def test_name_collision(self):
        schema = SchemaRegistry(parse_classes({
            "A": {"extends": "DataObject", "file": "m/A.php",
                  "db": {"Author": "Varchar"}, "has_one": {"Author": "A"}},
        }), "/tmp")
        result = validate_schema(schema)
        assert not result.passed
        assert "'Author' declared in db, has_one" in result.errors[0]

    def test_cycle(self):
        schema = SchemaRegistry(parse_classes({
            "A": {"extends": "B", "file": "m/A.php"},
            "B": {"extends": "A", "file": "m/B.php"},
        }), "/tmp")
        result = validate_schema(schema)
        assert any("cycle" in e for e in result.errors)

    def test_unknown_targets_and_missing_file(self):
        schema = SchemaRegistry(parse_classes({
            "A": {"extends": "DataObject", "has_many": {"Items": "Ghost"}, "extensions": ["Mix('x')"]},
        }), "/tmp")
        result = validate_schema(schema)
        assert result.passed
        assert any("Ghost" in w for w in result.warnings)
        assert any("extension 'Mix'" in w for w in result.warnings)
        assert any("no source file" in w for w in result.warnings)

    def test_clean_schema(self):
        schema = SchemaRegistry(parse_classes({
            "A": {"extends": "DataObject", "file": "m/A.php", "has_one": {"Self": "A"}},
        }), "/tmp")
        assert "All checks passed." in validate_schema(schema).summary()
