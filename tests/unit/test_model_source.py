"""Tests for model sources and the model manifest."""

import json

import pytest

from modelgraph.models import (
    InMemoryModelSource,
    JsonModelSource,
    ModelManifest,
    ModelSourceError,
)
from modelgraph.models.source import is_excluded
from modelgraph.utils import qualify, split_identifier, strip_namespace


class TestIdentifiers:
    """Test model identifier helpers."""

    def test_split_default_namespace(self):
        assert split_identifier("Users") == ("", "Users")

    def test_split_namespaced(self):
        assert split_identifier("Blog.Posts") == ("Blog", "Posts")

    def test_split_keeps_nested_name(self):
        assert split_identifier("Blog.Admin.Posts") == ("Blog", "Admin.Posts")

    def test_qualify(self):
        assert qualify("", "Users") == "Users"
        assert qualify("Blog", "Posts") == "Blog.Posts"

    def test_strip_namespace(self):
        assert strip_namespace("Blog.Posts", "Blog") == "Posts"
        assert strip_namespace("Blog.Posts", "Shop") == "Blog.Posts"
        assert strip_namespace("Users", "") == "Users"


class TestModelManifest:
    """Test manifest validation."""

    def test_duplicate_models_rejected(self):
        with pytest.raises(ValueError, match="duplicate"):
            ModelManifest(models=[{"name": "Users"}, {"name": "Users"}])

    def test_invalid_identifier_rejected(self):
        with pytest.raises(ValueError):
            ModelManifest(models=[{"name": ".Users"}])

    def test_colon_in_identifier_rejected(self):
        with pytest.raises(ValueError, match="invalid model identifier"):
            ModelManifest(models=[{"name": "legend:Users"}])


class TestInMemoryModelSource:
    """Test the in-memory model source."""

    def test_list_models_preserves_order(self, blog_source):
        assert blog_source.list_models() == ["Users", "Profiles", "Blog.Posts", "Blog.Tags"]

    def test_associations(self, blog_source):
        assert blog_source.associations("Profiles") == [("manyToOne", "Users")]

    def test_unknown_model_raises(self, blog_source):
        with pytest.raises(ModelSourceError, match="Unknown model"):
            blog_source.associations("Comments")

    def test_exclude_namespace(self):
        source = InMemoryModelSource({"Users": [], "DebugKit.Panels": []}, exclude=["DebugKit"])
        assert source.list_models() == ["Users"]


class TestJsonModelSource:
    """Test the JSON manifest model source."""

    def test_list_models(self, manifest_file):
        source = JsonModelSource(manifest_file)
        assert source.list_models() == ["Users", "Profiles", "Blog.Posts", "Blog.Tags", "DebugKit.Panels"]

    def test_list_models_with_exclusions(self, manifest_file):
        source = JsonModelSource(manifest_file, exclude=["DebugKit", "Prof*"])
        assert source.list_models() == ["Users", "Blog.Posts", "Blog.Tags"]

    def test_associations_use_real_models(self, manifest_file):
        source = JsonModelSource(manifest_file)
        assert source.associations("Users") == [("hasMany", "Blog.Posts"), ("hasOne", "Profiles")]

    def test_associations_use_alias_when_real_models_disabled(self, manifest_file):
        source = JsonModelSource(manifest_file, real_models=False)
        assert source.associations("Users") == [("hasMany", "Articles"), ("hasOne", "Profiles")]

    def test_model_without_associations(self, manifest_file):
        source = JsonModelSource(manifest_file)
        assert source.associations("DebugKit.Panels") == []

    def test_unknown_model_raises(self, manifest_file):
        source = JsonModelSource(manifest_file)
        with pytest.raises(ModelSourceError):
            source.associations("Comments")

    def test_missing_manifest(self, tmp_path):
        with pytest.raises(ModelSourceError, match="not found"):
            JsonModelSource(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "models.json"
        path.write_text("{ not json")
        with pytest.raises(ModelSourceError, match="Invalid JSON"):
            JsonModelSource(path)

    def test_invalid_manifest(self, tmp_path):
        path = tmp_path / "models.json"
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"models": [{"name": "Users", "associations": [{"kind": "hasMany"}]}]}, f)
        with pytest.raises(ModelSourceError, match="Invalid model manifest"):
            JsonModelSource(path)

    def test_undecodable_manifest(self, tmp_path):
        path = tmp_path / "models.json"
        path.write_bytes(b'{"models": [{"name": "Us\xffers"}]}')
        with pytest.raises(ModelSourceError, match="Cannot read model manifest"):
            JsonModelSource(path)

    def test_manifest_path_is_directory(self, tmp_path):
        with pytest.raises(ModelSourceError, match="Cannot read model manifest"):
            JsonModelSource(tmp_path)


class TestExclusion:
    """Test exclusion pattern matching."""

    @pytest.mark.parametrize("identifier,patterns,expected", [
        ("Users", [], False),
        ("Users", ["Users"], True),
        ("Migrations.Phinxlog", ["Migrations"], True),
        ("Blog.Posts", ["Blog.*"], True),
        ("Blog.Posts", ["*.Tags"], False),
        ("Users", ["users"], False),
    ])
    def test_is_excluded(self, identifier, patterns, expected):
        assert is_excluded(identifier, patterns) is expected
