"""Tests for relation collection."""

import logging

import pytest

from modelgraph.graph import RelationCollector, RelationKind
from modelgraph.models import InMemoryModelSource, ModelSourceError


class TestRelationCollector:
    """Test RelationCollector."""

    def test_collect_groups_by_namespace_and_model(self, blog_source):
        collector = RelationCollector(blog_source)
        relations = collector.collect(blog_source.list_models())

        assert relations == {
            "": {
                "Users": {
                    RelationKind.ONE_TO_MANY: ["Blog.Posts"],
                    RelationKind.ONE_TO_ONE: ["Profiles"],
                },
                "Profiles": {RelationKind.MANY_TO_ONE: ["Users"]},
            },
            "Blog": {
                "Posts": {
                    RelationKind.MANY_TO_ONE: ["Users"],
                    RelationKind.MANY_TO_MANY: ["Blog.Tags"],
                },
                "Tags": {RelationKind.MANY_TO_MANY: ["Blog.Posts"]},
            },
        }
        assert collector.skipped == []

    def test_preserves_report_order_and_duplicates(self):
        source = InMemoryModelSource({
            "Orders": [("hasMany", "Items"), ("hasMany", "Payments"), ("hasMany", "Items")],
        })
        relations = RelationCollector(source).collect(["Orders"])
        assert relations[""]["Orders"][RelationKind.ONE_TO_MANY] == ["Items", "Payments", "Items"]

    def test_model_without_associations_contributes_nothing(self):
        source = InMemoryModelSource({"Users": [], "Logs": []})
        assert RelationCollector(source).collect(["Users", "Logs"]) == {}

    def test_unknown_kind_is_skipped_and_logged(self, caplog):
        source = InMemoryModelSource({
            "Users": [("polymorphic", "Comments"), ("hasMany", "Posts")],
        })
        collector = RelationCollector(source)

        with caplog.at_level(logging.WARNING):
            relations = collector.collect(["Users"])

        assert relations == {"": {"Users": {RelationKind.ONE_TO_MANY: ["Posts"]}}}
        assert len(collector.skipped) == 1
        skipped = collector.skipped[0]
        assert (skipped.model, skipped.kind, skipped.target) == ("Users", "polymorphic", "Comments")
        assert "unknown relation kind 'polymorphic'" in caplog.text

    def test_source_errors_propagate(self):
        source = InMemoryModelSource({"Users": []})
        with pytest.raises(ModelSourceError):
            RelationCollector(source).collect(["Users", "Broken"])
