"""Pytest configuration and fixtures for modelgraph tests."""

import json
from datetime import datetime

import pytest

from modelgraph.config import ModelGraphConfig, OutputConfig
from modelgraph.graph import GraphBuilder
from modelgraph.models import InMemoryModelSource


@pytest.fixture
def config():
    """Configuration without timestamping so output is reproducible."""
    return ModelGraphConfig(output=OutputConfig(timestamp=""))


@pytest.fixture
def builder(config):
    """Graph builder using the reproducible configuration."""
    return GraphBuilder(config)


@pytest.fixture
def blog_source():
    """Small application with a Blog namespace."""
    return InMemoryModelSource({
        "Users": [("oneToMany", "Blog.Posts"), ("oneToOne", "Profiles")],
        "Profiles": [("manyToOne", "Users")],
        "Blog.Posts": [("manyToOne", "Users"), ("manyToMany", "Blog.Tags")],
        "Blog.Tags": [("manyToMany", "Blog.Posts")],
    })


@pytest.fixture
def manifest_file(tmp_path):
    """Model manifest on disk mirroring blog_source."""
    manifest = {
        "models": [
            {"name": "Users", "associations": [
                {"kind": "hasMany", "target": "Blog.Posts", "alias": "Articles"},
                {"kind": "hasOne", "target": "Profiles"},
            ]},
            {"name": "Profiles", "associations": [
                {"kind": "belongsTo", "target": "Users"},
            ]},
            {"name": "Blog.Posts", "associations": [
                {"kind": "belongsTo", "target": "Users", "alias": "Authors"},
                {"kind": "belongsToMany", "target": "Blog.Tags"},
            ]},
            {"name": "Blog.Tags", "associations": [
                {"kind": "belongsToMany", "target": "Blog.Posts"},
            ]},
            {"name": "DebugKit.Panels"},
        ]
    }
    path = tmp_path / "models.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return path


@pytest.fixture
def fixed_clock():
    """Clock returning a fixed moment."""
    return lambda: datetime(2024, 5, 17, 9, 30, 0)
