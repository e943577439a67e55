"""Tests for the model renderer."""

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from model_reflection import (
    DateTime,
    IncompleteModelError,
    Integer,
    ModelMetadata,
    PropertyMetadata,
    RelationshipKind,
    RelationshipMetadata,
    Serial,
    String,
    UnsupportedRelationshipError,
)
from model_reflection.builders.model import ModelRenderer, render_model, to_source_text


def _model(**kwargs) -> ModelMetadata:
    defaults = {
        "name": "Widget",
        "properties": [
            PropertyMetadata(name="id", type=Serial),
            PropertyMetadata(name="label", type=String),
            PropertyMetadata(name="owner_id", type=Integer),
        ],
    }
    defaults.update(kwargs)
    return ModelMetadata(**defaults)


class TestPartitioning:
    """Tests for splitting properties into sections."""

    def test_key_properties(self) -> None:
        renderer = ModelRenderer(_model())
        assert [prop.name for prop in renderer.key_properties] == ["id"]

    def test_foreign_keys_are_never_detected(self) -> None:
        """Properties ending in _id are still regular properties."""
        renderer = ModelRenderer(_model())
        assert renderer.foreign_key_properties == []
        assert [prop.name for prop in renderer.regular_properties] == ["label", "owner_id"]

    def test_explicit_key_order(self) -> None:
        """Explicit key names set the order of the key section."""
        model = ModelMetadata(
            name="Pair",
            properties=[
                PropertyMetadata(name="left_id", type=Integer),
                PropertyMetadata(name="right_id", type=Integer),
                PropertyMetadata(name="weight", type=Integer),
            ],
            key_names=["right_id", "left_id"],
        )
        source = render_model(model)

        assert source == (
            "class Pair\n"
            "\n"
            "  include DataMapper::Resource\n"
            "\n"
            "  property :right_id, Integer\n"
            "  property :left_id, Integer\n"
            "\n"
            "  property :weight, Integer\n"
            "\n"
            "\n"
            "end\n"
        )

    def test_relationships_grouped_by_kind(self) -> None:
        """Relationships are grouped by kind, keeping their order within a kind."""
        model = _model(
            relationships=[
                RelationshipMetadata(name="tags", kind=RelationshipKind.MANY_TO_MANY, options={"through": "taggings"}),
                RelationshipMetadata(name="parts", kind=RelationshipKind.ONE_TO_MANY),
                RelationshipMetadata(name="manual", kind=RelationshipKind.ONE_TO_ONE, min=1, max=1),
                RelationshipMetadata(name="owner", kind=RelationshipKind.MANY_TO_ONE, min=1, max=1),
                RelationshipMetadata(name="taggings", kind=RelationshipKind.ONE_TO_MANY),
            ]
        )
        renderer = ModelRenderer(model)

        assert [r.name for r in renderer.relationships_of(RelationshipKind.ONE_TO_MANY)] == ["parts", "taggings"]
        assert [r.name for r in renderer.relationships_of(RelationshipKind.MANY_TO_MANY)] == ["tags"]

        lines = [line.strip() for line in renderer.render().splitlines() if line.startswith("  ")]
        assert lines[-5:] == [
            "belongs_to :owner",
            "has 1, :manual",
            "has 0..n, :parts",
            "has 0..n, :taggings",
            "has 0..n, :tags, :through => :taggings",
        ]


class TestLayout:
    """Tests for the blank lines between sections."""

    def test_model_with_only_a_key(self) -> None:
        model = ModelMetadata(name="Token", properties=[PropertyMetadata(name="id", type=Serial)])
        assert render_model(model) == (
            "class Token\n\n  include DataMapper::Resource\n\n  property :id, Serial\n\n\n\nend\n"
        )

    def test_functional_alias(self) -> None:
        model = _model()
        assert to_source_text(model) == model.to_source_text() == render_model(model)

    def test_duck_typed_model(self) -> None:
        """Any object exposing name, properties, key and relationships can be rendered."""
        key = PropertyMetadata(name="id", type=Serial)
        stamp = PropertyMetadata(name="created_at", type=DateTime)
        model = SimpleNamespace(name="Event", properties=[key, stamp], key=[key], relationships={})

        assert render_model(model).splitlines()[4:7] == ["  property :id, Serial", "", "  property :created_at, DateTime"]


class TestErrors:
    """Tests for models that cannot be rendered."""

    def test_incomplete_model(self) -> None:
        model = ModelMetadata(name="Keyless", properties=[PropertyMetadata(name="label", type=String)])
        renderer = ModelRenderer(model)

        assert renderer.is_complete() is False
        with pytest.raises(IncompleteModelError, match="Keyless"):
            renderer.render()

    def test_unknown_relationship_kind(self) -> None:
        """An unknown relationship kind fails the whole model."""
        odd = SimpleNamespace(name="friends", kind="polymorphic", min=0, max=None, options={})
        key = PropertyMetadata(name="id", type=Serial)
        model = SimpleNamespace(name="User", properties=[key], key=[key], relationships={"friends": odd})

        with pytest.raises(UnsupportedRelationshipError):
            render_model(model)


def test_logs_rendered_model(caplog) -> None:
    """Rendering a model logs a summary."""
    with caplog.at_level(logging.INFO, logger="model_reflection.builders.model"):
        render_model(_model())
    assert "Rendered Widget: 1 keys, 2 properties, 0 relationships" in caplog.text
