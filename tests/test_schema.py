"""
Tests for building artifact bundles from raw catalog records.
"""

import dataclasses

import pytest

from modelgen.codegen.core.exceptions import TypeMappingError
from modelgen.codegen.core.reader import SchemaReader
from modelgen.codegen.core.schema import Field, TableInfo, build_bundle, build_bundles
from modelgen.codegen.languages.go.types import map_column_type


@pytest.fixture
def user_table():
    return TableInfo("user_account", "User table")


@pytest.fixture
def user_fields():
    return [
        Field("id", "primary key", "int", "NO", "int(11)", 0),
        Field("create_time", "", "datetime", "YES", "datetime", 0),
    ]


class TestBuildBundle:
    """Test the per-table bundle."""

    def test_fields_are_normalized(self, user_table, user_fields):
        bundle = build_bundle(user_table, user_fields, "model", map_column_type)

        assert [f.name for f in bundle.fields] == ["ID", "CreateTime"]
        assert [f.type for f in bundle.fields] == ["int", "time.Time"]
        assert [f.column_name for f in bundle.fields] == ["id", "create_time"]
        assert [f.nullable for f in bundle.fields] == [False, True]

    def test_tags_come_from_raw_names(self, user_table, user_fields):
        bundle = build_bundle(user_table, user_fields, "model", map_column_type)

        assert bundle.tag_fields == ("id", "createTime")
        assert bundle.tag_fields == tuple(f.tag for f in bundle.fields)

    def test_table_names(self, user_table, user_fields):
        bundle = build_bundle(user_table, user_fields, "entity", map_column_type)

        assert bundle.origin_table_name == "user_account"
        assert bundle.package_name == "entity"
        assert bundle.table.name == "UserAccount"
        assert bundle.table.origin_name == "user_account"
        assert bundle.table.comment == "User table"

    def test_raw_records_are_untouched(self, user_table, user_fields):
        build_bundle(user_table, user_fields, "model", map_column_type)

        assert user_table.name == "user_account"
        assert user_fields[1].name == "create_time"
        assert user_fields[1].type == "datetime"
        with pytest.raises(dataclasses.FrozenInstanceError):
            user_fields[0].name = "ID"

    def test_unmapped_type_stops_the_build(self, user_table):
        fields = [Field("payload", "", "json", "YES", "json", 0)]
        with pytest.raises(TypeMappingError, match="json not convert"):
            build_bundle(user_table, fields, "model", map_column_type)

    def test_context_for_templates(self, user_table, user_fields):
        context = build_bundle(user_table, user_fields, "model", map_column_type).to_context()

        assert context["table_name"] == "user_account"
        assert context["package_name"] == "model"
        assert context["table"].name == "UserAccount"
        assert context["tag_fields"] == ["id", "createTime"]
        assert len(context["fields"]) == 2


def test_build_bundles_keeps_catalog_order(blog_catalog, catalog_engine):
    bundles = build_bundles(SchemaReader(catalog_engine), "blog", "model", map_column_type)

    assert [b.origin_table_name for b in bundles] == ["article", "user"]
    assert [f.tag for f in bundles[0].fields] == ["id", "title", "isDraft", "updateTime"]
    assert bundles[0].table.comment == "article"
