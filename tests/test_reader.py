"""
Tests for catalog queries.
"""

from pathlib import Path

import pytest
from sqlalchemy import text

from modelgen.codegen.core.config import GeneratorConfig
from modelgen.codegen.core.exceptions import DatabaseConnectionError, SchemaReadError
from modelgen.codegen.core.reader import SchemaReader, build_url, connect_database
from modelgen.codegen.core.schema import Field, TableInfo
from modelgen.codegen.languages.go import GoModelGenerator


class TestGetTables:
    """Test listing base tables."""

    def test_tables_sorted_by_name(self, blog_catalog, catalog_engine):
        tables = SchemaReader(catalog_engine).get_tables("blog")
        assert [t.name for t in tables] == ["article", "user"]

    def test_comment_falls_back_to_name(self, blog_catalog, catalog_engine):
        tables = {t.name: t for t in SchemaReader(catalog_engine).get_tables("blog")}
        assert tables["user"] == TableInfo("user", "User table")
        assert tables["article"] == TableInfo("article", "article")

    def test_views_and_other_schemas_are_skipped(self, catalog, catalog_engine):
        catalog.add_table("orders", "", [])
        catalog.add_table("order_summary", "", [], table_type="VIEW")
        catalog.add_table("metrics", "", [], schema="other")

        tables = SchemaReader(catalog_engine).get_tables("blog")
        assert [t.name for t in tables] == ["orders"]

    def test_schema_match_ignores_case(self, catalog, catalog_engine, config):
        catalog.add_table(
            "orders",
            "",
            [("id", "int", False, "", 0), ("title", "varchar", False, "", 64)],
            schema="Shop",
        )
        reader = SchemaReader(catalog_engine)
        assert [t.name for t in reader.get_tables("shop")] == ["orders"]
        assert [c.name for c in reader.get_columns("shop", "orders")] == ["id", "title"]

        config.set_database("shop")
        GoModelGenerator(config).generate(catalog_engine)
        code = (Path(config.abs_path) / "orders.go").read_text(encoding="utf-8")
        assert "\tID int `" in code
        assert "\tTitle string `" in code

    def test_empty_schema(self, catalog, catalog_engine):
        assert SchemaReader(catalog_engine).get_tables("blog") == []


class TestGetColumns:
    """Test listing columns."""

    def test_columns_in_ordinal_order(self, blog_catalog, catalog_engine):
        columns = SchemaReader(catalog_engine).get_columns("blog", "user")
        assert columns == [
            Field("id", "primary key", "int", "NO", "int", 0),
            Field("user_name", "login name", "varchar", "NO", "varchar(64)", 64),
            Field("create_time", "", "datetime", "YES", "datetime", 0),
        ]

    def test_unknown_table_has_no_columns(self, blog_catalog, catalog_engine):
        assert SchemaReader(catalog_engine).get_columns("blog", "missing") == []

    def test_table_names_are_bound_not_interpolated(self, blog_catalog, catalog_engine):
        reader = SchemaReader(catalog_engine)
        assert reader.get_columns("blog", "user' OR '1'='1") == []
        assert len(reader.get_columns("blog", "user")) == 3


class TestQueryFailures:
    """Test that query errors surface as SchemaReadError."""

    def test_missing_catalog_table(self, catalog_engine):
        with pytest.raises(SchemaReadError, match="Failed to list tables of blog"):
            SchemaReader(catalog_engine).get_tables("blog")

    def test_undecodable_row(self, catalog, catalog_engine):
        with catalog_engine.begin() as conn:
            conn.execute(
                text(
                    "INSERT INTO information_schema.columns VALUES "
                    "('blog', 'user', 'id', '', 'int', 'NO', 'int', 'not-a-number', 1)"
                )
            )
        with pytest.raises(SchemaReadError, match="blog.user"):
            SchemaReader(catalog_engine).get_columns("blog", "user")


class TestConnect:
    """Test engine creation."""

    def test_build_url(self):
        assert build_url("mysql+pymysql", "root:pw@localhost:3306/blog") == (
            "mysql+pymysql://root:pw@localhost:3306/blog"
        )
        assert build_url("mysql+pymysql", "sqlite:///x.db") == "sqlite:///x.db"

    def test_connect_success(self, tmp_path):
        engine = connect_database(GeneratorConfig(dsn=f"sqlite:///{tmp_path / 'db.sqlite'}"))
        try:
            assert engine.dialect.name == "sqlite"
        finally:
            engine.dispose()

    def test_ping_failure(self, tmp_path):
        dsn = f"sqlite:///{tmp_path / 'missing' / 'db.sqlite'}"
        with pytest.raises(DatabaseConnectionError):
            connect_database(GeneratorConfig(dsn=dsn))

    def test_unknown_driver(self):
        with pytest.raises(DatabaseConnectionError, match="nosuchdb"):
            connect_database(GeneratorConfig(dsn="localhost/blog", driver_name="nosuchdb"))
