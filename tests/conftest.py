"""
Shared pytest fixtures for modelgen tests.

The catalog is a SQLite database with an attached ``information_schema``
database holding MySQL-shaped ``TABLES`` and ``columns`` tables.
"""

import pytest
from sqlalchemy import create_engine, event, text

from modelgen.codegen.core.config import GeneratorConfig


class Catalog:
    """Populates the emulated information_schema."""

    def __init__(self, engine):
        self.engine = engine
        with engine.begin() as conn:
            conn.execute(
                text(
                    "CREATE TABLE information_schema.TABLES ("
                    "table_schema TEXT, table_name TEXT, table_type TEXT, TABLE_COMMENT TEXT)"
                )
            )
            conn.execute(
                text(
                    "CREATE TABLE information_schema.columns ("
                    "table_schema TEXT, table_name TEXT, COLUMN_NAME TEXT, column_comment TEXT, "
                    "DATA_TYPE TEXT, IS_NULLABLE TEXT, COLUMN_TYPE TEXT, "
                    "CHARACTER_MAXIMUM_LENGTH INTEGER, ORDINAL_POSITION INTEGER)"
                )
            )

    def add_table(self, name, comment="", columns=(), schema="blog", table_type="BASE TABLE"):
        """
        Register a table.

        ``columns`` items are ``(name, data_type, nullable, comment, length)``.
        """
        with self.engine.begin() as conn:
            conn.execute(
                text("INSERT INTO information_schema.TABLES VALUES (:s, :t, :tt, :c)"),
                {"s": schema, "t": name, "tt": table_type, "c": comment},
            )
            for position, (col, data_type, nullable, col_comment, length) in enumerate(columns, 1):
                column_type = f"{data_type}({length})" if length else data_type
                conn.execute(
                    text(
                        "INSERT INTO information_schema.columns VALUES "
                        "(:s, :t, :n, :c, :dt, :nullable, :ct, :len, :pos)"
                    ),
                    {
                        "s": schema,
                        "t": name,
                        "n": col,
                        "c": col_comment,
                        "dt": data_type,
                        "nullable": "YES" if nullable else "NO",
                        "ct": column_type,
                        "len": length or None,
                        "pos": position,
                    },
                )


@pytest.fixture
def catalog_engine(tmp_path):
    """SQLite engine with an attached information_schema database."""
    info_db = tmp_path / "information_schema.db"
    engine = create_engine(f"sqlite:///{tmp_path / 'catalog.db'}")

    @event.listens_for(engine, "connect")
    def attach_information_schema(dbapi_connection, connection_record):
        dbapi_connection.execute(f"ATTACH DATABASE '{info_db}' AS information_schema")

    yield engine
    engine.dispose()


@pytest.fixture
def catalog(catalog_engine):
    return Catalog(catalog_engine)


@pytest.fixture
def blog_catalog(catalog):
    """The ``blog`` schema: a user table and an article table."""
    catalog.add_table(
        "user",
        "User table",
        [
            ("id", "int", False, "primary key", 0),
            ("user_name", "varchar", False, "login name", 64),
            ("create_time", "datetime", True, "", 0),
        ],
    )
    catalog.add_table(
        "article",
        "",
        [
            ("id", "bigint", False, "", 0),
            ("title", "varchar", False, "title", 255),
            ("is_draft", "tinyint", False, "", 0),
            ("update_time", "datetime", True, "", 0),
        ],
    )
    return catalog


@pytest.fixture
def work_dir(tmp_path):
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def config(work_dir):
    """Config for the blog schema with formatting disabled."""
    return GeneratorConfig(
        work_dir=str(work_dir),
        table_schema="blog",
        dsn="unused",
        formatter="",
    )
