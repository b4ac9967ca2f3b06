"""
Catalog access for model generation.

Reads table and column metadata from ``information_schema`` through a
SQLAlchemy engine. Schema and table names are always bound parameters.
"""

from typing import List

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .config import GeneratorConfig
from .exceptions import DatabaseConnectionError, SchemaReadError
from .schema import Field, TableInfo
from ...logging_config import get_logger

logger = get_logger(__name__)

TABLES_SQL = text(
    """
    SELECT table_name name,
           COALESCE(NULLIF(TABLE_COMMENT, ''), table_name) comment
    FROM information_schema.TABLES
    WHERE UPPER(table_type) = 'BASE TABLE'
      AND LOWER(table_schema) = LOWER(:table_schema)
    ORDER BY table_name
    """
)

COLUMNS_SQL = text(
    """
    SELECT COLUMN_NAME fname,
           COALESCE(column_comment, '') fdesc,
           DATA_TYPE ftype,
           IS_NULLABLE fnullable,
           COLUMN_TYPE fcolumntype,
           COALESCE(CHARACTER_MAXIMUM_LENGTH, 0) flength
    FROM information_schema.columns
    WHERE LOWER(table_schema) = LOWER(:table_schema) AND table_name = :table_name
    ORDER BY ORDINAL_POSITION
    """
)


def _as_text(value) -> str:
    # Some MySQL servers report catalog columns as binary strings
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8")
    return str(value)


def build_url(driver_name: str, dsn: str) -> str:
    """Combine driver and DSN unless the DSN is already a full URL."""
    if "://" in dsn:
        return dsn
    return f"{driver_name}://{dsn}"


def connect_database(config: GeneratorConfig) -> Engine:
    """
    Open the catalog and verify it answers.

    Raises:
        DatabaseConnectionError: If the engine cannot be created or pinged
    """
    url = build_url(config.driver_name, config.dsn)
    try:
        engine = create_engine(url)
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, ImportError, ValueError) as e:
        raise DatabaseConnectionError(f"Cannot connect using driver {config.driver_name}: {e}") from e

    logger.info("Connected to catalog (%s)", engine.url.render_as_string(hide_password=True))
    return engine


class SchemaReader:
    """Reads table and column metadata for one schema."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def get_tables(self, table_schema: str) -> List[TableInfo]:
        """List base tables of a schema, ordered by name."""
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(TABLES_SQL, {"table_schema": table_schema}).all()
            tables = [TableInfo(name=_as_text(name), comment=_as_text(comment)) for name, comment in rows]
        except (SQLAlchemyError, ValueError, TypeError) as e:
            raise SchemaReadError(f"Failed to list tables of {table_schema}: {e}") from e

        logger.debug("Schema %s has %d tables", table_schema, len(tables))
        return tables

    def get_columns(self, table_schema: str, table_name: str) -> List[Field]:
        """List columns of a table in ordinal order."""
        params = {"table_schema": table_schema, "table_name": table_name}
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(COLUMNS_SQL, params).all()
            return [
                Field(
                    name=_as_text(name),
                    description=_as_text(desc),
                    type=_as_text(ftype),
                    is_null=_as_text(is_null),
                    column_type=_as_text(column_type),
                    length=int(length),
                )
                for name, desc, ftype, is_null, column_type, length in rows
            ]
        except (SQLAlchemyError, ValueError, TypeError) as e:
            raise SchemaReadError(f"Failed to list columns of {table_schema}.{table_name}: {e}") from e
