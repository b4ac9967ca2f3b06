"""
Schema representation for model generation.

Raw catalog records (``TableInfo``, ``Field``) are read-only. The model
builder derives normalized copies (``ModelTable``, ``ModelField``) and
packs them into one ``ArtifactBundle`` per table for rendering.
"""

from dataclasses import dataclass
from typing import Callable, List, Tuple

from .naming import normalize_identifier, normalize_tag_name
from ...logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TableInfo:
    """A base table as listed by the catalog."""

    name: str
    comment: str

    def __str__(self) -> str:
        return f"name: {self.name:<16}, comment: {self.comment}"


@dataclass(frozen=True)
class Field:
    """A column as listed by the catalog."""

    name: str
    description: str
    type: str  # DATA_TYPE, e.g. "varchar"
    is_null: str  # "YES" / "NO"
    column_type: str  # COLUMN_TYPE, e.g. "varchar(64)"
    length: int = 0

    def __str__(self) -> str:
        return (
            f"|{self.name:>15}|{self.description:>15}|{self.type:>15}"
            f"|{self.is_null:>15}|{self.column_type:>10}|{self.length:>10}|"
        )


@dataclass(frozen=True)
class ModelTable:
    """Table as seen by templates; ``name`` is normalized."""

    name: str
    comment: str
    origin_name: str


@dataclass(frozen=True)
class ModelField:
    """Column as seen by templates; ``name`` is normalized, ``type`` is mapped."""

    name: str
    tag: str
    type: str
    column_name: str
    description: str
    nullable: bool
    column_type: str
    length: int = 0


@dataclass(frozen=True)
class ArtifactBundle:
    """Everything needed to render one model file."""

    origin_table_name: str
    package_name: str
    table: ModelTable
    fields: Tuple[ModelField, ...]
    tag_fields: Tuple[str, ...]

    def to_context(self) -> dict:
        """Template context for this bundle."""
        return {
            "origin_table_name": self.origin_table_name,
            "table_name": self.origin_table_name,
            "package_name": self.package_name,
            "table": self.table,
            "fields": list(self.fields),
            "tag_fields": list(self.tag_fields),
        }


def build_field(raw: Field, map_type: Callable[[str], str]) -> ModelField:
    """Derive the normalized field; the tag comes from the raw column name."""
    return ModelField(
        name=normalize_identifier(raw.name),
        tag=normalize_tag_name(raw.name),
        type=map_type(raw.type),
        column_name=raw.name,
        description=raw.description,
        nullable=raw.is_null.upper() == "YES",
        column_type=raw.column_type,
        length=raw.length,
    )


def build_bundle(
    table: TableInfo,
    fields: List[Field],
    package_name: str,
    map_type: Callable[[str], str],
) -> ArtifactBundle:
    """
    Assemble the artifact bundle for one table.

    Args:
        table: Raw table record
        fields: Raw column records in ordinal order
        package_name: Target package name
        map_type: Database type -> target type mapper (may raise)

    Returns:
        Bundle keyed by the original table name
    """
    model_fields = tuple(build_field(f, map_type) for f in fields)

    return ArtifactBundle(
        origin_table_name=table.name,
        package_name=package_name,
        table=ModelTable(
            name=normalize_identifier(table.name),
            comment=table.comment,
            origin_name=table.name,
        ),
        fields=model_fields,
        tag_fields=tuple(f.tag for f in model_fields),
    )


def build_bundles(reader, table_schema: str, package_name: str, map_type: Callable[[str], str]) -> List[ArtifactBundle]:
    """Read every table of a schema and build its bundle, in catalog order."""
    bundles = []
    for table in reader.get_tables(table_schema):
        columns = reader.get_columns(table_schema, table.name)
        logger.debug("Table %s: %d columns", table.name, len(columns))
        bundles.append(build_bundle(table, columns, package_name, map_type))

    logger.info("Built %d bundles for schema %s", len(bundles), table_schema)
    return bundles
