"""
Go type mapping for database columns.

A fixed table from MySQL ``DATA_TYPE`` names to Go field types.
"""

from typing import Dict

from ...core.exceptions import TypeMappingError

GO_TIME_TYPE = "time.Time"

# DATA_TYPE -> Go type
GO_TYPE_MAP: Dict[str, str] = {
    "varchar": "string",
    "longtext": "string",
    "char": "string",
    "text": "string",
    "datetime": GO_TIME_TYPE,
    "date": GO_TIME_TYPE,
    "time": GO_TIME_TYPE,
    "tinyint": "bool",
    "int": "int",
    "timestamp": "int",
    "integer": "int",
    "bigint": "int64",
    "blob": "[]byte",
    "varbinary": "[]byte",
    "float": "float32",
    "double": "float64",
}


def map_column_type(db_type: str) -> str:
    """
    Map a column's DATA_TYPE to its Go type.

    Raises:
        TypeMappingError: For any type outside the table; the generated
            struct would not compile otherwise
    """
    try:
        return GO_TYPE_MAP[db_type]
    except KeyError:
        raise TypeMappingError(f"{db_type} not convert") from None
