"""Table metadata: names, scaling, flags and generator column identities."""

from .generator_columns import GeneratorColumn
from .table import Table, TableInfo, TABLE_INFO

__all__ = ["GeneratorColumn", "Table", "TableInfo", "TABLE_INFO"]
