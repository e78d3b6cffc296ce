"""Foreign keys drawn from one table into another."""

from typing import Optional

from tpcdsgen.errors import ConfigurationError
from tpcdsgen.generation.constants import WEB_DATE_STAGGER
from tpcdsgen.generation.distributions import get_distribution
from tpcdsgen.generation.random.stream import RandomNumberStream
from tpcdsgen.generation.random.values import generate_uniform_random_int, generate_uniform_random_key
from tpcdsgen.generation.scd import match_surrogate_key
from tpcdsgen.generation.types.dates import (
    JULIAN_CURRENT_DATE,
    JULIAN_DATE_MAXIMUM,
    JULIAN_DATE_MINIMUM,
    DATE_MINIMUM,
    DATE_MAXIMUM,
    days_in_month,
    to_julian_days,
)
from tpcdsgen.schema.generator_columns import (
    GeneratorColumn,
    WebPageGeneratorColumn,
    WebSiteGeneratorColumn,
)
from tpcdsgen.schema.table import Table

WEB_SITE_DURATION = JULIAN_DATE_MAXIMUM - JULIAN_DATE_MINIMUM

# Hour weight set used for time keys, by the table drawing the key
_HOUR_WEIGHTS = {
    Table.STORE_SALES: "store",
    Table.STORE_RETURNS: "store",
    Table.CATALOG_SALES: "catalog",
    Table.CATALOG_RETURNS: "catalog",
    Table.WEB_SALES: "web",
    Table.WEB_RETURNS: "web",
}


def generate_join_key(
    from_column: GeneratorColumn,
    stream: RandomNumberStream,
    to_table: Table,
    join_count: int,
    scaling,
    julian_date: Optional[int] = None,
) -> int:
    """
    Draw a key of ``to_table`` for ``from_column``.

    Args:
        from_column: Generator column the key is drawn for
        stream: The column's stream
        to_table: Referenced table
        join_count: Row number of the referencing row, used by staggered dates
        scaling: Scaling of the run, bounds the key range
        julian_date: Date of the referencing fact; picks the version of a
            history-keeping table (defaults to the current date)

    Returns:
        The surrogate key (a julian day for ``date_dim``)
    """
    if to_table is Table.DATE_DIM:
        return _generate_date_join_key(from_column, stream, join_count)
    if to_table is Table.TIME_DIM:
        return _generate_time_join_key(from_column, stream)
    if to_table.keeps_history:
        unique_id = generate_uniform_random_key(1, scaling.get_id_count(to_table), stream)
        if julian_date is None:
            julian_date = JULIAN_CURRENT_DATE
        return match_surrogate_key(unique_id, julian_date, to_table, scaling)
    return generate_uniform_random_key(1, scaling.get_row_count(to_table), stream)


def _generate_date_join_key(from_column: GeneratorColumn, stream: RandomNumberStream, join_count: int) -> int:
    # Web sites open in a staggered pattern over the first half of the date range
    stagger = (join_count * WEB_DATE_STAGGER) % WEB_SITE_DURATION // 2

    if from_column is WebSiteGeneratorColumn.WEB_OPEN_DATE:
        return JULIAN_DATE_MINIMUM - stagger
    if from_column is WebSiteGeneratorColumn.WEB_CLOSE_DATE:
        # Close somewhere in the second half of the site's life, often after it ends
        return JULIAN_DATE_MAXIMUM - stagger + generate_uniform_random_int(0, WEB_SITE_DURATION // 2, stream)
    if from_column is WebPageGeneratorColumn.WP_CREATION_DATE_SK:
        return JULIAN_DATE_MINIMUM - stagger + generate_uniform_random_int(0, 365, stream)

    year = generate_uniform_random_int(DATE_MINIMUM.year, DATE_MAXIMUM.year, stream)
    month = int(get_distribution("months").pick_random_value("sales", stream))
    day = generate_uniform_random_int(1, days_in_month(year, month), stream)
    return to_julian_days(DATE_MINIMUM.replace(year=year, month=month, day=day))


def _generate_time_join_key(from_column: GeneratorColumn, stream: RandomNumberStream) -> int:
    table = _table_of_column(from_column)
    weight_set = _HOUR_WEIGHTS.get(table, "uniform")
    hour = int(get_distribution("hours").pick_random_value(weight_set, stream))
    seconds = generate_uniform_random_int(0, 3599, stream)
    return hour * 3600 + seconds


def _table_of_column(column: GeneratorColumn) -> Table:
    for table in Table:
        if table.generator_columns is type(column):
            return table
    raise ConfigurationError(f"Generator column {column!r} belongs to no table")
