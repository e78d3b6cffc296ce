"""Row generator class of every table that can be generated."""

from typing import Dict, Type

from tpcdsgen.errors import ConfigurationError
from tpcdsgen.schema.table import Table
from .base import RowGenerator
from .date_dim import DateDimRowGenerator
from .income_band import IncomeBandRowGenerator
from .reason import ReasonRowGenerator
from .ship_mode import ShipModeRowGenerator
from .store_returns import StoreReturnsRowGenerator
from .store_sales import StoreSalesRowGenerator
from .time_dim import TimeDimRowGenerator
from .warehouse import WarehouseRowGenerator
from .web_page import WebPageRowGenerator
from .web_site import WebSiteRowGenerator

GENERATORS: Dict[Table, Type[RowGenerator]] = {
    Table.DATE_DIM: DateDimRowGenerator,
    Table.INCOME_BAND: IncomeBandRowGenerator,
    Table.REASON: ReasonRowGenerator,
    Table.SHIP_MODE: ShipModeRowGenerator,
    Table.STORE_RETURNS: StoreReturnsRowGenerator,
    Table.STORE_SALES: StoreSalesRowGenerator,
    Table.TIME_DIM: TimeDimRowGenerator,
    Table.WAREHOUSE: WarehouseRowGenerator,
    Table.WEB_PAGE: WebPageRowGenerator,
    Table.WEB_SITE: WebSiteRowGenerator,
}


def create_row_generator(table: Table) -> RowGenerator:
    """Fresh generator instance for ``table``."""
    try:
        generator_class = GENERATORS[table]
    except KeyError:
        raise ConfigurationError(
            f"Table {table.table_name} is reference-only and cannot be generated", table=table.table_name
        ) from None
    return generator_class()
