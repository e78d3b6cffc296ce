"""The closed set of tables and their process-wide metadata."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Type

from tpcdsgen.errors import InvalidOptionError
from tpcdsgen.generation.scaling import ScalingInfo, ScalingModel
from tpcdsgen.schema.column_names import COLUMN_NAMES
from tpcdsgen.schema.generator_columns import (
    DateDimGeneratorColumn,
    GeneratorColumn,
    IncomeBandGeneratorColumn,
    ReasonGeneratorColumn,
    ShipModeGeneratorColumn,
    StoreReturnsGeneratorColumn,
    StoreSalesGeneratorColumn,
    TimeDimGeneratorColumn,
    WarehouseGeneratorColumn,
    WebPageGeneratorColumn,
    WebSiteGeneratorColumn,
)


class Table(Enum):
    """Every TPC-DS table; the value is the table ordinal."""

    CALL_CENTER = 0
    CATALOG_PAGE = 1
    CATALOG_RETURNS = 2
    CATALOG_SALES = 3
    CUSTOMER = 4
    CUSTOMER_ADDRESS = 5
    CUSTOMER_DEMOGRAPHICS = 6
    DATE_DIM = 7
    HOUSEHOLD_DEMOGRAPHICS = 8
    INCOME_BAND = 9
    INVENTORY = 10
    ITEM = 11
    PROMOTION = 12
    REASON = 13
    SHIP_MODE = 14
    STORE = 15
    STORE_RETURNS = 16
    STORE_SALES = 17
    TIME_DIM = 18
    WAREHOUSE = 19
    WEB_PAGE = 20
    WEB_RETURNS = 21
    WEB_SALES = 22
    WEB_SITE = 23

    @property
    def ordinal(self) -> int:
        return self.value

    @property
    def table_name(self) -> str:
        return self.name.lower()

    @property
    def info(self) -> "TableInfo":
        return TABLE_INFO[self]

    @property
    def columns(self) -> Tuple[str, ...]:
        return self.info.columns

    @property
    def generator_columns(self) -> Optional[Type[GeneratorColumn]]:
        return self.info.generator_columns

    @property
    def scaling_info(self) -> ScalingInfo:
        return self.info.scaling_info

    @property
    def keeps_history(self) -> bool:
        return self.info.keeps_history

    @property
    def is_small(self) -> bool:
        return self.info.is_small

    @property
    def null_basis_points(self) -> int:
        return self.info.null_basis_points

    @property
    def not_null_bitmap(self) -> int:
        return self.info.not_null_bitmap

    @property
    def child(self) -> Optional["Table"]:
        return self.info.child

    @property
    def parent(self) -> Optional["Table"]:
        for table, info in TABLE_INFO.items():
            if info.child is self:
                return table
        return None

    def has_child(self) -> bool:
        return self.child is not None

    def is_child(self) -> bool:
        return self.parent is not None

    def has_generator(self) -> bool:
        # Imported here because the generators import this module
        from tpcdsgen.generation.generators.registry import GENERATORS

        return self in GENERATORS

    @classmethod
    def from_name(cls, name: str) -> "Table":
        """Look a table up by its name, ignoring case."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise InvalidOptionError("table", name, "Unknown table name") from None

    @classmethod
    def get_base_tables(cls) -> List["Table"]:
        """Tables that can be generated on their own account, in ordinal order."""
        return [table for table in cls if not table.is_child() and table.has_generator()]


@dataclass(frozen=True)
class TableInfo:
    columns: Tuple[str, ...]
    scaling_info: ScalingInfo
    generator_columns: Optional[Type[GeneratorColumn]] = None
    child: Optional[Table] = None
    keeps_history: bool = False
    is_small: bool = False
    null_basis_points: int = 0
    not_null_bitmap: int = 0


def _info(table: Table, scaling_info: ScalingInfo, **kwargs) -> TableInfo:
    return TableInfo(columns=COLUMN_NAMES[table.table_name], scaling_info=scaling_info, **kwargs)


TABLE_INFO: Dict[Table, TableInfo] = {
    Table.CALL_CENTER: _info(
        Table.CALL_CENTER,
        ScalingInfo.logarithmic(6, 24, 30, 36, 42, 48, 54, 60, 60),
        keeps_history=True,
        is_small=True,
    ),
    Table.CATALOG_PAGE: _info(
        Table.CATALOG_PAGE,
        ScalingInfo.logarithmic(11718, 12000, 20400, 26000, 30000, 36000, 40000, 46000, 50000),
    ),
    Table.CATALOG_RETURNS: _info(Table.CATALOG_RETURNS, ScalingInfo.linear(16000)),
    Table.CATALOG_SALES: _info(
        Table.CATALOG_SALES, ScalingInfo.linear(160000), child=Table.CATALOG_RETURNS
    ),
    Table.CUSTOMER: _info(
        Table.CUSTOMER,
        ScalingInfo.logarithmic(
            100000, 500000, 2000000, 5000000, 12000000, 30000000, 65000000, 80000000, 100000000
        ),
    ),
    Table.CUSTOMER_ADDRESS: _info(
        Table.CUSTOMER_ADDRESS,
        ScalingInfo.logarithmic(
            50000, 250000, 1000000, 2500000, 6000000, 15000000, 32500000, 40000000, 50000000
        ),
    ),
    Table.CUSTOMER_DEMOGRAPHICS: _info(Table.CUSTOMER_DEMOGRAPHICS, ScalingInfo.static(1920800)),
    Table.DATE_DIM: _info(Table.DATE_DIM, ScalingInfo.static(73049), generator_columns=DateDimGeneratorColumn),
    Table.HOUSEHOLD_DEMOGRAPHICS: _info(Table.HOUSEHOLD_DEMOGRAPHICS, ScalingInfo.static(7200)),
    Table.INCOME_BAND: _info(
        Table.INCOME_BAND,
        ScalingInfo.static(20),
        generator_columns=IncomeBandGeneratorColumn,
        is_small=True,
    ),
    Table.INVENTORY: _info(
        Table.INVENTORY,
        ScalingInfo(
            ScalingModel.LINEAR,
            (
                11745000, 133110000, 399330000, 783000000, 1033560000,
                1311525000, 1627857000, 1965330000, 2312032500,
            ),
        ),
    ),
    Table.ITEM: _info(
        Table.ITEM,
        ScalingInfo.logarithmic(18000, 102000, 204000, 264000, 300000, 360000, 402000, 462000, 502000),
        keeps_history=True,
    ),
    Table.PROMOTION: _info(
        Table.PROMOTION,
        ScalingInfo.logarithmic(300, 500, 1000, 1300, 1500, 1800, 2000, 2300, 2500),
        is_small=True,
    ),
    Table.REASON: _info(
        Table.REASON,
        ScalingInfo.logarithmic(35, 45, 55, 60, 65, 67, 70, 72, 75),
        generator_columns=ReasonGeneratorColumn,
        is_small=True,
    ),
    Table.SHIP_MODE: _info(
        Table.SHIP_MODE,
        ScalingInfo.static(20),
        generator_columns=ShipModeGeneratorColumn,
        is_small=True,
    ),
    Table.STORE: _info(
        Table.STORE,
        ScalingInfo.logarithmic(12, 102, 402, 804, 1002, 1350, 1500, 1704, 1902),
        keeps_history=True,
        is_small=True,
    ),
    Table.STORE_RETURNS: _info(
        Table.STORE_RETURNS,
        ScalingInfo.linear(24000),
        generator_columns=StoreReturnsGeneratorColumn,
        null_basis_points=700,
        not_null_bitmap=0x204,
    ),
    Table.STORE_SALES: _info(
        Table.STORE_SALES,
        ScalingInfo.linear(240000),
        generator_columns=StoreSalesGeneratorColumn,
        child=Table.STORE_RETURNS,
        null_basis_points=900,
        not_null_bitmap=0x204,
    ),
    Table.TIME_DIM: _info(Table.TIME_DIM, ScalingInfo.static(86400), generator_columns=TimeDimGeneratorColumn),
    Table.WAREHOUSE: _info(
        Table.WAREHOUSE,
        ScalingInfo.logarithmic(5, 10, 15, 17, 20, 22, 25, 27, 30),
        generator_columns=WarehouseGeneratorColumn,
        is_small=True,
        null_basis_points=100,
        not_null_bitmap=0x03,
    ),
    Table.WEB_PAGE: _info(
        Table.WEB_PAGE,
        ScalingInfo.logarithmic(60, 200, 2040, 2604, 3000, 3600, 4002, 4602, 5004),
        generator_columns=WebPageGeneratorColumn,
        keeps_history=True,
        is_small=True,
        null_basis_points=250,
        not_null_bitmap=0x03,
    ),
    Table.WEB_RETURNS: _info(Table.WEB_RETURNS, ScalingInfo.linear(6000)),
    Table.WEB_SALES: _info(Table.WEB_SALES, ScalingInfo.linear(60000), child=Table.WEB_RETURNS),
    Table.WEB_SITE: _info(
        Table.WEB_SITE,
        ScalingInfo.logarithmic(30, 42, 54, 60, 66, 72, 78, 84, 96),
        generator_columns=WebSiteGeneratorColumn,
        keeps_history=True,
        is_small=True,
        null_basis_points=100,
        not_null_bitmap=0x07,
    ),
}
