"""
Stream identities of the row generators.

Every member carries its global column number, which seeds its random stream,
and the number of draws it may take per row. Global numbers are unique across
all tables, so two columns never share a stream.
"""

from enum import Enum


class GeneratorColumn(Enum):
    """Base class for the per-table generator column enums."""

    def __init__(self, global_column_number: int, seeds_per_row: int):
        self.global_column_number = global_column_number
        self.seeds_per_row = seeds_per_row


class DateDimGeneratorColumn(GeneratorColumn):
    D_NULLS = (159, 2)


class IncomeBandGeneratorColumn(GeneratorColumn):
    IB_NULLS = (195, 2)


class ReasonGeneratorColumn(GeneratorColumn):
    R_NULLS = (248, 2)


class ShipModeGeneratorColumn(GeneratorColumn):
    SM_CONTRACT = (252, 21)
    SM_NULLS = (253, 2)


class StoreReturnsGeneratorColumn(GeneratorColumn):
    # A ticket has at most 16 line items, each of which may be returned
    SR_RETURNED_DATE_SK = (289, 16)
    SR_RETURNED_TIME_SK = (290, 32)
    SR_CUSTOMER_SK = (291, 32)
    SR_CDEMO_SK = (292, 16)
    SR_HDEMO_SK = (293, 16)
    SR_ADDR_SK = (294, 16)
    SR_REASON_SK = (295, 16)
    SR_PRICING = (296, 64)
    SR_NULLS = (297, 32)


class StoreSalesGeneratorColumn(GeneratorColumn):
    SS_SOLD_DATE_SK = (315, 3)
    SS_SOLD_TIME_SK = (316, 2)
    SS_SOLD_CUSTOMER_SK = (317, 1)
    SS_SOLD_CDEMO_SK = (318, 1)
    SS_SOLD_HDEMO_SK = (319, 1)
    SS_SOLD_ADDR_SK = (320, 1)
    SS_SOLD_STORE_SK = (321, 1)
    SS_TICKET_LINE_COUNT = (322, 1)
    SS_SOLD_ITEM_SK = (323, 16)
    SS_SOLD_PROMO_SK = (324, 16)
    SS_PRICING = (325, 112)
    SS_IS_RETURNED = (326, 16)
    SS_NULLS = (327, 32)


class TimeDimGeneratorColumn(GeneratorColumn):
    T_NULLS = (338, 2)


class WarehouseGeneratorColumn(GeneratorColumn):
    W_WAREHOUSE_NAME = (352, 40)
    W_WAREHOUSE_SQ_FT = (353, 1)
    W_WAREHOUSE_ADDRESS = (354, 7)
    W_NULLS = (355, 2)


class WebPageGeneratorColumn(GeneratorColumn):
    WP_CREATION_DATE_SK = (368, 1)
    WP_ACCESS_DATE_SK = (369, 1)
    WP_AUTOGEN_FLAG = (370, 1)
    WP_CUSTOMER_SK = (371, 1)
    WP_URL = (372, 1)
    WP_TYPE = (373, 1)
    WP_CHAR_COUNT = (374, 1)
    WP_LINK_COUNT = (375, 1)
    WP_IMAGE_COUNT = (376, 1)
    WP_MAX_AD_COUNT = (377, 1)
    WP_NULLS = (378, 2)
    WP_SCD = (379, 1)


class WebSiteGeneratorColumn(GeneratorColumn):
    WEB_OPEN_DATE = (420, 1)
    WEB_CLOSE_DATE = (421, 1)
    WEB_MANAGER = (422, 2)
    WEB_MARKET_ID = (423, 1)
    WEB_MARKET_CLASS = (424, 100)
    WEB_MARKET_DESC = (425, 200)
    WEB_MARKET_MANAGER = (426, 2)
    WEB_COMPANY_ID = (427, 1)
    WEB_ADDRESS = (428, 7)
    WEB_TAX_PERCENTAGE = (429, 1)
    WEB_NULLS = (430, 2)
    WEB_SCD = (431, 1)
