"""Constants for data generation."""

# Key value meaning "no row referenced"; rendered as null
NO_VALUE_KEY = -1

# Rows per slowly changing dimension block (see scd.py)
SCD_BLOCK_SIZE = 6

# Web site and web page dates are staggered by row number
WEB_DATE_STAGGER = 17

# Store sales tickets
STORE_SALES_MIN_LINES = 8
STORE_SALES_MAX_LINES = 16
STORE_RETURN_PERCENT = 10
STORE_RETURN_SAME_CUSTOMER_PERCENT = 80
STORE_RETURN_MAX_DAYS = 90

# Web pages
WEB_PAGE_AUTOGEN_PERCENT = 30
WEB_PAGE_IDLE_TIME_MAX = 100

# Progress logging
PROGRESS_LOG_INTERVAL_SECONDS = 30
