"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

DISPLAY_DATETIME_FORMAT = "%d/%m/%Y %H:%M"
DETAIL_DATE_FORMAT = "%Y/%m/%d"
