import re
from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def parse_date(value: date | str) -> date:
    """
    Parse a 'YYYY-MM-DD' string into a date.

    Dates pass through and datetimes are truncated to their date.

    Raises:
        ValueError: If the string is not exactly 'YYYY-MM-DD' or not a real date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _ISO_DATE.match(value.strip()):
        raise ValueError(f"Date must be in YYYY-MM-DD format, got {value!r}")
    return datetime.strptime(value.strip(), DATE_FORMAT).date()
