"""
Date utilities for handling date formats and conversions.

The Up API takes RFC 3339 date-times with an explicit offset for its
``filter[since]`` and ``filter[until]`` parameters.
"""

import logging
from typing import Optional, Union
from datetime import datetime, date, time
import dateutil.parser
from dateutil.relativedelta import relativedelta

# Setup logger
logger = logging.getLogger(__name__)


class DateFormatter:
    """Utility class for date formatting and parsing"""

    @staticmethod
    def to_datetime(input_date: Union[str, datetime, date]) -> datetime:
        """
        Coerce a value to a timezone-aware datetime.

        Naive values are taken as local time; plain dates mean local midnight.

        Args:
            input_date: Date to convert

        Returns:
            datetime: Timezone-aware datetime

        Raises:
            ValueError: If date cannot be parsed
        """
        if isinstance(input_date, str):
            try:
                input_date = dateutil.parser.parse(input_date)
            except (ValueError, OverflowError) as e:
                logger.error(f"Date parsing error: {e}")
                raise ValueError(f"Invalid date string: {input_date}") from e
        elif isinstance(input_date, datetime):
            pass
        elif isinstance(input_date, date):
            input_date = datetime.combine(input_date, time.min)
        else:
            raise ValueError(f"Unsupported date type: {type(input_date)}")

        if input_date.tzinfo is None:
            input_date = input_date.astimezone()
        return input_date

    @staticmethod
    def format_datetime(input_date: Union[str, datetime, date]) -> str:
        """
        Format a date for the Up API using RFC 3339

        Args:
            input_date: Date to format

        Returns:
            str: RFC 3339 string, e.g. 2024-01-31T09:30:00+11:00
        """
        return DateFormatter.to_datetime(input_date).isoformat(timespec='seconds')

    @staticmethod
    def months_ago(months: int, now: Optional[datetime] = None) -> datetime:
        """
        Shift a datetime back by whole calendar months

        Args:
            months: Number of months to go back
            now: Reference time, defaults to the current local time

        Returns:
            datetime: The shifted datetime
        """
        if now is None:
            now = datetime.now().astimezone()
        return now - relativedelta(months=months)
