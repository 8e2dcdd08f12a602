import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class BsCalendarConfig(AppConfig):
    name = 'bs_calendar'
    verbose_name = 'Bikram Sambat Calendar'

    def ready(self):
        """Load the calendar table once so a bad BS_CALENDAR setting fails at startup"""
        from .conf import get_calendar_table

        table = get_calendar_table()
        logger.debug("bs_calendar ready: BS %s-%s", table.min_year, table.max_year)
