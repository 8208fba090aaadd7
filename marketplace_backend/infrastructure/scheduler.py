"""APScheduler setup for the daily history refresh."""
import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from marketplace_backend.services.analytics_service import AnalyticsService

logger = logging.getLogger(__name__)


def refresh_histories(service: AnalyticsService) -> None:
    """Regenerate every cached series so it ends at today's date."""
    logger.info("Starting scheduled history refresh...")
    try:
        count = service.refresh()
        logger.info(f"History refresh completed: {count} series")
    except Exception as e:
        logger.error(f"Error refreshing histories: {e}")


def setup_scheduler(service: AnalyticsService, hour: int = 0) -> AsyncIOScheduler:
    """Create and configure scheduler."""
    scheduler = AsyncIOScheduler()
    scheduler.add_job(
        refresh_histories,
        CronTrigger(hour=hour, minute=0),
        args=[service],
        id="refresh_histories",
        name="Regenerate product histories daily",
        replace_existing=True,
    )
    return scheduler
