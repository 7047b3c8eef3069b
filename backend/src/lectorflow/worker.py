"""Celery application and beat schedule.

Start a worker with the embedded scheduler:
    celery -A lectorflow.worker worker --beat --loglevel=info
"""

from celery import Celery
from celery.schedules import crontab

from .config import settings
from .observability.logging_config import configure_logging

configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)

celery_app = Celery(
    "lectorflow",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
    include=["lectorflow.retention.tasks"],
)

celery_app.conf.timezone = "UTC"
celery_app.conf.enable_utc = True

# "0 * * * *": top of every hour
celery_app.conf.beat_schedule = {
    'notifications-cleanup-hourly': {
        'task': 'retention.cleanup_notifications',
        'schedule': crontab(minute=0),
        'options': {
            'expires': 3600,  # Drop the run if not picked up before the next tick
        },
    },
}
