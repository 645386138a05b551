# Django 시작 시 Celery 앱이 항상 로드되도록 보장 (shared_task 바인딩)
from .celery import app as celery_app

__all__ = ("celery_app",)
