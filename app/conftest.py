"""
pytest fixtures (Celery / 업로드 저장소)
"""

import pytest


@pytest.fixture(scope="session", autouse=True)
def celery_eager_app():
    """
    테스트에서는 브로커 없이 Celery 태스크를 동기 실행합니다.

    config.celery 는 CELERY_ namespace 로 설정을 읽으므로 접두사가 붙은 키로 덮어씁니다.
    send_task 처럼 eager 모드를 타지 않는 호출은 메모리 브로커로 보냅니다.
    """
    from config.celery import app

    app.conf.update(
        CELERY_BROKER_URL="memory://",
        CELERY_RESULT_BACKEND="cache+memory://",
        CELERY_TASK_ALWAYS_EAGER=True,
        CELERY_TASK_EAGER_PROPAGATES=True,
    )
    return app


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """업로드 파일은 테스트마다 임시 디렉터리에 저장"""
    settings.MEDIA_ROOT = str(tmp_path / "storage")
    return settings.MEDIA_ROOT
