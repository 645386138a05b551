from __future__ import annotations

import logging

from common.request_id import get_request_id


class RequestIdFilter(logging.Filter):
    """
    로그 레코드에 request_id를 주입합니다.

    Celery 워커처럼 요청 컨텍스트가 없는 곳에서는 "-"가 기록됩니다.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        # formatter에서 %(request_id)s 를 안전하게 쓰도록 보장
        if not getattr(record, "request_id", None):
            record.request_id = get_request_id()  # type: ignore[attr-defined]
        return True
