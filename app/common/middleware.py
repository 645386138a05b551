from __future__ import annotations

import uuid
from typing import Callable

from common.request_id import set_request_id
from django.http import HttpRequest, HttpResponse

_MAX_REQUEST_ID_LENGTH = 64


class RequestIdMiddleware:
    """
    - 요청마다 request_id를 생성하거나 X-Request-ID 헤더 값을 이어받고
    - response에 X-Request-ID 헤더를 포함합니다.
    """

    header_name = "HTTP_X_REQUEST_ID"
    response_header = "X-Request-ID"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        incoming = str(request.META.get(self.header_name) or "").strip()
        # 외부 입력이므로 길이를 제한하고, 비어 있으면 새로 발급
        request_id = incoming[:_MAX_REQUEST_ID_LENGTH] or str(uuid.uuid4())

        request.request_id = request_id  # type: ignore[attr-defined]
        set_request_id(request_id)

        response = self.get_response(request)
        response[self.response_header] = request_id
        return response
