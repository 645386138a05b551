from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

NOT_FOUND = "NOT_FOUND"
VALIDATION_ERROR = "VALIDATION_ERROR"
STORAGE_ERROR = "STORAGE_ERROR"


@dataclass(frozen=True, slots=True)
class Err:
    """
    유스케이스 실패 결과.

    - code: 프로그램적으로 구분 가능한 에러 코드 (NOT_FOUND, VALIDATION_ERROR, STORAGE_ERROR)
    - message: 사용자에게 보여줄 수 있는 메시지 (내부 에러 상세는 넣지 않음)
    - details: 필드 단위 검증 에러 등 추가 정보(선택)
    """

    code: str
    message: str
    details: dict | None = field(default=None)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """유스케이스 성공 결과."""

    value: T


Result = Ok[T] | Err
