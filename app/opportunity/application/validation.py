from __future__ import annotations

from typing import Any

TITLE_MAX_LENGTH = 255
IMAGE_URL_MAX_LENGTH = 500

# update 시 변경 가능한 필드
MUTABLE_FIELDS = ("title", "description", "image_url", "category_id")


def validate_opportunity_fields(
    fields: dict[str, Any], *, partial: bool = False
) -> dict[str, list[str]]:
    """
    채용 기회 입력값을 검증하고 필드별 에러 메시지를 반환합니다. (빈 dict = 통과)

    partial=True 이면 전달된 필드만 검사합니다.
    """
    errors: dict[str, list[str]] = {}

    def _required(name: str) -> bool:
        if name in fields and fields[name] is not None:
            return True
        if not partial:
            errors.setdefault(name, []).append("This field is required.")
        return False

    for name, max_length in (
        ("title", TITLE_MAX_LENGTH),
        ("description", None),
        ("image_url", IMAGE_URL_MAX_LENGTH),
    ):
        if not _required(name):
            continue
        value = fields[name]
        if not isinstance(value, str) or not value.strip():
            errors.setdefault(name, []).append("This field may not be blank.")
        elif max_length is not None and len(value) > max_length:
            errors.setdefault(name, []).append(
                f"Ensure this field has no more than {max_length} characters."
            )

    if _required("category_id"):
        value = fields["category_id"]
        # bool 은 int 의 하위 타입이므로 명시적으로 제외
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            errors.setdefault("category_id", []).append("A valid integer is required.")

    unknown = set(fields) - set(MUTABLE_FIELDS)
    if unknown:
        errors.setdefault("non_field_errors", []).append(
            f"Unknown fields: {', '.join(sorted(unknown))}"
        )

    return errors
