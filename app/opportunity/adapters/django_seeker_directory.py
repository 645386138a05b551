from __future__ import annotations

from django.contrib.auth import get_user_model
from opportunity.domain.opportunity import SeekerDomain
from opportunity.ports.seeker_directory import SeekerDirectoryPort


class DjangoSeekerDirectory(SeekerDirectoryPort):
    def list_all(self) -> list[SeekerDomain]:
        # 페이지네이션 없이 전체 사용자를 순회합니다 (소규모 전제, 이메일 없는 계정 제외)
        User = get_user_model()
        rows = (
            User.objects.exclude(email="")
            .order_by("id")
            .values_list("id", "email", "username", "display_name", "category_id")
        )
        return [
            SeekerDomain(
                id=int(user_id),
                email=email or "",
                name=display_name or username,
                category_id=category_id,
            )
            for user_id, email, username, display_name, category_id in rows
        ]
