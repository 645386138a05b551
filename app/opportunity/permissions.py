from rest_framework.permissions import SAFE_METHODS, BasePermission


class IsOpportunityOwner(BasePermission):
    """
    채용 기회 작성자만 수정/삭제/공개 상태 변경을 할 수 있습니다.

    obj 는 OpportunityDomain (owner_id 보유) 입니다.
    """

    message = "Only the owner of this opportunity can do that."

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS:
            return True
        return bool(request.user and obj.owner_id == request.user.id)
