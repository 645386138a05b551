"""
Opportunity Views

채용 기회 API 엔드포인트 (Thin Controller)
"""

import logging

from common.application.result import (
    NOT_FOUND,
    STORAGE_ERROR,
    VALIDATION_ERROR,
    Err,
)
from drf_spectacular.utils import extend_schema
from opportunity.models import Opportunity
from opportunity.permissions import IsOpportunityOwner
from opportunity.serializers import (
    ApplicationResultSerializer,
    ApplicationSerializer,
    CategorySerializer,
    OpportunitySerializer,
    OpportunityWriteSerializer,
)
from opportunity.services import OpportunityService
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

logger = logging.getLogger(__name__)

_ERROR_STATUS = {
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
    VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    STORAGE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(err: Err) -> Response:
    if err.code == NOT_FOUND:
        # 내부 ID/상세는 노출하지 않음
        return _not_found()
    body = {"error": err.message, "error_code": err.code}
    if err.details:
        body["details"] = err.details
    return Response(
        body,
        status=_ERROR_STATUS.get(err.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def _not_found() -> Response:
    return Response(
        {"error": "Opportunity not found", "error_code": NOT_FOUND},
        status=status.HTTP_404_NOT_FOUND,
    )


class OpportunityViewSet(GenericViewSet):
    """
    채용 기회 ViewSet (Thin Controller)

    비즈니스 로직은 OpportunityService(→ 유스케이스)에 위임하고,
    HTTP 요청/응답 처리와 작성자 권한 확인만 담당합니다.
    """

    queryset = Opportunity.objects.all()
    serializer_class = OpportunitySerializer
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    lookup_value_regex = r"\d+"

    def get_permissions(self):
        if self.action in ("list", "retrieve", "categories", "apply"):
            return [AllowAny()]
        if self.action == "mine":
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsOpportunityOwner()]

    def get_serializer_class(self):
        if self.action in ("create", "update", "partial_update"):
            return OpportunityWriteSerializer
        if self.action == "apply":
            return ApplicationSerializer
        if self.action == "categories":
            return CategorySerializer
        return OpportunitySerializer

    def _get_owned(self, request, pk):
        """작성자 권한을 확인한 OpportunityDomain (없으면 None)"""
        opportunity = OpportunityService.get_opportunity(int(pk))
        if opportunity is None:
            return None
        self.check_object_permissions(request, opportunity)
        return opportunity

    def list(self, request, *args, **kwargs):
        """
        공개 중인 채용 기회 목록 조회

        GET /api/v1/opportunities/
        """
        try:
            opportunities = OpportunityService.list_published()
        except Exception as e:
            logger.error(f"Failed to list opportunities: {str(e)}", exc_info=True)
            return Response(
                {"error": "Failed to retrieve opportunities"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(OpportunitySerializer(opportunities, many=True).data)

    def retrieve(self, request, pk=None, *args, **kwargs):
        """
        채용 기회 상세 조회 (비공개 기회는 작성자만 조회 가능)

        GET /api/v1/opportunities/<id>/
        """
        opportunity = OpportunityService.get_opportunity(int(pk))
        if opportunity is None:
            return _not_found()
        if not opportunity.is_published and opportunity.owner_id != request.user.id:
            return _not_found()
        return Response(OpportunitySerializer(opportunity).data)

    def create(self, request, *args, **kwargs):
        """
        채용 기회 생성 (초안 상태)

        POST /api/v1/opportunities/  (multipart: title, description, image, category)
        """
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        image = data.pop("image")

        result = OpportunityService.create_opportunity(
            owner_id=request.user.id, data=data, image=image
        )
        if isinstance(result, Err):
            return _error_response(result)
        return Response(
            OpportunitySerializer(result.value).data, status=status.HTTP_201_CREATED
        )

    def update(self, request, pk=None, *args, **kwargs):
        """
        채용 기회 수정 (전체)

        PUT /api/v1/opportunities/<id>/
        """
        return self._update(request, pk, partial=False)

    def partial_update(self, request, pk=None, *args, **kwargs):
        """
        채용 기회 수정 (부분)

        PATCH /api/v1/opportunities/<id>/
        """
        return self._update(request, pk, partial=True)

    def _update(self, request, pk, *, partial: bool):
        if self._get_owned(request, pk) is None:
            return _not_found()

        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        image = data.pop("image", None)

        result = OpportunityService.update_opportunity(
            opportunity_id=int(pk), data=data, image=image, partial=partial
        )
        if isinstance(result, Err):
            return _error_response(result)
        return Response(OpportunitySerializer(result.value).data)

    def destroy(self, request, pk=None, *args, **kwargs):
        """
        채용 기회 삭제 (없는 ID도 204)

        DELETE /api/v1/opportunities/<id>/
        """
        if self._get_owned(request, pk) is None:
            return Response(status=status.HTTP_204_NO_CONTENT)

        result = OpportunityService.delete_opportunity(int(pk))
        if isinstance(result, Err):
            return _error_response(result)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses=OpportunitySerializer)
    @action(detail=True, methods=["post"])
    def publish(self, request, pk=None):
        """
        채용 기회 공개 (관심 카테고리 사용자에게 알림 메일 발송)

        POST /api/v1/opportunities/<id>/publish/
        """
        if self._get_owned(request, pk) is None:
            return _not_found()

        result = OpportunityService.publish_opportunity(int(pk))
        if isinstance(result, Err):
            return _error_response(result)
        return Response(OpportunitySerializer(result.value).data)

    @extend_schema(request=None, responses=OpportunitySerializer)
    @action(detail=True, methods=["post"])
    def unpublish(self, request, pk=None):
        """
        채용 기회 비공개 전환

        POST /api/v1/opportunities/<id>/unpublish/
        """
        if self._get_owned(request, pk) is None:
            return _not_found()

        result = OpportunityService.unpublish_opportunity(int(pk))
        if isinstance(result, Err):
            return _error_response(result)
        return Response(OpportunitySerializer(result.value).data)

    @extend_schema(responses=OpportunitySerializer(many=True))
    @action(detail=False, methods=["get"])
    def mine(self, request):
        """
        내가 작성한 채용 기회 목록 (초안 포함)

        GET /api/v1/opportunities/mine/
        """
        opportunities = OpportunityService.list_owned(request.user.id)
        return Response(OpportunitySerializer(opportunities, many=True).data)

    @action(detail=False, methods=["get"])
    def categories(self, request):
        """
        카테고리 목록

        GET /api/v1/opportunities/categories/
        """
        categories = OpportunityService.list_categories()
        return Response(CategorySerializer(categories, many=True).data)

    @extend_schema(request=ApplicationSerializer, responses=ApplicationResultSerializer)
    @action(detail=True, methods=["post"])
    def apply(self, request, pk=None):
        """
        채용 기회 지원 (비로그인 지원 허용)

        POST /api/v1/opportunities/<id>/apply/
        """
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        resume = data.pop("resume", None)
        applicant_id = request.user.id if request.user.is_authenticated else None

        result = OpportunityService.submit_application(
            opportunity_id=int(pk),
            applicant_id=applicant_id,
            data=data,
            resume=resume,
        )
        if isinstance(result, Err):
            return _error_response(result)
        return Response(
            ApplicationResultSerializer(result.value).data,
            status=status.HTTP_201_CREATED,
        )
