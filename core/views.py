"""API views for core application."""

import structlog
from pydantic import ValidationError
from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from core.constants import PLACEHOLDER_REGISTRY
from core.schemas.reply_settings import (
    PlaceholderInfo,
    PlaceholderListResponse,
    ReplySettingsRequest,
    ReplySettingsResponse,
)
from core.services.settings_service import reply_settings_service

logger = structlog.get_logger(__name__)


class ReplySettingsView(APIView):
    """API endpoint for the reply notification templates.

    GET: Retrieve the subject and message templates
    PUT: Replace the subject and message templates

    Requires a staff user.
    """

    permission_classes = (IsAdminUser,)

    def get(self, request):
        """Retrieve the current templates with defaults applied.

        Returns:
            200 OK with ReplySettingsResponse
            401/403 if the user is not staff
        """
        logger.info(
            "Reply settings request received",
            user_id=request.user.pk,
        )

        response_data = ReplySettingsResponse(**reply_settings_service.get_settings())
        return Response(response_data.model_dump(), status=status.HTTP_200_OK)

    def put(self, request):
        """Sanitize and save the templates.

        Args:
            request: HTTP request object containing subject and message

        Returns:
            200 OK with the stored ReplySettingsResponse
            400 Bad Request if validation fails
            401/403 if the user is not staff
        """
        logger.info(
            "Reply settings update received",
            user_id=request.user.pk,
        )

        # Validate request body with Pydantic
        try:
            settings_request = ReplySettingsRequest(**request.data)
        except ValidationError as e:
            logger.warning(
                "Invalid request body for reply settings",
                validation_errors=e.errors(),
            )
            return Response(
                {
                    "error": "bad_request",
                    "message": "Invalid request parameters",
                    "errors": e.errors(include_url=False, include_context=False),
                },
                status=status.HTTP_400_BAD_REQUEST,
            )

        saved = reply_settings_service.save_settings(settings_request.model_dump())

        response_data = ReplySettingsResponse(**saved)
        return Response(response_data.model_dump(), status=status.HTTP_200_OK)


class PlaceholderListView(APIView):
    """API endpoint for listing the placeholders usable in templates."""

    permission_classes = (IsAdminUser,)

    def get(self, _request):
        """Retrieve the list of placeholders.

        Returns:
            200 OK with PlaceholderListResponse
            401/403 if the user is not staff
        """
        response_data = PlaceholderListResponse(
            placeholders=[PlaceholderInfo(**entry) for entry in PLACEHOLDER_REGISTRY]
        )
        return Response(response_data.model_dump(), status=status.HTTP_200_OK)
