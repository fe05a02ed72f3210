"""
Shared base view for gated v1 API routes.
"""
import logging
from typing import Any, Dict, Optional

from asgiref.sync import async_to_sync
from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.domain.exceptions import RouteDisabledError
from core.domain.route_gate import RouteGate
from core.domain.value_objects import ActorId, RouteCode
from core.infrastructure.repositories.django_settings_repository import (
    DjangoSettingsRepository,
)
from core.metrics import generator_api_responses_total, route_disabled_total
from core.ports.settings_repository import SettingsRepository

logger = logging.getLogger(__name__)

API_ROUTE_HEADER = "X-API-Route"


def success_body(data: Any) -> Dict[str, Any]:
    """Build the success envelope."""
    return {"success": True, "data": data, "message": None}


class RouteGatedAPIView(APIView):
    """
    APIView whose handlers can be switched off through the general settings.

    Subclasses map lower-case HTTP method names to route codes in
    `route_codes` and name their versioned route in `api_route`. The
    settings are read once per request, after authentication and before
    the handler runs.
    """

    route_codes: Dict[str, RouteCode] = {}
    api_route: Optional[str] = None
    settings_repository: SettingsRepository = DjangoSettingsRepository()

    def initial(self, request: Request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        option_name = settings.API_SETTINGS_OPTION
        self.route_gate = RouteGate(async_to_sync(self.settings_repository.load)(option_name))

        route_code = self.route_codes.get(request.method.lower())
        if route_code is None:
            return
        try:
            self.route_gate.ensure_enabled(route_code)
        except RouteDisabledError:
            route_disabled_total.labels(route_id=str(route_code)).inc()
            logger.info("Rejected request to disabled route %s", route_code)
            raise

    def finalize_response(self, request, response, *args, **kwargs):
        response = super().finalize_response(request, response, *args, **kwargs)
        if self.api_route:
            response[API_ROUTE_HEADER] = self.api_route
            outcome = "success" if response.status_code < 400 else "error"
            generator_api_responses_total.labels(route=self.api_route, outcome=outcome).inc()
        return response

    def get_actor(self, request: Request) -> ActorId:
        """Actor recorded in audit fields; anonymous callers are actor 0."""
        user = getattr(request, "user", None)
        if user is None or not user.is_authenticated:
            return ActorId.anonymous()
        return ActorId(int(user.pk))

    def envelope(self, data: Any, status_code: int = status.HTTP_200_OK) -> Response:
        return Response(success_body(data), status=status_code)
