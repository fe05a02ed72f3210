"""
Generator API views.

These endpoints are used by store administrators and integrations to:
- List and inspect license key generators
- Create generators
- Update generator settings
"""

import json
import re
from typing import Any, Dict, Mapping

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.request import Request
from rest_framework.response import Response

from api.v1.base import RouteGatedAPIView
from api.v1.generator.serializers import (
    GeneratorCreateRequestSerializer,
    GeneratorDTOSerializer,
    GeneratorEnvelopeSerializer,
    GeneratorListEnvelopeSerializer,
    GeneratorUpdateRequestSerializer,
)
from core.domain.exceptions import GeneratorValidationError, InvalidGeneratorIdError
from core.domain.value_objects import RouteCode
from core.instrumentation import Status, StatusCode, get_tracer
from generators.application.commands.create_generator import CreateGeneratorCommand
from generators.application.commands.update_generator import UpdateGeneratorCommand
from generators.application.handlers.generator_command_handlers import (
    CreateGeneratorHandler,
    UpdateGeneratorHandler,
)
from generators.application.handlers.generator_query_handlers import (
    GetGeneratorHandler,
    ListGeneratorsHandler,
)
from generators.application.queries.get_generator import GetGeneratorQuery
from generators.application.queries.list_generators import ListGeneratorsQuery
from generators.domain.generator import GeneratorChanges
from generators.infrastructure.repositories.django_generator_repository import (
    DjangoGeneratorRepository,
)
from generators.ports.generator_repository import GeneratorRepository

tracer = get_tracer(__name__)

POSITIVE_INTEGER = re.compile(r"^[0-9]+$")

ERROR_RESPONSES = {
    400: {"description": "Bad Request - a field is missing or invalid"},
    403: {"description": "Forbidden - the route is disabled"},
    404: {"description": "Not Found"},
    500: {"description": "The generator could not be stored"},
}

GENERATOR_ID_PARAMETER = OpenApiParameter(
    name="generator_id",
    type=int,
    location=OpenApiParameter.PATH,
    description="Generator ID",
)


def parse_generator_id(raw: Any, message: str = None) -> int:
    """
    Parse a generator id path segment.

    Raises:
        InvalidGeneratorIdError: Unless the value is a positive integer
    """
    text = str(raw or "").strip()
    if not POSITIVE_INTEGER.match(text) or int(text) <= 0:
        if message:
            raise InvalidGeneratorIdError(message)
        raise InvalidGeneratorIdError()
    return int(text)


def create_payload(request: Request) -> Dict[str, Any]:
    """
    Body parameters (JSON, form or multipart) merged over query parameters.

    A body that cannot be parsed, or has another content type, is read as empty.
    """
    payload = request.query_params.dict()
    try:
        data = request.data
    except (ParseError, UnsupportedMediaType):
        data = {}
    if hasattr(data, "dict"):
        data = data.dict()
    if isinstance(data, Mapping):
        payload.update(data)
    return payload


def update_payload(request: Request) -> Dict[str, Any]:
    """
    Decode the update body.

    Raises:
        GeneratorValidationError: If the body is not a non-empty JSON object
    """
    try:
        body = json.loads(request.body or b"")
    except ValueError:
        body = None
    if not isinstance(body, dict) or not body:
        raise GeneratorValidationError("No parameters were provided.")
    return body


class GeneratorListView(RouteGatedAPIView):
    """View for listing and creating generators."""

    route_codes = {"get": RouteCode.LIST_GENERATORS, "post": RouteCode.CREATE_GENERATOR}
    api_route = "v1/generators"
    generator_repository: GeneratorRepository = DjangoGeneratorRepository()

    @extend_schema(
        operation_id="list_generators",
        summary="List Generators",
        description="Return every generator ordered by id. An empty store is reported as 404.",
        tags=["Generators"],
        responses={200: GeneratorListEnvelopeSerializer, **ERROR_RESPONSES},
    )
    def get(self, request: Request) -> Response:
        """List all generators."""
        return async_to_sync(self._handle_list)(request)

    async def _handle_list(self, request: Request) -> Response:
        """Async handler for list generators."""
        with tracer.start_as_current_span("list_generators") as span:
            span.set_attribute("operation", "list_generators")

            handler = ListGeneratorsHandler(generator_repository=self.generator_repository)
            result = await handler.handle(ListGeneratorsQuery())

            span.set_attribute("generators.count", len(result))
            span.set_status(Status(StatusCode.OK))
            return self.envelope(GeneratorDTOSerializer(result, many=True).data)

    @extend_schema(
        operation_id="create_generator",
        summary="Create Generator",
        description=(
            "Create a generator. name, charset, chunks and chunk_length are required; "
            "numeric fields are read as absolute integers."
        ),
        tags=["Generators"],
        request=GeneratorCreateRequestSerializer,
        responses={200: GeneratorEnvelopeSerializer, **ERROR_RESPONSES},
    )
    def post(self, request: Request) -> Response:
        """Create a generator."""
        serializer = GeneratorCreateRequestSerializer(data=create_payload(request))
        serializer.is_valid(raise_exception=True)
        command = CreateGeneratorCommand(
            draft=serializer.to_draft(), actor=self.get_actor(request)
        )
        return async_to_sync(self._handle_create)(command)

    async def _handle_create(self, command: CreateGeneratorCommand) -> Response:
        """Async handler for create generator."""
        with tracer.start_as_current_span("create_generator") as span:
            span.set_attribute("operation", "create_generator")
            span.set_attribute("actor.id", int(command.actor))

            handler = CreateGeneratorHandler(generator_repository=self.generator_repository)
            result = await handler.handle(command)

            span.set_attribute("generator.id", result.id)
            span.set_status(Status(StatusCode.OK))
            return self.envelope(GeneratorDTOSerializer(result).data)


class GeneratorDetailView(RouteGatedAPIView):
    """View for reading and updating a single generator."""

    route_codes = {"get": RouteCode.GET_GENERATOR, "put": RouteCode.UPDATE_GENERATOR}
    api_route = "v1/generators/{id}"
    generator_repository: GeneratorRepository = DjangoGeneratorRepository()

    @extend_schema(
        operation_id="get_generator",
        summary="Get Generator",
        description="Return a single generator.",
        tags=["Generators"],
        parameters=[GENERATOR_ID_PARAMETER],
        responses={200: GeneratorEnvelopeSerializer, **ERROR_RESPONSES},
    )
    def get(self, request: Request, generator_id: str) -> Response:
        """Get a generator by id."""
        query = GetGeneratorQuery(generator_id=parse_generator_id(generator_id))
        return async_to_sync(self._handle_get)(query)

    async def _handle_get(self, query: GetGeneratorQuery) -> Response:
        """Async handler for get generator."""
        with tracer.start_as_current_span("get_generator") as span:
            span.set_attribute("operation", "get_generator")
            span.set_attribute("generator.id", query.generator_id)

            handler = GetGeneratorHandler(generator_repository=self.generator_repository)
            result = await handler.handle(query)

            span.set_status(Status(StatusCode.OK))
            return self.envelope(GeneratorDTOSerializer(result).data)

    @extend_schema(
        operation_id="update_generator",
        summary="Update Generator",
        description=(
            "Update the supplied fields of a generator. The body must be a JSON object; "
            "unknown keys are ignored. times_activated_max and expires_in accept null."
        ),
        tags=["Generators"],
        parameters=[GENERATOR_ID_PARAMETER],
        request=GeneratorUpdateRequestSerializer,
        responses={200: GeneratorEnvelopeSerializer, **ERROR_RESPONSES},
    )
    def put(self, request: Request, generator_id: str) -> Response:
        """Update a generator."""
        parsed_id = parse_generator_id(
            generator_id, message="The Generator ID is missing from the request."
        )
        command = UpdateGeneratorCommand(
            generator_id=parsed_id,
            changes=GeneratorChanges.parse(update_payload(request)),
            actor=self.get_actor(request),
        )
        return async_to_sync(self._handle_update)(command)

    async def _handle_update(self, command: UpdateGeneratorCommand) -> Response:
        """Async handler for update generator."""
        with tracer.start_as_current_span("update_generator") as span:
            span.set_attribute("operation", "update_generator")
            span.set_attribute("generator.id", command.generator_id)
            span.set_attribute("actor.id", int(command.actor))
            span.set_attribute("fields", sorted(command.changes.present()))

            handler = UpdateGeneratorHandler(generator_repository=self.generator_repository)
            result = await handler.handle(command)

            span.set_status(Status(StatusCode.OK))
            return self.envelope(GeneratorDTOSerializer(result).data)
