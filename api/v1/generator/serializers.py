"""
Serializers for Generator API endpoints.
"""

from rest_framework import serializers

from core.domain.coercion import absint, sanitize_text_field
from generators.domain.generator import GeneratorDraft


class AbsIntField(serializers.Field):
    """
    Lenient integer input: any value is read as an absolute integer.

    Non-numeric input becomes 0 rather than an error.
    """

    def to_internal_value(self, data):
        return absint(data)

    def to_representation(self, value):
        return value


class SanitizedTextField(serializers.Field):
    """Single-line text input with tags, percent octets and control characters removed."""

    def to_internal_value(self, data):
        if isinstance(data, (dict, list)):
            return ""
        return sanitize_text_field(data)

    def to_representation(self, value):
        return value


class GeneratorCreateRequestSerializer(serializers.Serializer):
    """
    Serializer for create generator request.

    Never rejects input: required fields that coerce to empty values are
    reported by the domain, in field order.
    """

    name = SanitizedTextField(required=False, allow_null=True)
    charset = SanitizedTextField(required=False, allow_null=True)
    chunks = AbsIntField(required=False, allow_null=True)
    chunk_length = AbsIntField(required=False, allow_null=True)
    times_activated_max = AbsIntField(required=False, allow_null=True)
    separator = SanitizedTextField(required=False, allow_null=True)
    prefix = SanitizedTextField(required=False, allow_null=True)
    suffix = SanitizedTextField(required=False, allow_null=True)
    expires_in = AbsIntField(required=False, allow_null=True)

    def to_draft(self) -> GeneratorDraft:
        return GeneratorDraft(**self.validated_data)


class GeneratorUpdateRequestSerializer(serializers.Serializer):
    """Schema for update generator request; every field is optional."""

    name = serializers.CharField(required=False)
    charset = serializers.CharField(required=False)
    chunks = serializers.IntegerField(required=False, min_value=0)
    chunk_length = serializers.IntegerField(required=False, min_value=0)
    times_activated_max = serializers.IntegerField(required=False, min_value=0)
    separator = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    prefix = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    suffix = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    expires_in = serializers.IntegerField(required=False, allow_null=True, min_value=0)


class GeneratorDTOSerializer(serializers.Serializer):
    """Serializer for GeneratorDTO."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    charset = serializers.CharField()
    chunks = serializers.IntegerField()
    chunk_length = serializers.IntegerField()
    times_activated_max = serializers.IntegerField(allow_null=True)
    separator = serializers.CharField(allow_null=True)
    prefix = serializers.CharField(allow_null=True)
    suffix = serializers.CharField(allow_null=True)
    expires_in = serializers.IntegerField(allow_null=True)
    created_at = serializers.DateTimeField()
    created_by = serializers.IntegerField()
    updated_at = serializers.DateTimeField(allow_null=True)
    updated_by = serializers.IntegerField(allow_null=True)


class GeneratorEnvelopeSerializer(serializers.Serializer):
    """Schema of a single-generator success response."""

    success = serializers.BooleanField()
    data = GeneratorDTOSerializer()
    message = serializers.CharField(allow_null=True)


class GeneratorListEnvelopeSerializer(serializers.Serializer):
    """Schema of the generator list success response."""

    success = serializers.BooleanField()
    data = GeneratorDTOSerializer(many=True)
    message = serializers.CharField(allow_null=True)
