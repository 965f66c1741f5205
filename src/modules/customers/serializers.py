"""Customer DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
It handles HTTP-level concerns: request parsing, response rendering
and the record's field-level shape rules (required fields, name length,
punctuated CPF).  The checksum, email and name-content rules live in
``validators.py`` and are applied by the Service Layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.validators import CPF_FORMAT, NAME_MAX_LENGTH, NAME_MIN_LENGTH


class CustomerSerializer(serializers.Serializer):
    """Read/write serializer for the Customer resource."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        error_messages={
            "required": "Name is required.",
            "min_length": "Name must be between 2 and 50 characters.",
            "max_length": "Name must be between 2 and 50 characters.",
        },
    )
    email = serializers.CharField(
        trim_whitespace=False,
        error_messages={"required": "Email is required."},
    )
    cpf = serializers.RegexField(
        CPF_FORMAT,
        error_messages={
            "required": "CPF is required.",
            "invalid": "CPF must use the format 000.000.000-00.",
        },
    )
