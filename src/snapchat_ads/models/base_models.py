"""Shared Pydantic base models for the Snapchat Ads client."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class BaseAPIResponse(BaseModel):
    """Base model for all API payloads with common configuration.

    Provides consistent configuration for all response models
    including extra field handling and alias population, so fields
    added to the API later do not break decoding.

    A JSON ``null`` decodes to the field's default: an empty list, an
    empty nested model, zero or None.
    """

    model_config = ConfigDict(
        extra="allow",  # Allow extra fields from API
        populate_by_name=True,  # Allow field population by alias
    )

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Replace an explicit null with the field default.

        :param v: Raw value
        :type v: Any
        :param info: Validation context naming the field
        :type info: ValidationInfo
        :return: The value, or the field default when it is None
        :rtype: Any
        """
        if v is None and info.field_name is not None:
            field = cls.model_fields[info.field_name]
            if not field.is_required():
                return field.get_default(call_default_factory=True)
        return v
