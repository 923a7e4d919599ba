"""Response envelope models and the two-level success contract.

Every Snapchat Ads response wraps its entities twice::

    {
      "request_status": "SUCCESS",
      "request_id": "...",
      "<plural>": [
        {"sub_request_status": "SUCCESS", "<singular>": {...}},
        ...
      ]
    }

The top-level status says whether the request as a whole was processed;
each sub-envelope carries its own status for the entity it wraps. Concrete
envelopes only differ in the plural and singular keys, which they declare
as class variables next to their typed fields.
"""

from typing import ClassVar, Generic, List, Optional, TypeVar

from pydantic import Field

from ..exceptions import EmptyResultError, EntityNotFoundError, NonSuccessStatusError
from .base_models import BaseAPIResponse

EntityT = TypeVar("EntityT")

SUCCESS = "success"


def is_success(status: Optional[str]) -> bool:
    """Return whether a request status means success (case-insensitive).

    :param status: Status string from the API
    :type status: Optional[str]
    :return: True for any casing of "success"
    :rtype: bool
    """
    return (status or "").lower() == SUCCESS


class SubEnvelope(BaseAPIResponse, Generic[EntityT]):
    """Per-entity wrapper holding its own status and one entity.

    Subclasses declare a typed field for the entity and name it in
    ``entity_key``.
    """

    entity_key: ClassVar[str]

    sub_request_status: Optional[str] = Field(
        None, description="Status of this entity"
    )

    @property
    def entity(self) -> EntityT:
        """Return the wrapped entity."""
        return getattr(self, self.entity_key)

    @property
    def succeeded(self) -> bool:
        """Return whether this sub-envelope reports success."""
        return is_success(self.sub_request_status)


class Envelope(BaseAPIResponse, Generic[EntityT]):
    """Top-level response wrapper.

    Subclasses declare a typed list of sub-envelopes and name it in
    ``items_key``.
    """

    items_key: ClassVar[str]

    request_status: Optional[str] = Field(
        None, description="Status of the whole request"
    )
    request_id: Optional[str] = Field(
        None, description="Opaque request identifier"
    )

    @property
    def items(self) -> List[SubEnvelope[EntityT]]:
        """Return the sub-envelopes in response order."""
        return getattr(self, self.items_key) or []

    @property
    def succeeded(self) -> bool:
        """Return whether the request as a whole succeeded."""
        return is_success(self.request_status)


def _require_success(envelope: Envelope, context: str) -> None:
    if not envelope.succeeded:
        raise NonSuccessStatusError(
            f"non-success status returned from snapchat api ({context}): "
            f"{envelope.request_status}",
            request_status=envelope.request_status,
            request_id=envelope.request_id,
        )


def first_entity(items: List[SubEnvelope[EntityT]]) -> EntityT:
    """Pick the entity a single-entity lookup returns.

    The first sub-envelope wins and its own sub-status is not checked;
    later entries are discarded.

    :param items: Non-empty list of sub-envelopes
    :return: Entity of the first sub-envelope
    """
    return items[0].entity


def extract_single(envelope: Envelope[EntityT], context: str = "get") -> EntityT:
    """Return the entity of a single-entity lookup.

    :param envelope: Decoded response envelope
    :param context: Operation description used in error messages
    :return: The looked-up entity
    :raises NonSuccessStatusError: If the request status is not success
    :raises EntityNotFoundError: If the envelope holds no sub-envelopes
    """
    _require_success(envelope, context)
    items = envelope.items
    if not items:
        raise EntityNotFoundError(
            f"no entity returned from snapchat api ({context})",
            request_id=envelope.request_id,
        )
    return first_entity(items)


def extract_list(envelope: Envelope[EntityT], context: str = "list") -> List[EntityT]:
    """Return the successful entities of a list response.

    Sub-envelopes whose own status is not success are dropped silently.
    Response order is preserved.

    :param envelope: Decoded response envelope
    :param context: Operation description used in error messages
    :return: Entities from successful sub-envelopes
    :raises NonSuccessStatusError: If the request status is not success
    :raises EmptyResultError: If no successful sub-envelope remains
    """
    _require_success(envelope, context)
    results = [item.entity for item in envelope.items if item.succeeded]
    if not results:
        raise EmptyResultError(
            f"no entities returned from snapchat api ({context})",
            request_id=envelope.request_id,
        )
    return results


def extract_all(envelope: Envelope[EntityT], context: str = "get") -> List[EntityT]:
    """Return every entity of a response, in order.

    Sub-statuses are not checked and an empty envelope yields an empty
    list; only the request status is enforced.

    :param envelope: Decoded response envelope
    :param context: Operation description used in error messages
    :return: Entities of all sub-envelopes
    :raises NonSuccessStatusError: If the request status is not success
    """
    _require_success(envelope, context)
    return [item.entity for item in envelope.items]


def extract_delete_ack(envelope: Envelope, context: str = "delete") -> None:
    """Confirm that a delete request was accepted.

    :param envelope: Decoded response envelope
    :param context: Operation description used in error messages
    :raises NonSuccessStatusError: If the request status is not success
    """
    _require_success(envelope, context)
