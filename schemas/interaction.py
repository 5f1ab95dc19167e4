from __future__ import annotations

from typing import Any, Optional, TypedDict

from pydantic import SkipValidation

from schemas.base import WireModel


class _APIMessageInteractionMetadataBase(TypedDict):
    id: str
    type: int
    user: dict[str, Any]
    authorizing_integration_owners: dict[str, str]


class APIMessageInteractionMetadata(_APIMessageInteractionMetadataBase, total=False):
    original_response_message_id: Optional[str]
    interacted_message_id: Optional[str]
    triggering_interaction_metadata: Optional[APIMessageInteractionMetadata]


class MessageInteractionMetadata(WireModel):
    """
    Metadata of the interaction a message was sent for.
    ``user`` is whatever the user registry returned for the wire user fragment.
    ``triggering_interaction_metadata`` points at the interaction that opened the
    modal this one was submitted from, and is None at the end of the chain.
    """

    id: str
    type: int
    user: Any
    authorizing_integration_owners: SkipValidation[dict[str, Any]]
    original_response_message_id: Optional[str]
    interacted_message_id: Optional[str]
    triggering_interaction_metadata: Optional[MessageInteractionMetadata]
