from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from pydantic import BaseModel

from errors import MalformedPayloadError
from services.transforms import transform_api_user
from utils.log import get_logger


@runtime_checkable
class UserRegistry(Protocol):
    """Resolves a raw user fragment to a live entity, registering it on first sight."""

    def add(self, data: Mapping[str, Any]) -> Any: ...


class InMemoryUserRegistry:
    """
    Thread-safe user cache keyed by id.
    The first fragment for an id builds the entity with ``factory``; later
    fragments patch that same entity in place, so callers keep one object per user.
    """

    def __init__(self, factory: Callable[[Mapping[str, Any]], Any] = transform_api_user):
        self._factory = factory
        self._users: dict[str, Any] = {}
        self._lock = threading.Lock()

    def add(self, data: Mapping[str, Any]) -> Any:
        user_id = data.get("id") if isinstance(data, Mapping) else None
        if user_id is None:
            raise MalformedPayloadError("user", "id")

        with self._lock:
            fresh = self._factory(data)
            existing = self._users.get(user_id)
            if existing is None:
                self._users[user_id] = fresh
                get_logger(__name__).debug("user_registered", user_id=user_id)
                return fresh
            user = _patch(existing, fresh, data)
            self._users[user_id] = user
            get_logger(__name__).debug("user_patched", user_id=user_id)
            return user

    def get(self, user_id: str) -> Optional[Any]:
        with self._lock:
            return self._users.get(user_id)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._users

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)


def _patch(existing: Any, fresh: Any, data: Mapping[str, Any]) -> Any:
    """
    Copy onto the cached model only the fields the fragment carries; wire keys are
    the model's field names. Other entity types are replaced.
    """
    if isinstance(existing, BaseModel) and type(existing) is type(fresh):
        for name in type(fresh).model_fields:
            if name not in data:
                continue
            setattr(existing, name, getattr(fresh, name))
        return existing
    return fresh
