"""
Base repository for cached actor reads and invalidating writes.

All entity-specific repositories inherit from this.
"""
from typing import Any, Awaitable, Callable, Generic, Hashable, List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from skillswap.core.actor import ActorSession
from skillswap.core.cache import QueryKey
from skillswap.core.exceptions import ActorUnavailableException
from skillswap.core.logging import get_logger

logger = get_logger(__name__)

SchemaType = TypeVar("SchemaType", bound=BaseModel)


class BaseRepository(Generic[SchemaType]):
    """
    Base repository decoding actor payloads into one schema type.

    Usage:
        class ReviewRepository(BaseRepository[Review]):
            def __init__(self):
                super().__init__(Review)
    """

    def __init__(self, schema: Type[SchemaType]):
        self.schema = schema
        self._list_adapter = TypeAdapter(List[schema])

    async def _read(
        self,
        session: ActorSession,
        key: QueryKey,
        fetcher: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Read through the session's query cache."""
        return await session.cache.fetch(key, fetcher)

    def _invalidate(self, session: ActorSession, *query_names: Hashable) -> None:
        """Drop cached queries after a successful mutation."""
        for name in query_names:
            session.cache.invalidate(name)

    def decode_one(self, method: str, payload: Any) -> Optional[SchemaType]:
        """Validate a single actor record; None stays None."""
        if payload is None:
            return None
        try:
            return self.schema.model_validate(payload)
        except ValidationError as e:
            logger.warning("actor_payload_invalid", method=method, errors=e.error_count())
            raise ActorUnavailableException(method, "Malformed response")

    def decode_many(self, method: str, payload: Any) -> List[SchemaType]:
        """Validate a list of actor records."""
        try:
            return self._list_adapter.validate_python(payload or [])
        except ValidationError as e:
            logger.warning("actor_payload_invalid", method=method, errors=e.error_count())
            raise ActorUnavailableException(method, "Malformed response")
