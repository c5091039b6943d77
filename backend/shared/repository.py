"""
Base repository class for database access.

Provides a common abstraction layer for the Supabase-backed repositories,
encapsulating client access and translating driver failures (PostgREST
errors and httpx transport errors such as timeouts or refused
connections) into PersistenceError.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, TypeVar, Generic

import httpx
from supabase import Client, PostgrestAPIError

from .exceptions import PersistenceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all Supabase repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _guard() context manager that wraps driver errors

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class PostRepository(BaseRepository[Post]):
            def get(self, post_id: str) -> Optional[Post]:
                with self._guard("get post"):
                    result = self._db.table("posts").select("*").eq("id", post_id).execute()
                if not result.data:
                    return None
                return self._map_to_post(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        """Re-raise Supabase/PostgREST and transport failures as PersistenceError."""
        try:
            yield
        except (PostgrestAPIError, httpx.HTTPError) as e:
            logger.error(f"Supabase query failed during {operation}: {e}")
            raise PersistenceError(operation) from e
