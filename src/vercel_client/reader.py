# ABOUTME: Generic fetch-then-map reader for resource lookups.
# ABOUTME: Pairs a fetch operation with a mapping to the caller's result type; absent resources map to None.

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from vercel_client.core.client import VercelClient
from vercel_client.core.errors import not_found

logger = logging.getLogger(__name__)

C = TypeVar("C")
F = TypeVar("F")
R = TypeVar("R")


class Reader(Generic[C, F, R]):
    """Reads a resource described by a config value and maps it to a result.

    ``fetch`` performs the API call for a config; ``to_result`` turns the
    fetched record into whatever the caller keeps (e.g. a state record).
    A 404 from ``fetch`` means the resource is gone, so read() returns None
    instead of raising. Every other error propagates.

    Example:
        reader = Reader(
            fetch=lambda client, cfg: get_edge_config(client, cfg.id, cfg.team_id),
            to_result=lambda ec: {"id": ec.id, "name": ec.slug},
        )
        state = reader.read(client, cfg)
    """

    def __init__(
        self,
        fetch: Callable[[VercelClient, C], F],
        to_result: Callable[[F], R],
    ) -> None:
        self._fetch = fetch
        self._to_result = to_result

    def read(self, client: VercelClient, config: C) -> R | None:
        try:
            fetched = self._fetch(client, config)
        except Exception as exc:
            if not_found(exc):
                logger.info("resource not found, treating as absent: %s", exc)
                return None
            raise
        return self._to_result(fetched)
