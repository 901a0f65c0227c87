"""Base classes for source connectors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..models import Job


class JobSource(ABC):
    """Abstract base class for a job feed connector."""

    name: str

    @abstractmethod
    async def fetch(self) -> List[Job]:
        """Fetch the feed and return normalized jobs.

        Raises:
            NetworkError: the request failed or the body is not JSON.
            FeedShapeError: the body has no `jobs` list.
        """
        raise NotImplementedError
