"""The job catalog: the full feed for this session plus the search filter."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .errors import FeedError
from .log import get_logger
from .models import Job
from .sources.base import JobSource

log = get_logger(__name__)


def matches(job: Job, term: str) -> bool:
    """True when `term` is a case-insensitive substring of the title or company."""
    t = term.lower()
    return t in job.title.lower() or t in job.company_name.lower()


class JobCatalog:
    """Owns the fetched job list.

    The filtered view is never stored; `filter` recomputes it from the full
    list every time, so it is always an order-preserving subsequence of
    `jobs`.
    """

    def __init__(self, jobs: Optional[Iterable[Job]] = None) -> None:
        self._jobs: List[Job] = list(jobs or [])
        self.is_loading = False
        self.last_error: Optional[FeedError] = None

    @property
    def jobs(self) -> List[Job]:
        return list(self._jobs)

    def __len__(self) -> int:
        return len(self._jobs)

    def load(self, jobs: Iterable[Job]) -> None:
        """Replace the catalog."""
        self._jobs = list(jobs)

    def filter(self, term: str = "") -> List[Job]:
        """Return catalog-ordered jobs whose title or company contains `term`."""
        if not term:
            return list(self._jobs)
        return [job for job in self._jobs if matches(job, term)]

    async def fetch(self, source: JobSource) -> bool:
        """Load the catalog from `source`.

        Returns True when the catalog was replaced. On a feed error the
        catalog keeps its previous contents and the error is kept in
        `last_error`.
        """
        if self.is_loading:
            log.warning("Fetch from %s ignored: another fetch is in flight", source.name)
            return False

        self.is_loading = True
        self.last_error = None
        try:
            jobs = await source.fetch()
        except FeedError as exc:
            log.error("Fetching jobs from %s failed: %s", source.name, exc)
            self.last_error = exc
            return False
        finally:
            self.is_loading = False

        self.load(jobs)
        return True
