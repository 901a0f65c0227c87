"""Saved jobs for the current session."""

from __future__ import annotations

from typing import Dict, Iterator, List

from .log import get_logger
from .models import Job

log = get_logger(__name__)


class SavedJobs:
    """An insertion-ordered set of jobs keyed by job id.

    One instance is shared by every screen that shows saved state; screens
    must mutate it through `toggle` and `remove` rather than keep copies.
    """

    def __init__(self) -> None:
        self._by_id: Dict[str, Job] = {}

    def __contains__(self, job: object) -> bool:
        return isinstance(job, Job) and job.id in self._by_id

    def __iter__(self) -> Iterator[Job]:
        return iter(list(self._by_id.values()))

    def __len__(self) -> int:
        return len(self._by_id)

    @property
    def jobs(self) -> List[Job]:
        """Saved jobs in the order they were saved."""
        return list(self._by_id.values())

    def contains(self, job: Job) -> bool:
        return job in self

    def toggle(self, job: Job) -> bool:
        """Save `job` if it is not saved, otherwise unsave it.

        Returns whether the job is saved afterwards.
        """
        if job.id in self._by_id:
            del self._by_id[job.id]
            log.debug("Unsaved job %s", job.id)
            return False
        self._by_id[job.id] = job
        log.debug("Saved job %s", job.id)
        return True

    def remove(self, job: Job) -> None:
        """Unsave `job`; does nothing if it is not saved."""
        if self._by_id.pop(job.id, None) is not None:
            log.debug("Removed job %s", job.id)
