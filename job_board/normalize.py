"""Feed normalization.

This module is the boundary between the untrusted feed payload and the rest
of the engine: it checks the payload shape and turns each entry into a `Job`
with an identifier the feed itself does not provide.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Literal, Set

from .errors import FeedShapeError
from .log import get_logger
from .models import Job
from .utils import random_id, stable_id

log = get_logger(__name__)

IdStrategy = Literal["random", "content"]

# Wire keys copied onto the Job; everything else in an entry is dropped.
JOB_KEYS = (
    "title",
    "companyName",
    "mainCategory",
    "jobType",
    "workModel",
    "seniorityLevel",
)


def _content_id(entry: Mapping, position: int, source: str) -> str:
    """Deterministic id from the entry's content and feed position."""
    return stable_id(
        source,
        str(entry.get("title") or ""),
        str(entry.get("companyName") or ""),
        str(position),
    )


def extract_entries(payload: Any) -> List[Any]:
    """Return the raw `jobs` sequence or raise FeedShapeError."""
    if not isinstance(payload, Mapping):
        raise FeedShapeError(f"Feed payload is {type(payload).__name__}, expected an object")
    jobs = payload.get("jobs")
    if not isinstance(jobs, (list, tuple)):
        raise FeedShapeError("Feed payload has no 'jobs' list")
    return list(jobs)


def normalize_feed(payload: Any, id_strategy: IdStrategy = "random", source: str = "") -> List[Job]:
    """Convert a raw feed payload into a list of `Job`, in feed order.

    Args:
        payload: Decoded JSON body, expected as ``{"jobs": [...]}``.
        id_strategy: ``"random"`` gives every entry a fresh 128-bit id on each
            call. ``"content"`` derives the id from source, title, company and
            position so the same feed yields the same ids on a re-fetch.
        source: Feed URL or name; only used by the ``"content"`` strategy.

    Returns:
        List of Job records. An entry that already carries a non-empty string
        ``id`` keeps it unless an earlier entry used the same id.

    Raises:
        FeedShapeError: the payload is not a mapping with a `jobs` sequence.
    """
    if id_strategy not in ("random", "content"):
        raise ValueError(f"Unknown id strategy: {id_strategy!r}")

    entries = extract_entries(payload)
    out: List[Job] = []
    seen: Set[str] = set()

    for position, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            log.warning("Skipping feed entry %d: expected an object, got %s", position, type(entry).__name__)
            continue

        job_id = entry.get("id")
        if not isinstance(job_id, str) or not job_id.strip() or job_id in seen:
            job_id = _content_id(entry, position, source) if id_strategy == "content" else random_id()
        seen.add(job_id)

        fields = {key: entry.get(key) for key in JOB_KEYS}
        out.append(Job(id=job_id, **fields))

    log.debug("Normalized %d of %d feed entries", len(out), len(entries))
    return out
