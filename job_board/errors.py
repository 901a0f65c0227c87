"""Exceptions raised by the job board engine."""

from __future__ import annotations


class FeedError(Exception):
    """Base class for anything that goes wrong while loading the job feed.

    `notice` is the short message the UI shows to the user.
    """

    notice = "Failed to fetch jobs."


class FeedShapeError(FeedError):
    """The feed payload is not a mapping with a `jobs` sequence."""

    notice = "No jobs found in the response."


class NetworkError(FeedError):
    """The feed request failed or the body could not be decoded."""

    notice = "Failed to fetch jobs."


class WorkflowStateError(RuntimeError):
    """An intent arrived that the current workflow state does not accept."""
