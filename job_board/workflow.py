"""Application workflow.

One `ApplicationWorkflow` drives the apply form of a screen:

    CLOSED --apply--> OPEN --submit (invalid)--> OPEN
                      OPEN --submit (valid)--> SUBMITTING --(delay)--> CLOSED
                      OPEN/SUBMITTING --close--> CLOSED

`SavedJobsWorkflow` adds the removal confirmation used by the saved screen:

    CLOSED --request_removal--> CONFIRMING_REMOVAL --confirm/cancel--> CLOSED

The auto-close after a successful submit is a cancellable timer obtained from
a scheduler; any object with ``call_later(delay, callback)`` returning a handle
with ``cancel()`` works, which is exactly what an asyncio event loop offers.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol

from .errors import WorkflowStateError
from .log import get_logger
from .models import ApplicationDraft, Job, resolve_field
from .saved import SavedJobs
from .validation import empty_errors, is_valid, validate

log = get_logger(__name__)

SUCCESS_MESSAGE = "Application submitted successfully!"
AUTO_CLOSE_DELAY_S = 2.0


class TimerHandle(Protocol):
    def cancel(self) -> Any: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], Any]) -> TimerHandle: ...


class WorkflowState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"
    SUBMITTING = "submitting"
    CONFIRMING_REMOVAL = "confirming_removal"


class ApplicationWorkflow:
    """State of the apply form for one screen."""

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        auto_close_delay_s: float = AUTO_CLOSE_DELAY_S,
    ) -> None:
        self._scheduler = scheduler
        self.auto_close_delay_s = auto_close_delay_s

        self.state = WorkflowState.CLOSED
        self.selected_job: Optional[Job] = None
        self.draft = ApplicationDraft()
        self.errors: Dict[str, str] = empty_errors()
        self.feedback = ""
        self._pending: Optional[TimerHandle] = None

    @property
    def is_open(self) -> bool:
        return self.state in (WorkflowState.OPEN, WorkflowState.SUBMITTING)

    @property
    def has_pending_close(self) -> bool:
        return self._pending is not None

    def _get_scheduler(self) -> Scheduler:
        if self._scheduler is not None:
            return self._scheduler
        # Looked up per call: a loop from an earlier asyncio.run may be closed.
        try:
            return asyncio.get_running_loop()
        except RuntimeError as exc:
            raise WorkflowStateError(
                "No scheduler was given and no asyncio event loop is running"
            ) from exc

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
            log.debug("Cancelled pending auto-close")

    def _reset(self) -> None:
        self._cancel_pending()
        self.draft = ApplicationDraft()
        self.errors = empty_errors()
        self.feedback = ""

    def _require(self, *states: WorkflowState) -> None:
        if self.state not in states:
            allowed = ", ".join(s.value for s in states)
            raise WorkflowStateError(f"Expected state {allowed}, workflow is {self.state.value}")

    def apply(self, job: Job) -> None:
        """Open a fresh form for `job`."""
        self._require(WorkflowState.CLOSED, WorkflowState.OPEN, WorkflowState.SUBMITTING)
        self._reset()
        self.selected_job = job
        self.state = WorkflowState.OPEN
        log.info("Opened application for job %s (%s)", job.id, job.title)

    def edit_field(self, field: str, value: str) -> None:
        """Set one draft field; errors and feedback are left as they are."""
        self._require(WorkflowState.OPEN, WorkflowState.SUBMITTING)
        setattr(self.draft, resolve_field(field), value)

    def submit(self) -> bool:
        """Validate the draft; on success show feedback and schedule the auto-close.

        Returns True when the application was accepted.
        """
        if self.state is WorkflowState.SUBMITTING:
            log.debug("Submit ignored: application already submitted")
            return False
        self._require(WorkflowState.OPEN)

        errors = validate(self.draft)
        if not is_valid(errors):
            self.errors = errors
            self.feedback = ""
            log.info("Application rejected: %s", ", ".join(k for k, v in errors.items() if v))
            return False

        # Schedule first so a scheduling failure leaves the form as it was.
        self._schedule_auto_close()
        self.errors = empty_errors()
        self.feedback = SUCCESS_MESSAGE
        self.state = WorkflowState.SUBMITTING
        log.info("Application submitted for job %s", self.selected_job.id if self.selected_job else "?")
        return True

    def _schedule_auto_close(self) -> None:
        scheduler = self._get_scheduler()
        self._cancel_pending()
        handle: Optional[TimerHandle] = None

        def fire() -> None:
            # A callback that was cancelled or replaced must not touch state.
            if handle is None or self._pending is not handle:
                log.debug("Ignoring stale auto-close")
                return
            self._pending = None
            self._close()
            log.debug("Application form closed automatically")

        handle = scheduler.call_later(self.auto_close_delay_s, fire)
        self._pending = handle

    def _close(self) -> None:
        self._reset()
        self.selected_job = None
        self.state = WorkflowState.CLOSED

    def close(self) -> None:
        """Close the form now, cancelling any pending auto-close."""
        if self.state is WorkflowState.CONFIRMING_REMOVAL:
            raise WorkflowStateError("Use cancel_removal() to leave the removal confirmation")
        self._close()


class SavedJobsWorkflow(ApplicationWorkflow):
    """Apply form plus removal confirmation for the saved-jobs screen."""

    def __init__(
        self,
        saved: SavedJobs,
        scheduler: Optional[Scheduler] = None,
        auto_close_delay_s: float = AUTO_CLOSE_DELAY_S,
    ) -> None:
        super().__init__(scheduler=scheduler, auto_close_delay_s=auto_close_delay_s)
        self.saved = saved

    def request_removal(self, job: Job) -> None:
        """Ask for confirmation before unsaving `job`."""
        self._require(WorkflowState.CLOSED)
        if job not in self.saved:
            raise WorkflowStateError(f"Job {job.id} is not saved")
        self.selected_job = job
        self.state = WorkflowState.CONFIRMING_REMOVAL

    def confirm_removal(self) -> None:
        """Unsave the selected job and return to the list."""
        self._require(WorkflowState.CONFIRMING_REMOVAL)
        job = self.selected_job
        if job is not None:
            self.saved.remove(job)
            log.info("Removed saved job %s (%s)", job.id, job.title)
        self.selected_job = None
        self.state = WorkflowState.CLOSED

    def cancel_removal(self) -> None:
        """Return to the list without touching the saved jobs."""
        self._require(WorkflowState.CONFIRMING_REMOVAL)
        self.selected_job = None
        self.state = WorkflowState.CLOSED
