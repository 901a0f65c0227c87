"""Screen state for the two job board views.

A UI layer renders from these objects and calls their intent methods; it never
mutates the catalog, the saved jobs or the form directly. Both screens share
one `SavedJobs` instance: the jobs screen creates it and hands it to the saved
screen in `open_saved_screen`.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional

from .catalog import JobCatalog
from .config import Settings
from .log import get_logger
from .models import Job
from .saved import SavedJobs
from .sources.base import JobSource
from .workflow import ApplicationWorkflow, SavedJobsWorkflow, Scheduler, WorkflowState

log = get_logger(__name__)


class JobRow(NamedTuple):
    job: Job
    saved: bool


class JobsScreen:
    """The searchable list of every job in the feed."""

    def __init__(
        self,
        source: JobSource,
        saved: Optional[SavedJobs] = None,
        settings: Optional[Settings] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.source = source
        self.catalog = JobCatalog()
        self.saved = saved if saved is not None else SavedJobs()
        self.scheduler = scheduler
        self.workflow = ApplicationWorkflow(
            scheduler=scheduler,
            auto_close_delay_s=self.settings.auto_close_delay_s,
        )
        self.search_term = ""
        self.notice = ""
        self._mounted = False

    @property
    def is_loading(self) -> bool:
        return self.catalog.is_loading

    @property
    def visible_jobs(self) -> List[Job]:
        return self.catalog.filter(self.search_term)

    def rows(self) -> List[JobRow]:
        """Visible jobs paired with whether each one is saved."""
        return [JobRow(job, job in self.saved) for job in self.visible_jobs]

    async def mount(self) -> None:
        """Fetch the feed the first time the screen is shown."""
        if self._mounted:
            return
        self._mounted = True
        await self.refresh()

    async def refresh(self) -> None:
        """Fetch the feed again, e.g. after a failed first attempt."""
        self.notice = ""
        if await self.catalog.fetch(self.source):
            # A fresh load shows the full catalog.
            self.search_term = ""
        elif self.catalog.last_error is not None:
            self.notice = self.catalog.last_error.notice

    def search_text_changed(self, text: str) -> None:
        self.search_term = text

    def save_pressed(self, job: Job) -> bool:
        return self.saved.toggle(job)

    def apply_pressed(self, job: Job) -> None:
        self.workflow.apply(job)

    def field_changed(self, field: str, value: str) -> None:
        self.workflow.edit_field(field, value)

    def submit_pressed(self) -> bool:
        return self.workflow.submit()

    def close_pressed(self) -> None:
        self.workflow.close()

    def open_saved_screen(self) -> SavedJobsScreen:
        """Build the saved-jobs screen on top of this screen's saved set."""
        return SavedJobsScreen(self.saved, settings=self.settings, scheduler=self.scheduler)


class SavedJobsScreen:
    """The list of saved jobs, with apply and remove actions."""

    def __init__(
        self,
        saved: SavedJobs,
        settings: Optional[Settings] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.saved = saved
        self.workflow = SavedJobsWorkflow(
            saved,
            scheduler=scheduler,
            auto_close_delay_s=self.settings.auto_close_delay_s,
        )

    @property
    def jobs(self) -> List[Job]:
        return self.saved.jobs

    @property
    def pending_removal(self) -> Optional[Job]:
        if self.workflow.state is WorkflowState.CONFIRMING_REMOVAL:
            return self.workflow.selected_job
        return None

    def apply_pressed(self, job: Job) -> None:
        self.workflow.apply(job)

    def field_changed(self, field: str, value: str) -> None:
        self.workflow.edit_field(field, value)

    def submit_pressed(self) -> bool:
        return self.workflow.submit()

    def close_pressed(self) -> None:
        self.workflow.close()

    def remove_pressed(self, job: Job) -> None:
        self.workflow.request_removal(job)

    def confirm_removal_pressed(self) -> None:
        self.workflow.confirm_removal()

    def cancel_removal_pressed(self) -> None:
        self.workflow.cancel_removal()
