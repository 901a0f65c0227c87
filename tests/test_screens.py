"""Tests for the jobs and saved-jobs screens working together."""

import asyncio

import pytest

from job_board.config import Settings
from job_board.errors import FeedShapeError, NetworkError
from job_board.screens import JobsScreen
from job_board.workflow import SUCCESS_MESSAGE, WorkflowState


@pytest.fixture
def screen(jobs, make_source, scheduler):
    s = JobsScreen(make_source(jobs), settings=Settings(auto_close_delay_s=2.0), scheduler=scheduler)
    asyncio.run(s.mount())
    return s


class TestJobsScreen:
    def test_mount_loads_catalog(self, screen, jobs):
        assert screen.visible_jobs == jobs
        assert screen.is_loading is False
        assert screen.notice == ""

    def test_mount_fetches_only_once(self, screen):
        asyncio.run(screen.mount())
        assert screen.source.calls == 1

    def test_search_filters_visible_jobs(self, screen):
        screen.search_text_changed("python")
        assert [j.id for j in screen.visible_jobs] == ["j1", "j3"]
        screen.search_text_changed("")
        assert len(screen.visible_jobs) == 3

    def test_rows_reflect_saved_state(self, screen, jobs):
        screen.save_pressed(jobs[1])
        assert [row.saved for row in screen.rows()] == [False, True, False]
        screen.save_pressed(jobs[1])
        assert not any(row.saved for row in screen.rows())

    def test_apply_and_submit(self, screen, jobs, scheduler):
        screen.apply_pressed(jobs[0])
        for field, value in (
            ("name", "Ann"),
            ("email", "a@b.com"),
            ("contactNumber", "09123456789"),
            ("whyHire", "x"),
        ):
            screen.field_changed(field, value)
        assert screen.submit_pressed() is True
        assert screen.workflow.feedback == SUCCESS_MESSAGE
        scheduler.advance(2.0)
        assert screen.workflow.state is WorkflowState.CLOSED

    def test_close_pressed(self, screen, jobs):
        screen.apply_pressed(jobs[0])
        screen.close_pressed()
        assert screen.workflow.state is WorkflowState.CLOSED

    @pytest.mark.parametrize(
        "error, notice",
        [
            (NetworkError("timeout"), "Failed to fetch jobs."),
            (FeedShapeError("no jobs"), "No jobs found in the response."),
        ],
    )
    def test_fetch_errors_become_notices(self, make_source, error, notice):
        s = JobsScreen(make_source(error=error))
        asyncio.run(s.mount())
        assert s.notice == notice
        assert s.visible_jobs == []
        assert s.is_loading is False

    def test_refresh_recovers_after_failure(self, jobs, make_source):
        source = make_source(error=NetworkError("down"))
        s = JobsScreen(source)
        asyncio.run(s.mount())
        source.error = None
        source.jobs = jobs
        asyncio.run(s.refresh())
        assert s.notice == ""
        assert s.visible_jobs == jobs

    def test_successful_refresh_clears_search(self, screen, jobs):
        screen.search_text_changed("python")
        asyncio.run(screen.refresh())
        assert screen.search_term == ""
        assert screen.visible_jobs == jobs

    def test_failed_refresh_keeps_search(self, screen):
        screen.search_text_changed("python")
        screen.source.error = NetworkError("down")
        asyncio.run(screen.refresh())
        assert screen.search_term == "python"
        assert screen.notice == "Failed to fetch jobs."


class TestSavedScreen:
    def test_shares_saved_set_with_jobs_screen(self, screen, jobs):
        screen.save_pressed(jobs[0])
        saved_screen = screen.open_saved_screen()
        assert saved_screen.saved is screen.saved
        assert saved_screen.jobs == [jobs[0]]

        screen.save_pressed(jobs[2])
        assert saved_screen.jobs == [jobs[0], jobs[2]]

    def test_remove_cancel_then_confirm(self, screen, jobs):
        screen.save_pressed(jobs[0])
        saved_screen = screen.open_saved_screen()

        saved_screen.remove_pressed(jobs[0])
        assert saved_screen.pending_removal == jobs[0]
        saved_screen.cancel_removal_pressed()
        assert saved_screen.pending_removal is None
        assert jobs[0] in saved_screen.jobs
        assert screen.rows()[0].saved is True

        saved_screen.remove_pressed(jobs[0])
        saved_screen.confirm_removal_pressed()
        assert saved_screen.jobs == []
        assert screen.rows()[0].saved is False

    def test_apply_from_saved_screen(self, screen, jobs, scheduler):
        screen.save_pressed(jobs[1])
        saved_screen = screen.open_saved_screen()
        saved_screen.apply_pressed(jobs[1])
        saved_screen.submit_pressed()
        assert saved_screen.workflow.errors["name"] == "Name is required."
        saved_screen.close_pressed()
        assert saved_screen.workflow.state is WorkflowState.CLOSED
        assert screen.workflow.state is WorkflowState.CLOSED

    def test_uses_configured_delay(self, screen):
        assert screen.open_saved_screen().workflow.auto_close_delay_s == 2.0
