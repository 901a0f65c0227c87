"""Shared fixtures: sample feed payloads, a fake timer scheduler and a canned source."""

from typing import Any, Callable, List

import pytest

from job_board.errors import FeedError
from job_board.models import Job
from job_board.sources.base import JobSource


class FakeTimer:
    def __init__(self, scheduler: "FakeScheduler", when: float, callback: Callable[[], Any]) -> None:
        self._scheduler = scheduler
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Manual clock with the `call_later` interface of an asyncio loop."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: List[FakeTimer] = []

    def call_later(self, delay: float, callback: Callable[[], Any]) -> FakeTimer:
        timer = FakeTimer(self, self.now + delay, callback)
        self.timers.append(timer)
        return timer

    def advance(self, seconds: float) -> None:
        self.now += seconds
        due = [t for t in self.timers if t.when <= self.now]
        self.timers = [t for t in self.timers if t.when > self.now]
        for timer in sorted(due, key=lambda t: t.when):
            if not timer.cancelled:
                timer.callback()

    @property
    def pending(self) -> List[FakeTimer]:
        return [t for t in self.timers if not t.cancelled]


class StaticSource(JobSource):
    """Returns a fixed job list, or raises a fixed error."""

    name = "static"

    def __init__(self, jobs: List[Job] = None, error: FeedError = None) -> None:
        self.jobs = list(jobs or [])
        self.error = error
        self.calls = 0

    async def fetch(self) -> List[Job]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.jobs)


@pytest.fixture
def feed_payload():
    """A feed body in the shape the remote endpoint returns."""
    return {
        "jobs": [
            {
                "title": "Senior Python Engineer",
                "companyName": "Acme Corp",
                "mainCategory": "Software Development",
                "jobType": "Full-time",
                "workModel": "Remote",
                "seniorityLevel": "Senior",
            },
            {
                "title": "Data Analyst",
                "companyName": "Globex",
                "mainCategory": "Data",
                "jobType": "Contract",
                "workModel": "Hybrid",
                "seniorityLevel": "Mid",
            },
            {
                "title": "Frontend Developer",
                "companyName": "Python Software Guild",
                "mainCategory": "Software Development",
                "jobType": "Full-time",
                "workModel": "On-site",
                "seniorityLevel": "Junior",
            },
        ]
    }


@pytest.fixture
def jobs():
    return [
        Job(id="j1", title="Senior Python Engineer", companyName="Acme Corp"),
        Job(id="j2", title="Data Analyst", companyName="Globex"),
        Job(id="j3", title="Frontend Developer", companyName="Python Software Guild"),
    ]


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def make_source():
    return StaticSource
