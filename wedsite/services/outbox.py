"""
Notification outbox

Side effects (e-mails) collected while a request is handled and run only
after the database transaction has committed. Routes hand ``dispatch`` to
FastAPI ``BackgroundTasks`` so the response never waits on SMTP.

Each job runs in a worker thread; a failing job is logged and the rest
still run.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class OutboxJob:
    name: str
    func: Callable[..., Any]
    args: tuple = ()
    kwargs: dict[str, Any] = field(default_factory=dict)


class NotificationOutbox:
    def __init__(self):
        self._jobs: list[OutboxJob] = []

    def __len__(self) -> int:
        return len(self._jobs)

    @property
    def jobs(self) -> list[OutboxJob]:
        return list(self._jobs)

    def add(self, name: str, func: Callable[..., Any], *args, **kwargs) -> None:
        self._jobs.append(OutboxJob(name=name, func=func, args=args, kwargs=kwargs))

    def discard(self) -> None:
        """Drop queued jobs (the transaction they depended on rolled back)."""
        self._jobs.clear()

    async def dispatch(self) -> int:
        """Run every queued job once. Returns how many succeeded."""
        jobs, self._jobs = self._jobs, []
        succeeded = 0
        for job in jobs:
            try:
                await asyncio.to_thread(job.func, *job.args, **job.kwargs)
                succeeded += 1
            except Exception as e:
                logger.error("Outbox job '%s' failed: %s", job.name, e, exc_info=True)
        if jobs:
            logger.info("Outbox dispatched %d/%d jobs", succeeded, len(jobs))
        return succeeded
