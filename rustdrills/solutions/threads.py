"""A worker thread completing jobs while the caller waits on shared status."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass
class JobStatus:
    """How many jobs have been completed."""

    jobs_completed: int = 0


def run_jobs(jobs: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5) -> JobStatus:
    """Complete jobs on a worker thread, printing while waiting; return the status."""
    if jobs < 0:
        raise ValueError("jobs must not be negative")
    status = JobStatus()
    lock = threading.Lock()

    def work() -> None:
        for _ in range(jobs):
            time.sleep(job_delay)
            with lock:
                status.jobs_completed += 1

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    while True:
        with lock:
            if status.jobs_completed >= jobs:
                break
        print("waiting... ")
        time.sleep(poll_delay)
    worker.join()
    return status