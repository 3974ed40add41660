"""Waiting for real device test assets.

Sauce Labs processes the assets of a real device job (video, logs, screenshots, ...) after the job finishes, and the
job's URL field for an asset stays null until it is ready. The helpers here poll the job until that field is set.
"""

import logging
import time
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, Field
from tenacity import RetryCallState, Retrying, before_sleep_log, retry_if_result

from .models import DeviceJob

logger = logging.getLogger(__name__)

FetchJob = Callable[[str], DeviceJob]


class AssetKind(Enum):
    # kind = (default file name, DeviceJob field holding the URL, needs log reconstruction)
    VIDEO = ("video.mp4", "video_url", False)
    HAR = ("network.har", "network_log_url", False)
    APPIUM_LOG = ("appium-server.log", "framework_log_url", True)
    DEVICE_LOG = ("device.log", "device_log_url", True)
    COMMANDS_LOG = ("commands.json", "requests_url", False)
    INSIGHTS_LOG = ("insights.json", "testfairy_log_url", False)
    CRASH_LOG = ("crash.json", "crash_log_url", False)
    SCREENSHOTS = ("screenshots", "screenshots", False)

    def __init__(self, label: str, job_field: str, reconstruct: bool):
        self.label = label
        self.job_field = job_field
        self.reconstruct = reconstruct

    def value_of(self, job: DeviceJob) -> Any:
        return getattr(job, self.job_field)


class PollingConfig(BaseModel):
    """
    How long to wait for an asset.
    poll_interval: seconds between two checks of the job.
    max_wait: seconds after which the wait is given up and the latest job is used as is.
    """

    poll_interval: float = Field(1.0, ge=0)
    max_wait: float = Field(60.0, ge=0)


def is_available(fetch_job: FetchJob, job_id: str, kind: AssetKind) -> bool:
    return kind.value_of(fetch_job(job_id)) is not None


def await_available(
        fetch_job: FetchJob,
        job_id: str,
        kind: AssetKind,
        poll_interval: float = 1.0,
        max_wait: float = 60.0,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
) -> DeviceJob:
    """
    Polls the job until the field of the given asset kind is set, or max_wait seconds have passed.

    A timeout is not an error: it is logged and the job is returned anyway, with the asset field possibly still
    null. Errors raised by fetch_job are not retried.

    :param fetch_job: Fetches a fresh copy of the job by ID. Called once per check and once more at the end.
    :param job_id: The ID of the real device job.
    :param kind: The asset to wait for.
    :param poll_interval: Seconds between two checks.
    :param max_wait: Seconds after which polling stops.
    :return: The job as fetched after polling ended.
    """
    deadline = clock() + max_wait

    def deadline_reached(retry_state: RetryCallState) -> bool:
        return clock() >= deadline

    # Never sleep past the deadline
    def until_next_check(retry_state: RetryCallState) -> float:
        return max(0.0, min(poll_interval, deadline - clock()))

    def timed_out(retry_state: RetryCallState) -> bool:
        logger.warning(
            "Timed out waiting for %s to be available for ID %s", kind.label, job_id
        )
        return retry_state.outcome.result()

    Retrying(
        stop=deadline_reached,
        wait=until_next_check,
        retry=retry_if_result(lambda available: not available),
        before_sleep=before_sleep_log(logger, logging.DEBUG),
        retry_error_callback=timed_out,
        sleep=sleep,
    )(is_available, fetch_job, job_id, kind)

    return fetch_job(job_id)
