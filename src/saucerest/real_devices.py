import logging
from pathlib import Path
from typing import List, Optional, Union

import httpx

from .assets import AssetKind, PollingConfig, await_available
from .endpoint import Endpoint, get_file_path
from .logs import extract_appium_version, iter_log_entries, reconstruct
from .models import AvailableDevices, Concurrency, Device, DeviceJob, DeviceJobs

logger = logging.getLogger(__name__)


class RealDevicesEndpoint(Endpoint):
    base_path = "v1/rdc"

    def __init__(self, client: httpx.Client, polling: Optional[PollingConfig] = None):
        super().__init__(client)
        self.polling = polling or PollingConfig()

    ################################## Devices
    def get_devices(self) -> List[Device]:
        """
        Returns all real devices in the data center.
        """
        return self.deserialize_json_array(self.request(self.url("devices")), Device)

    def get_specific_device(self, device_id: str) -> Device:
        """
        Returns a specific device based on its ID.
        :param device_id: Required. The device descriptor, as returned by get_devices.
        """
        return self.deserialize_json_object(self.request(self.url("devices", device_id)), Device)

    def get_available_devices(self) -> AvailableDevices:
        """
        Returns the descriptors of all devices that are currently available.
        """
        return self.deserialize_json_object(self.request(self.url("devices", "available")), AvailableDevices)

    def get_concurrency(self) -> Concurrency:
        """
        Returns the number of real devices currently in use by the organization, along with the allowed maximum.
        """
        return self.deserialize_json_object(self.request(self.url("concurrency")), Concurrency)

    ################################## Jobs
    def get_device_jobs(self, params: Optional[dict] = None) -> DeviceJobs:
        """
        Returns the jobs run on real devices.
        :param params: Optional. Query parameters limiting the result, e.g. {"limit": 5, "offset": 1, "type": "LIVE"}.
        """
        response = self.request_with_query_parameters(self.url("jobs"), "GET", params)
        return self.deserialize_json_object(response, DeviceJobs)

    def get_specific_device_job(self, job_id: str) -> DeviceJob:
        """
        Returns a specific real device job based on its ID.
        :param job_id: Required. The ID of the job.
        """
        return self.deserialize_json_object(self.request(self.url("jobs", job_id)), DeviceJob)

    # The endpoint is undocumented and returns no response, so there is nothing to report on failure.
    def delete_specific_real_device_job(self, job_id: str) -> None:
        """
        Deletes a real device job by ID.
        :param job_id: Required. The ID of the job to delete.
        """
        try:
            self.request(self.url("jobs", job_id), "DELETE")
        except httpx.HTTPError as e:
            logger.debug("Ignoring failed deletion of job %s: %s", job_id, e)

    ################################## Assets
    def download_asset(
            self, job_id: str, kind: AssetKind, path: Union[str, Path], filename: Optional[str] = None
    ) -> None:
        """
        Waits until the asset of a real device job is available, then downloads it into the directory path.

        The Appium and device logs are cleaned up on the way: the written file holds one "<time> <level> <message>"
        line per log entry. Screenshots are written as 0.png, 1.png, ... in the order the job lists them. If the asset
        is still not available once polling gives up, the download is attempted anyway and fails in the request.

        :param job_id: Required. The ID of the job.
        :param kind: Required. The asset to download.
        :param path: Required. The directory to write to. Created if missing.
        :param filename: Optional. File name to use instead of the asset's default name. Ignored for screenshots.
        """
        job = await_available(
            self.get_specific_device_job,
            job_id,
            kind,
            poll_interval=self.polling.poll_interval,
            max_wait=self.polling.max_wait,
        )

        if kind is AssetKind.SCREENSHOTS:
            for index, screenshot in enumerate(job.screenshots or []):
                self.download_file(screenshot.url, path, f"{index}.png")
            return

        url = kind.value_of(job)
        if url is None:
            logger.warning("No %s URL for job %s, attempting download anyway", kind.label, job_id)

        if kind.reconstruct:
            self.download_log(url, get_file_path(path, filename or kind.label))
        else:
            self.download_file(url, path, filename or kind.label)

    def download_log(self, url: Optional[str], file_path: Path) -> None:
        with self.stream(url) as response:
            try:
                with open(file_path, "w", encoding="utf-8") as writer:
                    reconstruct(response.iter_bytes(), writer)
            except OSError:
                logger.warning("Failed to write to file %s", file_path)
                raise
            except Exception as e:
                logger.warning("Failed to parse log from %s: %s", url, e)
                raise

    def download_video(self, job_id: str, path: Union[str, Path]) -> None:
        self.download_asset(job_id, AssetKind.VIDEO, path)

    def download_har_file(self, job_id: str, path: Union[str, Path]) -> None:
        self.download_asset(job_id, AssetKind.HAR, path)

    def download_appium_log(self, job_id: str, path: Union[str, Path]) -> None:
        self.download_asset(job_id, AssetKind.APPIUM_LOG, path)

    def download_device_log(self, job_id: str, path: Union[str, Path]) -> None:
        self.download_asset(job_id, AssetKind.DEVICE_LOG, path)

    def download_commands_log(self, job_id: str, path: Union[str, Path]) -> None:
        self.download_asset(job_id, AssetKind.COMMANDS_LOG, path)

    def download_device_vitals(self, job_id: str, path: Union[str, Path]) -> None:
        self.download_asset(job_id, AssetKind.INSIGHTS_LOG, path)

    def download_crash_log(self, job_id: str, path: Union[str, Path]) -> None:
        self.download_asset(job_id, AssetKind.CRASH_LOG, path)

    def download_screenshots(self, job_id: str, path: Union[str, Path]) -> None:
        self.download_asset(job_id, AssetKind.SCREENSHOTS, path)

    def get_appium_server_version(self, job_id: str) -> Optional[str]:
        """
        Returns the Appium server version used for the job, read from its Appium log, or None if the log does not
        mention it.
        :param job_id: Required. The ID of the job.
        """
        job = await_available(
            self.get_specific_device_job,
            job_id,
            AssetKind.APPIUM_LOG,
            poll_interval=self.polling.poll_interval,
            max_wait=self.polling.max_wait,
        )

        with self.stream(job.framework_log_url) as response:
            version = extract_appium_version(iter_log_entries(response.iter_bytes()))

        if version is None:
            logger.warning("Appium version not found in the log file")
        return version
