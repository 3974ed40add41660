import logging
import os
from typing import Optional

import httpx

from .accounts import AccountsEndpoint
from .assets import PollingConfig
from .platforms import PlatformEndpoint
from .real_devices import RealDevicesEndpoint
from .sauce_connect import SauceConnectEndpoint
from .storage import StorageEndpoint

logger = logging.getLogger(__name__)

DATA_CENTERS = {
    "US_WEST": "https://api.us-west-1.saucelabs.com/",
    "US_EAST": "https://api.us-east-4.saucelabs.com/",
    "EU_CENTRAL": "https://api.eu-central-1.saucelabs.com/",
}


def resolve_base_url(region: str) -> str:
    if region.upper() == "OTHER":
        base_url = os.getenv("ALTERNATE_URL")
        if not base_url:
            raise ValueError(
                "Region is 'OTHER', but the URL has not been set."
            )
        return base_url

    try:
        return DATA_CENTERS[region.upper()]
    except KeyError:
        raise ValueError(
            f"Unknown region '{region}'. Valid values are: {', '.join(DATA_CENTERS)}, OTHER"
        ) from None


class SauceREST:
    """
    Entry point of the client. Holds one HTTP session for a region and hands it to the endpoint classes.

        with SauceREST("username", "access-key", "EU_CENTRAL") as sauce:
            sauce.get_real_devices_endpoint().download_device_log("job-id", "logs/")
    """

    def __init__(
        self,
        username: Optional[str] = None,
        access_key: Optional[str] = None,
        region: str = "US_WEST",
        polling: Optional[PollingConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.username = username
        self.region = region
        self.server = resolve_base_url(region)
        self.polling = polling or PollingConfig()

        # Public endpoints such as the Sauce Connect versions work without credentials
        auth = httpx.BasicAuth(username, access_key) if username and access_key else None
        self.client = httpx.Client(base_url=self.server, auth=auth, transport=transport)

        logger.info("Sauce Labs client initialized for %s", self.server)

    @classmethod
    def from_env(cls, **kwargs) -> "SauceREST":
        """
        Creates a client from the SAUCE_USERNAME, SAUCE_ACCESS_KEY and SAUCE_REGION environment variables.
        """
        access_key = os.getenv("SAUCE_ACCESS_KEY")
        if access_key is None:
            raise ValueError("SAUCE_ACCESS_KEY environment variable is not set.")

        username = os.getenv("SAUCE_USERNAME")
        if username is None:
            raise ValueError("SAUCE_USERNAME environment variable is not set.")

        region = os.getenv("SAUCE_REGION")
        if region is None:
            region = "US_WEST"

        return cls(username, access_key, region, **kwargs)

    def get_real_devices_endpoint(self) -> RealDevicesEndpoint:
        return RealDevicesEndpoint(self.client, self.polling)

    def get_platform_endpoint(self) -> PlatformEndpoint:
        return PlatformEndpoint(self.client)

    def get_storage_endpoint(self) -> StorageEndpoint:
        return StorageEndpoint(self.client)

    def get_accounts_endpoint(self) -> AccountsEndpoint:
        return AccountsEndpoint(self.client)

    def get_sauce_connect_endpoint(self) -> SauceConnectEndpoint:
        return SauceConnectEndpoint(self.client, self.username)

    def close(self) -> None:
        logger.debug("Closing HTTPX client session.")
        self.client.close()

    def __enter__(self) -> "SauceREST":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
