from typing import List

from .endpoint import Endpoint
from .models import EndOfLifeAppiumVersions, Platform, TestStatus

AUTOMATION_APIS = ("all", "appium", "webdriver")


class PlatformEndpoint(Endpoint):
    base_path = "rest/v1/info"

    def get_test_status(self) -> TestStatus:
        """
        Returns the current status of the Sauce Labs service.
        """
        return self.deserialize_json_object(self.request(self.url("status")), TestStatus)

    def get_supported_platforms(self, automation_api: str) -> List[Platform]:
        """
        Returns the operating system and browser combinations supported by Sauce Labs.
        :param automation_api: Required. The automation framework. Valid values are: 'all', 'appium', 'webdriver'.
        """
        if automation_api not in AUTOMATION_APIS:
            raise ValueError(
                f"Unknown automation API '{automation_api}', expected one of {', '.join(AUTOMATION_APIS)}"
            )

        response = self.request(self.url("platforms", automation_api))
        return self.deserialize_json_array(response, Platform)

    def get_end_of_life_appium_versions(self) -> EndOfLifeAppiumVersions:
        """
        Returns every supported Appium version along with its expected end of life date.
        """
        response = self.request(self.url("platforms", "appium", "eol"))
        return self.deserialize_json_object(response, EndOfLifeAppiumVersions)
