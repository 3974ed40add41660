from typing import List, Optional

import httpx

from .endpoint import Endpoint
from .models import Versions


class SauceConnectEndpoint(Endpoint):
    """Sauce Connect tunnels. Tunnel calls are scoped by the username of the tunnel owner."""

    base_path = "rest/v1"

    def __init__(self, client: httpx.Client, username: Optional[str] = None):
        super().__init__(client)
        self.username = username

    def get_latest_versions(self) -> Versions:
        """
        Returns the latest Sauce Connect release and its download URLs. Works without credentials.
        """
        response = self.request(self.url("public", "tunnels", "info", "versions"))
        return self.deserialize_json_object(response, Versions)

    def get_tunnels_for_a_user(self, username: Optional[str] = None) -> List[str]:
        """
        Returns the IDs of the tunnels currently running for the user.
        :param username: Optional. The username of the tunnel owner. Defaults to the username of the client.
        """
        username = username or self.username
        if username is None:
            raise ValueError("No username given and the client has none.")
        return self.request(self.url(username, "tunnels")).json()
