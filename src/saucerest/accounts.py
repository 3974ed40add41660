from typing import Optional

from .endpoint import Endpoint, query_parameters
from .models import LookupTeamsResponse, LookupUsers


class AccountsEndpoint(Endpoint):
    base_path = "team-management/v1"

    def lookup_users(
            self,
            id: Optional[str] = None,
            username: Optional[str] = None,
            teams: Optional[str] = None,
            roles: Optional[str] = None,
            phrase: Optional[str] = None,
            status: Optional[str] = None,
            limit: Optional[int] = None,
            offset: Optional[int] = None,
    ) -> LookupUsers:
        """
        Queries the organization of the requesting account and returns the users matching the query.
        :param id: Optional. Comma-separated user IDs.
        :param username: Optional. Limits the results to usernames that begin with the specified value.
        :param teams: Optional. Comma-separated team IDs the users must belong to.
        :param roles: Optional. Comma-separated roles: 1 - Organization Admin, 4 - Team Admin, 3 - Member.
        :param phrase: Optional. Limits results to users whose first name, last name or email begins with the value.
        :param status: Optional. One of 'active', 'pending', 'inactive'.
        :param limit: Optional. Maximum number of results per page. Default value is 20.
        :param offset: Optional. The starting record number from which to return results.
        """
        params = query_parameters(
            id=id,
            username=username,
            teams=teams,
            roles=roles,
            phrase=phrase,
            status=status,
            limit=limit,
            offset=offset,
        )
        response = self.request_with_query_parameters(self.url("users"), "GET", params)
        return self.deserialize_json_object(response, LookupUsers)

    def lookup_teams(self, id: Optional[str] = None, name: Optional[str] = None) -> LookupTeamsResponse:
        """
        Queries the organization of the requesting account and returns the teams matching the query.
        :param id: Optional. Comma-separated team IDs.
        :param name: Optional. Returns the teams whose name begins with the specified value.
        """
        response = self.request_with_query_parameters(
            self.url("teams"), "GET", query_parameters(id=id, name=name)
        )
        return self.deserialize_json_object(response, LookupTeamsResponse)
