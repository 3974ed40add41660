from typing import Optional

from .endpoint import Endpoint, query_parameters
from .models import Item, StorageFiles


class StorageEndpoint(Endpoint):
    base_path = "v1/storage"

    def get_files(
            self,
            q: Optional[str] = None,
            kind: Optional[str] = None,
            page: Optional[int] = None,
            per_page: Optional[int] = None,
    ) -> StorageFiles:
        """
        Returns the files uploaded to Sauce Storage by the requester.
        :param q: Optional. Returns files whose name, description or identifier contain this value.
        :param kind: Optional. Returns files of this kind only, e.g. 'android' or 'ios'.
        :param page: Optional. The page of results to return.
        :param per_page: Optional. The number of files per page.
        """
        response = self.request_with_query_parameters(
            self.url("files"),
            "GET",
            query_parameters(q=q, kind=kind, page=page, per_page=per_page),
        )
        return self.deserialize_json_object(response, StorageFiles)

    def get_file_details(self, file_id: str) -> Item:
        """
        Returns the details of a stored file.
        :param file_id: Required. The ID of the file, as returned by get_files.
        """
        data = self.request(self.url("files", file_id)).json()
        return Item.model_validate(data["item"])
