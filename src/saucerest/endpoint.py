import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, List, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class Endpoint:
    """
    Shared plumbing for every resource group: URL composition, requests, JSON deserialization and file downloads.
    Subclasses set base_path to the path prefix of their API, relative to the client's base URL.
    """

    base_path = ""

    def __init__(self, client: httpx.Client):
        self.client = client

    def url(self, *parts: str) -> str:
        return "/".join([self.base_path.rstrip("/"), *parts])

    # Not exposed to users. Raises on 4xx/5xx instead of returning the error response.
    def request(self, url: Optional[str], method: str = "GET") -> httpx.Response:
        return self.request_with_query_parameters(url, method, None)

    def request_with_query_parameters(
            self, url: Optional[str], method: str = "GET", params: Optional[dict] = None
    ) -> httpx.Response:
        if url is None:
            raise httpx.InvalidURL("No URL to request")

        try:
            response = self.client.request(method, url, params=params)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            logger.warning(
                "HTTP error from %s %s: %s", method, url, e.response.status_code
            )
            raise
        except httpx.RequestError as e:
            logger.warning("Network error from %s %s: %s", method, url, e)
            raise

    @contextmanager
    def stream(self, url: Optional[str], method: str = "GET") -> Iterator[httpx.Response]:
        """
        Opens a streamed response. The body is read lazily while the context is open, and the connection is released
        when it closes.
        """
        if url is None:
            raise httpx.InvalidURL("No URL to request")

        with self.client.stream(method, url) as response:
            response.raise_for_status()
            yield response

    @staticmethod
    def deserialize_json_object(response: httpx.Response, model: Type[ModelT]) -> ModelT:
        return model.model_validate(response.json())

    @staticmethod
    def deserialize_json_array(response: httpx.Response, model: Type[ModelT]) -> List[ModelT]:
        return [model.model_validate(item) for item in response.json()]

    def download_file(self, url: Optional[str], directory: Union[str, Path], filename: str) -> Path:
        """
        Streams the body of url to directory/filename, creating the directory if needed.
        :param url: Absolute URL of the file, or a path relative to the client's base URL.
        :param directory: Directory the file is written to.
        :param filename: Name of the written file.
        :return: Path of the written file.
        """
        file_path = get_file_path(directory, filename)

        with self.stream(url) as response:
            with open(file_path, "wb") as file_handle:
                for chunk in response.iter_bytes():
                    file_handle.write(chunk)

        logger.debug("Downloaded %s to %s", url, file_path)
        return file_path


def get_file_path(directory: Union[str, Path], filename: str) -> Path:
    directory_path = Path(directory)
    directory_path.mkdir(parents=True, exist_ok=True)
    return directory_path / filename


def query_parameters(**params: Any) -> dict:
    """Drops unset parameters, the way every lookup call builds its query string."""
    return {key: value for key, value in params.items() if value is not None}
