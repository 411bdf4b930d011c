from typing import Optional

import requests

from ...configuration.data_formats import is_url
from ...services.file_service import FileService
from ...utils.exceptions import LoadError
from ...utils.logger import Logger


class APIDefinitionLoader:
    """
    Downloads the API definition from a URL or reads it from a file and returns the raw text.
    """

    REQUEST_TIMEOUT = 30

    def __init__(self, file_service: Optional[FileService] = None):
        self.file_service = file_service or FileService()
        self.logger = Logger.get_logger(__name__)

    def load(self, api_definition: str) -> str:
        """
        Load API definition text from a URL or file.

        Args:
            api_definition (str): URL or path to the API definition.

        Returns:
            str: Raw document text.
        """
        try:
            if is_url(api_definition):
                self.logger.debug(f"Loading API definition from URL: {api_definition}")
                response = requests.get(api_definition, timeout=self.REQUEST_TIMEOUT)
                if response.status_code != 200:
                    raise LoadError(f"HTTP {response.status_code} fetching {api_definition}")
                return response.text

            self.logger.debug(f"Loading API definition from file: {api_definition}")
            return self.file_service.read_file(api_definition)
        except LoadError as e:
            self.logger.error(str(e))
            raise
        except (requests.RequestException, OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Error loading API definition: {e}")
            raise LoadError(str(e)) from e
