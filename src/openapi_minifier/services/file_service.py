import os

from ..utils.logger import Logger


class FileService:
    def __init__(self):
        self.logger = Logger.get_logger(__name__)

    def read_file(self, file_path: str, encoding: str = "utf-8") -> str:
        with open(file_path, "r", encoding=encoding) as file:
            return file.read()

    def write_file(self, file_path: str, content: str) -> str:
        """
        Writes content to a file, creating parent folders as needed.

        Args:
            file_path: Destination path
            content: Text to write

        Returns:
            str: The path that was written
        """
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(file_path, "w", encoding="utf-8") as file:
            file.write(content)

        self.logger.debug(f"Wrote {len(content)} characters to {file_path}")
        return file_path
