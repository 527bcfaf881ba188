from typing import Optional

from fastapi import status


class StringAnalyzerError(Exception):
    """Base error; carries the HTTP status and the message sent to the caller"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class MissingField(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = '"value" field is required'


class InvalidType(StringAnalyzerError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    message = '"value" must be a string'


class Conflict(StringAnalyzerError):
    status_code = status.HTTP_409_CONFLICT
    message = "String already exists in the system"


class NotFound(StringAnalyzerError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "String does not exist in the system"


class InvalidFilter(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid query parameter values"


class MissingQuery(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Query parameter is required"
