class FetchCollectionError(Exception):
    """Base error carrying the HTTP status and JSON body of a failed request."""

    status_code = 500
    error = "Internal server error"

    def __init__(self, error: str | None = None, details: str | None = None):
        self.error = error or self.error
        self.details = details
        super().__init__(self.error if details is None else f"{self.error}: {details}")

    def to_body(self) -> dict:
        body = {"error": self.error}
        if self.details:
            body["details"] = self.details
        return body


class BadRequestError(FetchCollectionError):
    status_code = 400
    error = "Missing required parameters"


class NotFoundError(FetchCollectionError):
    status_code = 404
    error = "Not found"


class ConfigurationError(FetchCollectionError):
    status_code = 500
    error = "Missing Duda credentials"


class UpstreamError(FetchCollectionError):
    status_code = 500
    error = "Duda API request failed"
