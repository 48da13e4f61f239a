"""Exception hierarchy for the forecast pipeline."""


class WeatherError(Exception):
    """Base class for every error raised by thunderman."""


class NetworkError(WeatherError):
    """Raised when a request to the weather service fails.

    Covers transport failures (DNS, refused connection, timeout) and
    non-2xx responses. ``status_code`` is None for transport failures.
    """

    def __init__(self, message: str, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeError(WeatherError):
    """Raised when a response body does not match the expected model."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class AggregationError(WeatherError):
    """Raised when a forecast period cannot be reduced to a bundle entry."""

    def __init__(self, message: str, period_number: int):
        super().__init__(message)
        self.period_number = period_number


class BoundaryError(WeatherError):
    """Raised when a report window cannot be selected."""
