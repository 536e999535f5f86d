"""Request lifecycle, tagged failures and rendered views for the sunrise comparison."""

from enum import Enum

from pydantic import BaseModel

from playground.errors import InputValidationError, PlaygroundError
from playground.models.sunrise import SunriseTimes


class RequestStatus(str, Enum):
    """Where a comparison request currently stands."""

    idle = "idle"
    loading = "loading"
    succeeded = "succeeded"
    failed = "failed"


class FailureKind(str, Enum):
    """Distinguishes rejected input from failed upstream calls."""

    validation = "validation"
    upstream = "upstream"


class Failure(BaseModel):
    """A tagged failure carried by a finished request."""

    kind: FailureKind
    message: str

    @property
    def retryable(self) -> bool:
        return self.kind is FailureKind.upstream

    @classmethod
    def from_exception(cls, exc: PlaygroundError) -> "Failure":
        kind = (
            FailureKind.validation
            if isinstance(exc, InputValidationError)
            else FailureKind.upstream
        )
        return cls(kind=kind, message=str(exc))


class RequestLifecycle(BaseModel):
    """State of one comparison request, passed into and returned from the comparator.

    ``loading_shown`` and ``loading_hidden`` count indicator transitions so
    callers can check the indicator was cleared exactly once.
    """

    status: RequestStatus = RequestStatus.idle
    results: tuple[SunriseTimes, SunriseTimes] | None = None
    error: Failure | None = None
    loading_shown: int = 0
    loading_hidden: int = 0

    def start(self) -> None:
        """Show the loading indicator and clear any previous outcome."""
        if self.status is RequestStatus.loading:
            raise RuntimeError("Request is already loading")
        self.status = RequestStatus.loading
        self.results = None
        self.error = None
        self.loading_shown += 1

    def succeed(self, results: tuple[SunriseTimes, SunriseTimes]) -> None:
        self._finish()
        self.status = RequestStatus.succeeded
        self.results = results

    def fail(self, failure: Failure) -> None:
        self._finish()
        self.status = RequestStatus.failed
        self.error = failure

    def reject(self, failure: Failure) -> None:
        """Record a failure for a request that was never started."""
        if self.status is RequestStatus.loading:
            raise RuntimeError("Cannot reject a request that is loading")
        self.status = RequestStatus.failed
        self.results = None
        self.error = failure

    def _finish(self) -> None:
        if self.status is not RequestStatus.loading:
            raise RuntimeError(f"Request is not loading (status={self.status.value})")
        self.loading_hidden += 1


class CityView(BaseModel):
    """Rendered output for one city."""

    name: str
    coordinates: str
    sunrise: str


class ComparisonView(BaseModel):
    """Rendered output for a finished comparison."""

    status: RequestStatus
    cities: list[CityView] = []
    error: Failure | None = None
