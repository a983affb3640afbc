from dataclasses import dataclass
from typing import Optional, Sequence


class HackerNewsError(Exception):
    """Base class for every error raised by hnitems."""


class ConfigError(HackerNewsError):
    pass


class TransportError(HackerNewsError):
    """Network failure, non-2xx status or a body that is not JSON."""


@dataclass(frozen=True)
class Failure:
    path: str
    expected: str
    actual: str

    def __str__(self) -> str:
        return f"{self.path}: expected {self.expected}, got {self.actual}"


class ValidationError(HackerNewsError):
    """Raised when a JSON value does not match a schema.

    ``failures`` holds every field-level problem found in a single pass,
    in the order they were found. The message is the multi-line report.
    """

    def __init__(self, failures: Sequence[Failure], subject: Optional[str] = None):
        if not failures:
            raise ValueError("ValidationError needs at least one failure")
        self.failures = tuple(failures)
        self.subject = subject
        header = f"{subject or 'value'} does not match the expected schema:"
        lines = [header] + [f"  {failure}" for failure in self.failures]
        super().__init__("\n".join(lines))

    def __reduce__(self):
        return (type(self), (self.failures, self.subject))

    @property
    def paths(self):
        return [failure.path for failure in self.failures]
