"""
Issue log - thread-safe, append-only record of conformance issues.

Every exchange handled by one middleware instance appends to the same log.
Appends are serialized by a lock; reads take a snapshot under the same lock
so the aggregate error never observes a half-written record.
"""

import threading
from dataclasses import dataclass, asdict
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import ConformanceError


SUMMARY_HEADER = "Errors were found validating the API specification:"
ISSUE_DELIMITER = "\n---\n"


@dataclass(frozen=True)
class ValidationIssue:
    """One conformance failure detected for one exchange."""
    method: str
    uri: str
    description: str

    def __str__(self):
        return f"{self.method} {self.uri}: {self.description}"

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class IssueLog:
    """Ordered, append-only collection of ValidationIssue records."""

    def __init__(self):
        self._lock = threading.Lock()
        self._issues: List[ValidationIssue] = []

    def append(self, issue: ValidationIssue) -> None:
        with self._lock:
            self._issues.append(issue)

    def add(self, method: str, uri: str, description: str) -> ValidationIssue:
        """Build an issue and append it. Returns the appended record."""
        issue = ValidationIssue(method=method, uri=uri, description=description)
        self.append(issue)
        return issue

    def snapshot(self) -> Tuple[ValidationIssue, ...]:
        with self._lock:
            return tuple(self._issues)

    def summarize(self) -> Optional[ConformanceError]:
        """
        Build the aggregate error for everything logged so far.

        Returns:
            None when the log is empty, otherwise a ConformanceError whose
            message lists every issue as "<method> <uri>: <description>"
            in log order, separated by ISSUE_DELIMITER.
        """
        issues = self.snapshot()
        if not issues:
            return None

        descriptions = ISSUE_DELIMITER.join(str(issue) for issue in issues)
        return ConformanceError(
            message=f"{SUMMARY_HEADER}\n{descriptions}",
            issues=issues,
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._issues)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __iter__(self) -> Iterator[ValidationIssue]:
        return iter(self.snapshot())
