"""Projects, iterations, issues and comments for tracking bugs."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Generic, TypeVar


class BugTrackerError(ValueError):
    """Raised when a bug tracker operation is invalid."""


class RecordNotFoundError(BugTrackerError, LookupError):
    """Raised when a requested record does not exist."""


@dataclass
class Project:
    """A project; status 1 active, 2 completed, 3 archived."""

    id: int = 0
    name: str = ""
    description: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    status: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Iteration:
    """An iteration of a project; status 1 planning, 2 in progress, 3 completed."""

    id: int = 0
    project_id: int = 0
    name: str = ""
    description: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    status: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Issue:
    """A bug, feature or task; type 1-3, priority 1-4, status 1-5."""

    id: int = 0
    project_id: int = 0
    iteration_id: int = 0
    title: str = ""
    description: str = ""
    type: int = 1
    priority: int = 2
    status: int = 1
    assignee_id: int = 0
    reporter_id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Comment:
    """A comment on an issue."""

    id: int = 0
    issue_id: int = 0
    user_id: int = 0
    content: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


R = TypeVar("R", Project, Iteration, Issue, Comment)

# Fields that fall back to a default value when created with zero.
_DEFAULTS: dict[type, dict[str, int]] = {
    Project: {"status": 1},
    Iteration: {"status": 1},
    Issue: {"type": 1, "priority": 2, "status": 1},
    Comment: {},
}


class _Table(Generic[R]):
    def __init__(self, kind: type, label: str, clock: Callable[[], datetime]) -> None:
        self._kind = kind
        self._label = label
        self._clock = clock
        self._rows: dict[int, R] = {}

    def create(self, record: R) -> R:
        if record.id and record.id in self._rows:
            raise BugTrackerError(f"{self._label} {record.id} already exists")
        for name, default in _DEFAULTS[self._kind].items():
            if getattr(record, name) == 0:
                setattr(record, name, default)
        if not record.id:
            record.id = max(self._rows, default=0) + 1
        now = self._clock()
        record.created_at = now
        record.updated_at = now
        self._rows[record.id] = dataclasses.replace(record)
        return record

    def save(self, record: R) -> R:
        existing = self._rows.get(record.id) if record.id else None
        if existing is None:
            return self.create(record)
        if record.created_at is None:
            record.created_at = existing.created_at
        record.updated_at = self._clock()
        self._rows[record.id] = dataclasses.replace(record)
        return record

    def get(self, record_id: int) -> R:
        row = self._rows.get(record_id)
        if row is None:
            raise RecordNotFoundError(f"{self._label} {record_id} not found")
        return dataclasses.replace(row)

    def where(self, **criteria: int) -> list[R]:
        return [
            dataclasses.replace(row)
            for _, row in sorted(self._rows.items())
            if all(getattr(row, k) == v for k, v in criteria.items())
        ]


class BugTracker:
    """In-memory store for projects, iterations, issues and comments."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        clock = clock or datetime.now
        self._projects: _Table[Project] = _Table(Project, "project", clock)
        self._iterations: _Table[Iteration] = _Table(Iteration, "iteration", clock)
        self._issues: _Table[Issue] = _Table(Issue, "issue", clock)
        self._comments: _Table[Comment] = _Table(Comment, "comment", clock)

    def create_project(self, project: Project) -> Project:
        """Store a new project, assigning its id and timestamps."""
        return self._projects.create(project)

    def update_project(self, project: Project) -> Project:
        """Save a project, inserting it when it does not exist yet."""
        return self._projects.save(project)

    def get_project(self, project_id: int) -> Project:
        """Return a project; raises RecordNotFoundError."""
        return self._projects.get(project_id)

    def list_projects(self) -> list[Project]:
        """Return every project."""
        return self._projects.where()

    def create_iteration(self, iteration: Iteration) -> Iteration:
        """Store a new iteration."""
        return self._iterations.create(iteration)

    def update_iteration(self, iteration: Iteration) -> Iteration:
        """Save an iteration, inserting it when it does not exist yet."""
        return self._iterations.save(iteration)

    def get_iteration(self, iteration_id: int) -> Iteration:
        """Return an iteration; raises RecordNotFoundError."""
        return self._iterations.get(iteration_id)

    def list_iterations(self, project_id: int) -> list[Iteration]:
        """Return the iterations of a project."""
        return self._iterations.where(project_id=project_id)

    def create_issue(self, issue: Issue) -> Issue:
        """Store a new issue; a project id is required."""
        if issue.project_id == 0:
            raise BugTrackerError("project ID is required")
        return self._issues.create(issue)

    def update_issue(self, issue: Issue) -> Issue:
        """Save an issue, inserting it when it does not exist yet."""
        return self._issues.save(issue)

    def get_issue(self, issue_id: int) -> Issue:
        """Return an issue; raises RecordNotFoundError."""
        return self._issues.get(issue_id)

    def list_project_issues(self, project_id: int) -> list[Issue]:
        """Return the issues of a project."""
        return self._issues.where(project_id=project_id)

    def list_iteration_issues(self, iteration_id: int) -> list[Issue]:
        """Return the issues of an iteration."""
        return self._issues.where(iteration_id=iteration_id)

    def create_comment(self, comment: Comment) -> Comment:
        """Store a new comment; an issue id is required."""
        if comment.issue_id == 0:
            raise BugTrackerError("issue ID is required")
        return self._comments.create(comment)

    def list_comments(self, issue_id: int) -> list[Comment]:
        """Return the comments on an issue."""
        return self._comments.where(issue_id=issue_id)