from datetime import datetime

import pytest

from devdesk.bugtracker import (
    BugTracker,
    BugTrackerError,
    Comment,
    Issue,
    Iteration,
    Project,
    RecordNotFoundError,
)


def test_create_project_assigns_ids_and_round_trips():
    tracker = BugTracker()
    first = tracker.create_project(Project(name="one"))
    second = tracker.create_project(Project(name="two"))
    assert second.id > first.id
    assert tracker.get_project(first.id).name == "one"
    assert [p.name for p in tracker.list_projects()] == ["one", "two"]


def test_zero_values_fall_back_to_defaults():
    tracker = BugTracker()
    project = tracker.create_project(Project(name="p", status=0))
    assert project.status == 1
    issue = tracker.create_issue(Issue(project_id=project.id, title="t", type=0, priority=0, status=0))
    assert (issue.type, issue.priority, issue.status) == (1, 2, 1)


def test_timestamps_come_from_clock():
    moment = datetime(2024, 5, 6, 7, 8, 9)
    tracker = BugTracker(clock=lambda: moment)
    project = tracker.create_project(Project(name="p"))
    stored = tracker.get_project(project.id)
    assert stored.created_at == moment and stored.updated_at == moment


def test_get_missing_raises():
    tracker = BugTracker()
    with pytest.raises(RecordNotFoundError):
        tracker.get_project(1)
    with pytest.raises(RecordNotFoundError):
        tracker.get_iteration(1)
    with pytest.raises(RecordNotFoundError):
        tracker.get_issue(1)


def test_update_keeps_created_at_and_inserts_when_missing():
    tracker = BugTracker()
    project = tracker.create_project(Project(name="old"))
    original_created = project.created_at
    tracker.update_project(Project(id=project.id, name="new"))
    stored = tracker.get_project(project.id)
    assert stored.name == "new"
    assert stored.created_at == original_created
    inserted = tracker.update_project(Project(name="fresh"))
    assert tracker.get_project(inserted.id).name == "fresh"


def test_duplicate_id_rejected():
    tracker = BugTracker()
    tracker.create_project(Project(id=5, name="a"))
    with pytest.raises(BugTrackerError):
        tracker.create_project(Project(id=5, name="b"))


def test_iterations_filtered_by_project():
    tracker = BugTracker()
    p1 = tracker.create_project(Project(name="a"))
    p2 = tracker.create_project(Project(name="b"))
    tracker.create_iteration(Iteration(project_id=p1.id, name="i1"))
    tracker.create_iteration(Iteration(project_id=p2.id, name="i2"))
    assert [i.name for i in tracker.list_iterations(p1.id)] == ["i1"]


def test_issues_by_project_and_iteration():
    tracker = BugTracker()
    project = tracker.create_project(Project(name="a"))
    it = tracker.create_iteration(Iteration(project_id=project.id, name="sprint"))
    tracker.create_issue(Issue(project_id=project.id, iteration_id=it.id, title="x"))
    tracker.create_issue(Issue(project_id=project.id, title="y"))
    assert len(tracker.list_project_issues(project.id)) == 2
    assert [i.title for i in tracker.list_iteration_issues(it.id)] == ["x"]


def test_issue_requires_project():
    tracker = BugTracker()
    with pytest.raises(BugTrackerError, match="project ID is required"):
        tracker.create_issue(Issue(title="orphan"))


def test_comments():
    tracker = BugTracker()
    project = tracker.create_project(Project(name="a"))
    issue = tracker.create_issue(Issue(project_id=project.id, title="x"))
    tracker.create_comment(Comment(issue_id=issue.id, user_id=3, content="hi"))
    assert [c.content for c in tracker.list_comments(issue.id)] == ["hi"]
    with pytest.raises(BugTrackerError, match="issue ID is required"):
        tracker.create_comment(Comment(content="lost"))


def test_returned_records_are_copies():
    tracker = BugTracker()
    project = tracker.create_project(Project(name="a"))
    fetched = tracker.get_project(project.id)
    fetched.name = "changed"
    assert tracker.get_project(project.id).name == "a"