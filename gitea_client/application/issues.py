"""Issue and issue comment endpoints."""
from typing import List, Optional

from gitea_client.application.endpoint import Endpoint
from gitea_client.domain.models import Comment, Issue
from gitea_client.domain.params import BodyParam, QueryParam


class CreateIssue(Endpoint):
    method = "POST"
    route = "repos/{owner}/{repo}/issues"
    arguments = ("owner", "repo", "title")
    response = Issue

    assignees = BodyParam()
    body = BodyParam()
    closed = BodyParam()
    due_date = BodyParam()
    # label ids
    labels = BodyParam()
    milestone = BodyParam()
    ref = BodyParam()


class ListIssues(Endpoint):
    """Lists a repository's issues.

    `labels` is a list of label names; matching issues carry any of them.
    """
    route = "repos/{owner}/{repo}/issues"
    arguments = ("owner", "repo")
    response = List[Issue]

    state = QueryParam()
    labels = QueryParam()
    query = QueryParam("q")
    issue_type = QueryParam("type")
    milestone = QueryParam()
    since = QueryParam()
    before = QueryParam()
    created_by = QueryParam()
    assigned_by = QueryParam()
    mentioned_by = QueryParam()
    page = QueryParam()
    limit = QueryParam()


class GetIssue(Endpoint):
    route = "repos/{owner}/{repo}/issues/{index}"
    arguments = ("owner", "repo", "index")
    response = Issue


class EditIssue(Endpoint):
    method = "PATCH"
    route = "repos/{owner}/{repo}/issues/{index}"
    arguments = ("owner", "repo", "index")
    response = Issue

    assignees = BodyParam()
    body = BodyParam()
    due_date = BodyParam()
    milestone = BodyParam()
    ref = BodyParam()
    title = BodyParam()
    unset_due_date = BodyParam()
    updated_at = BodyParam()


class DeleteIssue(Endpoint):
    method = "DELETE"
    route = "repos/{owner}/{repo}/issues/{index}"
    arguments = ("owner", "repo", "index")


class CreateComment(Endpoint):
    method = "POST"
    route = "repos/{owner}/{repo}/issues/{issue}/comments"
    arguments = ("owner", "repo", "issue", "body")
    response = Comment

    updated_at = BodyParam()


class ListComments(Endpoint):
    """Lists the comments on one issue."""
    route = "repos/{owner}/{repo}/issues/{issue}/comments"
    arguments = ("owner", "repo", "issue")
    response = List[Comment]

    since = QueryParam()
    before = QueryParam()
    page = QueryParam()
    limit = QueryParam()


class ListAllComments(Endpoint):
    """Lists the comments on every issue of a repository."""
    route = "repos/{owner}/{repo}/issues/comments"
    arguments = ("owner", "repo")
    response = List[Comment]

    since = QueryParam()
    before = QueryParam()
    page = QueryParam()
    limit = QueryParam()


class GetComment(Endpoint):
    route = "repos/{owner}/{repo}/issues/comments/{comment}"
    arguments = ("owner", "repo", "comment")
    response = Comment


class EditComment(Endpoint):
    """Edits a comment.

    Gitea may answer 204 No Content, in which case send() returns None.
    """
    method = "PATCH"
    route = "repos/{owner}/{repo}/issues/comments/{comment}"
    arguments = ("owner", "repo", "comment", "body")
    response = Optional[Comment]

    updated_at = BodyParam()


class DeleteComment(Endpoint):
    method = "DELETE"
    route = "repos/{owner}/{repo}/issues/comments/{comment}"
    arguments = ("owner", "repo", "comment")
