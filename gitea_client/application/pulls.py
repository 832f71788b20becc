"""Pull request and review endpoints."""
from typing import List

from gitea_client.application.endpoint import Endpoint
from gitea_client.domain.models import PullRequest, PullReview
from gitea_client.domain.params import BodyParam, QueryParam


class CreatePullRequest(Endpoint):
    """Opens a pull request merging `head` into `base`."""
    method = "POST"
    route = "repos/{owner}/{repo}/pulls"
    arguments = ("owner", "repo", "head", "base", "title")
    response = PullRequest

    assignees = BodyParam()
    body = BodyParam()
    due_date = BodyParam()
    labels = BodyParam()
    milestone = BodyParam()


class ListPullRequests(Endpoint):
    route = "repos/{owner}/{repo}/pulls"
    arguments = ("owner", "repo")
    response = List[PullRequest]

    state = QueryParam()
    sort = QueryParam()
    milestone = QueryParam()
    # label ids
    labels = QueryParam()
    page = QueryParam()
    limit = QueryParam()


class GetPullRequest(Endpoint):
    route = "repos/{owner}/{repo}/pulls/{index}"
    arguments = ("owner", "repo", "index")
    response = PullRequest


class GetPullRequestByBranches(Endpoint):
    route = "repos/{owner}/{repo}/pulls/{base}/{head}"
    arguments = ("owner", "repo", "head", "base")
    response = PullRequest


class EditPullRequest(Endpoint):
    method = "PATCH"
    route = "repos/{owner}/{repo}/pulls/{index}"
    arguments = ("owner", "repo", "index")
    response = PullRequest

    allow_maintainer_edit = BodyParam()
    assignees = BodyParam()
    base = BodyParam()
    body = BodyParam()
    due_date = BodyParam()
    labels = BodyParam()
    milestone = BodyParam()
    state = BodyParam()
    title = BodyParam()
    unset_due_date = BodyParam()


class ListPinnedPullRequests(Endpoint):
    route = "repos/{owner}/{repo}/pulls/pinned"
    arguments = ("owner", "repo")
    response = List[PullRequest]


class ListReviews(Endpoint):
    route = "repos/{owner}/{repo}/pulls/{index}/reviews"
    arguments = ("owner", "repo", "index")
    response = List[PullReview]

    page = QueryParam()
    limit = QueryParam()
