"""Search endpoints."""
from typing import List

from gitea_client.application.endpoint import Endpoint, SearchEndpoint
from gitea_client.domain.models import Issue, Repository, SearchResults, User
from gitea_client.domain.params import QueryParam


class SearchRepos(SearchEndpoint):
    route = "repos/search"
    response = SearchResults[Repository]

    q = QueryParam()
    topic = QueryParam()
    include_desc = QueryParam()
    uid = QueryParam()
    priority_owner_id = QueryParam()
    team_id = QueryParam()
    starred_by = QueryParam("starredBy")
    private = QueryParam()
    is_private = QueryParam()
    template = QueryParam()
    archived = QueryParam()
    # "fork", "source", "mirror" or "collaborative"
    mode = QueryParam()
    exclusive = QueryParam()
    sort = QueryParam()
    order = QueryParam()
    page = QueryParam()
    limit = QueryParam()


class SearchUsers(SearchEndpoint):
    route = "users/search"
    response = SearchResults[User]

    query = QueryParam("q")
    uid = QueryParam()
    page = QueryParam()
    limit = QueryParam()


class SearchIssues(Endpoint):
    """Searches issues and pull requests across all repositories the user can see.

    Unlike the other searches this one answers with a bare list.
    """
    route = "repos/issues/search"
    response = List[Issue]

    state = QueryParam()
    labels = QueryParam()
    milestones = QueryParam()
    query = QueryParam("q")
    priority_repo_id = QueryParam()
    issue_type = QueryParam("type")
    since = QueryParam()
    before = QueryParam()
    assigned = QueryParam()
    created = QueryParam()
    mentioned = QueryParam()
    review_requested = QueryParam()
    reviewed = QueryParam()
    owner = QueryParam()
    team = QueryParam()
    page = QueryParam()
    limit = QueryParam()
