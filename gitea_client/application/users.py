"""User endpoints: the authenticated user, other users, tokens, settings and stars."""
from typing import List

from gitea_client.application.endpoint import Endpoint, ExistenceCheck
from gitea_client.domain.models import (
    AccessToken,
    Organization,
    Repository,
    User,
    UserSettings,
)
from gitea_client.domain.params import BodyParam, QueryParam


class GetAuthenticatedUser(Endpoint):
    route = "user"
    response = User


class GetUser(Endpoint):
    route = "users/{username}"
    arguments = ("username",)
    response = User


class CreateUserRepo(Endpoint):
    """Creates a repository owned by the authenticated user."""
    method = "POST"
    route = "user/repos"
    arguments = ("name",)
    response = Repository

    auto_init = BodyParam()
    default_branch = BodyParam()
    description = BodyParam()
    gitignores = BodyParam()
    issue_labels = BodyParam()
    license = BodyParam()
    object_format_name = BodyParam()
    private = BodyParam()
    readme = BodyParam()
    template = BodyParam()
    trust_model = BodyParam()


class ListUserRepos(Endpoint):
    """Lists the repositories the authenticated user owns."""
    route = "user/repos"
    response = List[Repository]

    page = QueryParam()
    limit = QueryParam()


class ListUserOrgs(Endpoint):
    route = "user/orgs"
    response = List[Organization]

    page = QueryParam()
    limit = QueryParam()


class GetSettings(Endpoint):
    route = "user/settings"
    response = UserSettings


class UpdateSettings(Endpoint):
    method = "PATCH"
    route = "user/settings"
    response = UserSettings

    description = BodyParam()
    diff_view_style = BodyParam()
    enable_repo_unit_hints = BodyParam()
    full_name = BodyParam()
    hide_activity = BodyParam()
    hide_email = BodyParam()
    language = BodyParam()
    location = BodyParam()
    pronouns = BodyParam()
    theme = BodyParam()
    website = BodyParam()


class ListStarred(Endpoint):
    route = "user/starred"
    response = List[Repository]

    page = QueryParam()
    limit = QueryParam()


class StarRepo(Endpoint):
    method = "PUT"
    route = "user/starred/{owner}/{repo}"
    arguments = ("owner", "repo")


class UnstarRepo(Endpoint):
    method = "DELETE"
    route = "user/starred/{owner}/{repo}"
    arguments = ("owner", "repo")


class IsStarred(ExistenceCheck):
    """Whether the authenticated user has starred a repository."""
    route = "user/starred/{owner}/{repo}"
    arguments = ("owner", "repo")


class ListUserReposByName(Endpoint):
    route = "users/{username}/repos"
    arguments = ("username",)
    response = List[Repository]

    page = QueryParam()
    limit = QueryParam()


class ListUserOrgsByName(Endpoint):
    route = "users/{username}/orgs"
    arguments = ("username",)
    response = List[Organization]

    page = QueryParam()
    limit = QueryParam()


class ListStarredByName(Endpoint):
    route = "users/{username}/starred"
    arguments = ("username",)
    response = List[Repository]

    page = QueryParam()
    limit = QueryParam()


class ListAccessTokens(Endpoint):
    route = "users/{username}/tokens"
    arguments = ("username",)
    response = List[AccessToken]

    page = QueryParam()
    limit = QueryParam()


class CreateAccessToken(Endpoint):
    """Creates a personal access token.

    Gitea only accepts basic authentication for this call. The new token is
    in the `sha1` field of the result.
    """
    method = "POST"
    route = "users/{username}/tokens"
    arguments = ("username", "name", "scopes")
    response = AccessToken


class DeleteAccessToken(Endpoint):
    """Deletes a token by name or id."""
    method = "DELETE"
    route = "users/{username}/tokens/{token}"
    arguments = ("username", "token")
