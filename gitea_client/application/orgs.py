"""Organization, membership and team endpoints."""
from typing import List

from gitea_client.application.endpoint import Endpoint, ExistenceCheck, StatusEndpoint
from gitea_client.domain.models import Organization, Repository, Team, User
from gitea_client.domain.params import BodyParam, QueryParam


class ListOrgs(Endpoint):
    """Lists every organization visible to the authenticated user."""
    route = "orgs"
    response = List[Organization]


class CreateOrg(Endpoint):
    method = "POST"
    route = "orgs"
    arguments = ("username",)
    response = Organization

    description = BodyParam()
    email = BodyParam()
    full_name = BodyParam()
    location = BodyParam()
    repo_admin_change_team_access = BodyParam()
    visibility = BodyParam()
    website = BodyParam()


class GetOrg(Endpoint):
    route = "orgs/{name}"
    arguments = ("name",)
    response = Organization


class EditOrg(Endpoint):
    method = "PATCH"
    route = "orgs/{name}"
    arguments = ("name",)
    response = Organization

    description = BodyParam()
    email = BodyParam()
    full_name = BodyParam()
    location = BodyParam()
    repo_admin_change_team_access = BodyParam()
    visibility = BodyParam()
    website = BodyParam()


class DeleteOrg(Endpoint):
    method = "DELETE"
    route = "orgs/{name}"
    arguments = ("name",)


class ListOrgRepos(Endpoint):
    route = "orgs/{org}/repos"
    arguments = ("org",)
    response = List[Repository]

    page = QueryParam()
    limit = QueryParam()


class CreateOrgRepo(Endpoint):
    method = "POST"
    route = "orgs/{org}/repos"
    arguments = ("org", "name")
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


class ListMembers(Endpoint):
    route = "orgs/{org}/members"
    arguments = ("org",)
    response = List[User]

    page = QueryParam()
    limit = QueryParam()


class IsMember(ExistenceCheck):
    route = "orgs/{org}/members/{username}"
    arguments = ("org", "username")


class RemoveMember(Endpoint):
    method = "DELETE"
    route = "orgs/{org}/members/{username}"
    arguments = ("org", "username")


class ListPublicMembers(Endpoint):
    route = "orgs/{org}/public_members"
    arguments = ("org",)
    response = List[User]

    page = QueryParam()
    limit = QueryParam()


class IsPublicMember(ExistenceCheck):
    route = "orgs/{org}/public_members/{username}"
    arguments = ("org", "username")


class PublicizeMembership(Endpoint):
    method = "PUT"
    route = "orgs/{org}/public_members/{username}"
    arguments = ("org", "username")


class ConcealMembership(Endpoint):
    method = "DELETE"
    route = "orgs/{org}/public_members/{username}"
    arguments = ("org", "username")


class CreateTeam(Endpoint):
    """Creates a team.

    `permission` is one of "read", "write" or "admin"; `units_map` maps unit
    names such as "repo.code" to a permission.
    """
    method = "POST"
    route = "orgs/{org}/teams"
    arguments = ("org", "name")
    response = Team

    description = BodyParam()
    permission = BodyParam()
    units = BodyParam()
    units_map = BodyParam()
    includes_all_repositories = BodyParam()
    can_create_org_repo = BodyParam()


class EditTeam(Endpoint):
    method = "PATCH"
    route = "teams/{id}"
    arguments = ("id", "name")
    response = Team

    description = BodyParam()
    permission = BodyParam()
    units = BodyParam()
    units_map = BodyParam()
    includes_all_repositories = BodyParam()
    can_create_org_repo = BodyParam()


class UpdateOrgAvatar(StatusEndpoint):
    method = "POST"
    route = "orgs/{name}/avatar"
    arguments = ("name", "image")
