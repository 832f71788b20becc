"""Gitea client facade exposing the endpoint builders by API area.

Example:

    async with GiteaClient("https://gitea.example.com", Auth.token("...")) as client:
        repo = await client.repos("acme", "widgets").get().send(client)
        issues = await (
            client.issues("acme", "widgets").list().state(State.OPEN).page(2).send(client)
        )
"""
from typing import Iterable

from gitea_client.application import admin, issues, orgs, pulls, repos, search, users
from gitea_client.domain.auth import Auth
from gitea_client.infrastructure.http_client import GiteaHTTPClient
from gitea_client.infrastructure.settings import GiteaSettings


class GiteaClient(GiteaHTTPClient):
    """HTTP transport plus namespaced factories for every endpoint builder.

    Builders only need a transport to send, so `builder.send(client)` takes
    this client (or any other IGiteaTransport).
    """

    @classmethod
    def from_settings(cls, settings: GiteaSettings) -> "GiteaClient":
        return cls(settings.base_url, settings.auth, timeout=settings.timeout)

    @classmethod
    def from_env(cls) -> "GiteaClient":
        """Build a client from GITEA_* environment variables (see GiteaSettings)."""
        return cls.from_settings(GiteaSettings.from_env())

    def user(self) -> "UserApi":
        return UserApi()

    def users(self, username: str) -> "UsersApi":
        return UsersApi(username)

    def repos(self, owner: str, repo: str) -> "ReposApi":
        return ReposApi(owner, repo)

    def issues(self, owner: str, repo: str) -> "IssuesApi":
        return IssuesApi(owner, repo)

    def pulls(self, owner: str, repo: str) -> "PullsApi":
        return PullsApi(owner, repo)

    def orgs(self, name: str) -> "OrgsApi":
        return OrgsApi(name)

    def list_orgs(self) -> "orgs.ListOrgs":
        return orgs.ListOrgs()

    def teams(self) -> "TeamsApi":
        return TeamsApi()

    def search(self) -> "SearchApi":
        return SearchApi()

    def admin(self) -> "AdminApi":
        return AdminApi()

    def migrate(self, clone_addr: str, repo_name: str) -> "repos.MigrateRepo":
        """Migrate a remote repository into this instance."""
        return repos.MigrateRepo(clone_addr, repo_name)


class UserApi:
    """Operations on the authenticated user."""

    def current(self) -> users.GetAuthenticatedUser:
        return users.GetAuthenticatedUser()

    def get(self, username: str) -> users.GetUser:
        return users.GetUser(username)

    def create_repo(self, name: str) -> users.CreateUserRepo:
        return users.CreateUserRepo(name)

    def list_repos(self) -> users.ListUserRepos:
        return users.ListUserRepos()

    def orgs(self) -> users.ListUserOrgs:
        return users.ListUserOrgs()

    def settings(self) -> users.GetSettings:
        return users.GetSettings()

    def update_settings(self) -> users.UpdateSettings:
        return users.UpdateSettings()

    def starred(self) -> users.ListStarred:
        return users.ListStarred()

    def star(self, owner: str, repo: str) -> users.StarRepo:
        return users.StarRepo(owner, repo)

    def unstar(self, owner: str, repo: str) -> users.UnstarRepo:
        return users.UnstarRepo(owner, repo)

    def is_starred(self, owner: str, repo: str) -> users.IsStarred:
        return users.IsStarred(owner, repo)

    def list_access_tokens(self, username: str) -> users.ListAccessTokens:
        return users.ListAccessTokens(username)

    def create_access_token(
        self,
        username: str,
        name: str,
        scopes: Iterable[str]
    ) -> users.CreateAccessToken:
        return users.CreateAccessToken(username, name, [str(s) for s in scopes])

    def delete_access_token(self, username: str, token: str) -> users.DeleteAccessToken:
        return users.DeleteAccessToken(username, token)


class UsersApi:
    """Operations on a user by name."""

    def __init__(self, username: str):
        self.username = username

    def get(self) -> users.GetUser:
        return users.GetUser(self.username)

    def repos(self) -> users.ListUserReposByName:
        return users.ListUserReposByName(self.username)

    def orgs(self) -> users.ListUserOrgsByName:
        return users.ListUserOrgsByName(self.username)

    def starred(self) -> users.ListStarredByName:
        return users.ListStarredByName(self.username)

    def tokens(self) -> users.ListAccessTokens:
        return users.ListAccessTokens(self.username)


class ReposApi:
    def __init__(self, owner: str, repo: str):
        self.owner = owner
        self.repo = repo

    def get(self) -> repos.GetRepo:
        return repos.GetRepo(self.owner, self.repo)

    def edit(self) -> repos.EditRepo:
        return repos.EditRepo(self.owner, self.repo)

    def delete(self) -> repos.DeleteRepo:
        """Delete the repository. There is no confirmation and no undo."""
        return repos.DeleteRepo(self.owner, self.repo)

    def create_fork(self) -> repos.CreateFork:
        return repos.CreateFork(self.owner, self.repo)

    def get_forks(self) -> repos.ListForks:
        return repos.ListForks(self.owner, self.repo)

    def get_commits(self) -> repos.GetCommits:
        return repos.GetCommits(self.owner, self.repo)

    def list_branches(self) -> repos.ListBranches:
        return repos.ListBranches(self.owner, self.repo)

    def create_branch(self, new_branch_name: str) -> repos.CreateBranch:
        return repos.CreateBranch(self.owner, self.repo, new_branch_name)

    def get_branch(self, branch: str) -> repos.GetBranch:
        return repos.GetBranch(self.owner, self.repo, branch)

    def delete_branch(self, branch: str) -> repos.DeleteBranch:
        return repos.DeleteBranch(self.owner, self.repo, branch)

    def create_label(self, name: str, color: str) -> repos.CreateLabel:
        return repos.CreateLabel(self.owner, self.repo, name, color)

    def edit_label(self, label_id: int) -> repos.EditLabel:
        return repos.EditLabel(self.owner, self.repo, label_id)

    def update_avatar(self, image: str) -> repos.UpdateRepoAvatar:
        return repos.UpdateRepoAvatar(self.owner, self.repo, image)

    def issues(self) -> "IssuesApi":
        return IssuesApi(self.owner, self.repo)

    def pulls(self) -> "PullsApi":
        return PullsApi(self.owner, self.repo)


class IssuesApi:
    def __init__(self, owner: str, repo: str):
        self.owner = owner
        self.repo = repo

    def create(self, title: str) -> issues.CreateIssue:
        return issues.CreateIssue(self.owner, self.repo, title)

    def list(self) -> issues.ListIssues:
        return issues.ListIssues(self.owner, self.repo)

    def get(self, index: int) -> issues.GetIssue:
        return issues.GetIssue(self.owner, self.repo, index)

    def edit(self, index: int) -> issues.EditIssue:
        return issues.EditIssue(self.owner, self.repo, index)

    def delete(self, index: int) -> issues.DeleteIssue:
        return issues.DeleteIssue(self.owner, self.repo, index)

    def comments(self) -> "CommentsApi":
        return CommentsApi(self.owner, self.repo)


class CommentsApi:
    def __init__(self, owner: str, repo: str):
        self.owner = owner
        self.repo = repo

    def create(self, issue: int, body: str) -> issues.CreateComment:
        return issues.CreateComment(self.owner, self.repo, issue, body)

    def list(self, issue: int) -> issues.ListComments:
        return issues.ListComments(self.owner, self.repo, issue)

    def list_all(self) -> issues.ListAllComments:
        return issues.ListAllComments(self.owner, self.repo)

    def get(self, comment: int) -> issues.GetComment:
        return issues.GetComment(self.owner, self.repo, comment)

    def edit(self, comment: int, body: str) -> issues.EditComment:
        return issues.EditComment(self.owner, self.repo, comment, body)

    def delete(self, comment: int) -> issues.DeleteComment:
        return issues.DeleteComment(self.owner, self.repo, comment)


class PullsApi:
    def __init__(self, owner: str, repo: str):
        self.owner = owner
        self.repo = repo

    def create(self, head: str, base: str, title: str) -> pulls.CreatePullRequest:
        return pulls.CreatePullRequest(self.owner, self.repo, head, base, title)

    def list(self) -> pulls.ListPullRequests:
        return pulls.ListPullRequests(self.owner, self.repo)

    def get(self, index: int) -> pulls.GetPullRequest:
        return pulls.GetPullRequest(self.owner, self.repo, index)

    def get_by_branches(self, head: str, base: str) -> pulls.GetPullRequestByBranches:
        return pulls.GetPullRequestByBranches(self.owner, self.repo, head, base)

    def edit(self, index: int) -> pulls.EditPullRequest:
        return pulls.EditPullRequest(self.owner, self.repo, index)

    def pinned(self) -> pulls.ListPinnedPullRequests:
        return pulls.ListPinnedPullRequests(self.owner, self.repo)

    def reviews(self, index: int) -> pulls.ListReviews:
        return pulls.ListReviews(self.owner, self.repo, index)


class OrgsApi:
    def __init__(self, name: str):
        self.name = name

    def create(self) -> orgs.CreateOrg:
        return orgs.CreateOrg(self.name)

    def get(self) -> orgs.GetOrg:
        return orgs.GetOrg(self.name)

    def edit(self) -> orgs.EditOrg:
        return orgs.EditOrg(self.name)

    def delete(self) -> orgs.DeleteOrg:
        return orgs.DeleteOrg(self.name)

    def list_repos(self) -> orgs.ListOrgRepos:
        return orgs.ListOrgRepos(self.name)

    def create_repo(self, name: str) -> orgs.CreateOrgRepo:
        return orgs.CreateOrgRepo(self.name, name)

    def list_members(self) -> orgs.ListMembers:
        return orgs.ListMembers(self.name)

    def is_member(self, username: str) -> orgs.IsMember:
        return orgs.IsMember(self.name, username)

    def remove_member(self, username: str) -> orgs.RemoveMember:
        return orgs.RemoveMember(self.name, username)

    def list_public_members(self) -> orgs.ListPublicMembers:
        return orgs.ListPublicMembers(self.name)

    def is_public_member(self, username: str) -> orgs.IsPublicMember:
        return orgs.IsPublicMember(self.name, username)

    def publicize_membership(self, username: str) -> orgs.PublicizeMembership:
        return orgs.PublicizeMembership(self.name, username)

    def conceal_membership(self, username: str) -> orgs.ConcealMembership:
        return orgs.ConcealMembership(self.name, username)

    def create_team(self, name: str) -> orgs.CreateTeam:
        return orgs.CreateTeam(self.name, name)

    def update_avatar(self, image: str) -> orgs.UpdateOrgAvatar:
        return orgs.UpdateOrgAvatar(self.name, image)


class TeamsApi:
    def edit(self, team_id: int, name: str) -> orgs.EditTeam:
        return orgs.EditTeam(team_id, name)


class SearchApi:
    def repos(self) -> search.SearchRepos:
        return search.SearchRepos()

    def users(self) -> search.SearchUsers:
        return search.SearchUsers()

    def issues(self) -> search.SearchIssues:
        return search.SearchIssues()


class AdminApi:
    def create_user(self, email: str, username: str, password: str) -> admin.CreateUser:
        return admin.CreateUser(email, username, password)

    def update_user(
        self,
        username: str,
        login_name: str,
        source_id: int = 0
    ) -> admin.UpdateUser:
        return admin.UpdateUser(username, login_name, source_id)


__all__ = ["GiteaClient", "Auth"]
