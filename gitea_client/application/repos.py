"""Repository endpoints: repositories, forks, commits, branches, labels, migration."""
from typing import List

from gitea_client.application.endpoint import Endpoint, StatusEndpoint
from gitea_client.domain.models import Branch, Commit, Label, Repository
from gitea_client.domain.params import BodyParam, QueryParam


class GetRepo(Endpoint):
    """Gets a repository visible to the authenticated user."""
    route = "repos/{owner}/{repo}"
    arguments = ("owner", "repo")
    response = Repository


class DeleteRepo(Endpoint):
    """Deletes a repository. This cannot be undone."""
    method = "DELETE"
    route = "repos/{owner}/{repo}"
    arguments = ("owner", "repo")


class EditRepo(Endpoint):
    """Edits a repository's settings.

    Unset fields are left unchanged on the server; an explicit empty string
    clears a text field (e.g. `.description("")`).
    """
    method = "PATCH"
    route = "repos/{owner}/{repo}"
    arguments = ("owner", "repo")
    response = Repository

    allow_fast_forward_only_merge = BodyParam()
    allow_manual_merge = BodyParam()
    allow_merge_commits = BodyParam()
    allow_rebase = BodyParam()
    allow_rebase_explicit = BodyParam()
    allow_rebase_update = BodyParam()
    allow_squash_merge = BodyParam()
    archived = BodyParam()
    autodetect_manual_merge = BodyParam()
    default_allow_maintainer_edit = BodyParam()
    default_branch = BodyParam()
    default_delete_branch_after_merge = BodyParam()
    # "merge", "rebase", "rebase-merge", "squash" or "fast-forward-only"
    default_merge_style = BodyParam()
    description = BodyParam()
    enable_prune = BodyParam()
    external_tracker = BodyParam()
    external_wiki = BodyParam()
    has_actions = BodyParam()
    has_issues = BodyParam()
    has_packages = BodyParam()
    has_projects = BodyParam()
    has_pull_requests = BodyParam()
    has_releases = BodyParam()
    has_wiki = BodyParam()
    ignore_whitespace_conflicts = BodyParam()
    # e.g. "8h30m0s"
    mirror_interval = BodyParam()
    name = BodyParam()
    private = BodyParam()
    # "repo", "owner" or "all"
    projects_mode = BodyParam()
    template = BodyParam()
    website = BodyParam()


class CreateFork(Endpoint):
    """Forks a repository into the authenticated user's account or an organization.

    Without options the fork keeps the original name.
    """
    method = "POST"
    route = "repos/{owner}/{repo}/forks"
    arguments = ("owner", "repo")
    response = Repository

    name = BodyParam()
    organization = BodyParam()


class ListForks(Endpoint):
    route = "repos/{owner}/{repo}/forks"
    arguments = ("owner", "repo")
    response = List[Repository]

    page = QueryParam()
    limit = QueryParam()


class GetCommits(Endpoint):
    """Lists commits, newest first, starting from the default branch unless `sha` is set."""
    route = "repos/{owner}/{repo}/commits"
    arguments = ("owner", "repo")
    response = List[Commit]

    sha = QueryParam()
    path = QueryParam()
    stat = QueryParam()
    verification = QueryParam()
    files = QueryParam()
    page = QueryParam()
    limit = QueryParam()
    not_ = QueryParam("not")


class ListBranches(Endpoint):
    route = "repos/{owner}/{repo}/branches"
    arguments = ("owner", "repo")
    response = List[Branch]

    page = QueryParam()
    limit = QueryParam()


class CreateBranch(Endpoint):
    """Creates a branch, from `old_ref_name` if set or empty otherwise."""
    method = "POST"
    route = "repos/{owner}/{repo}/branches"
    arguments = ("owner", "repo", "new_branch_name")
    response = Branch

    old_ref_name = BodyParam()


class GetBranch(Endpoint):
    route = "repos/{owner}/{repo}/branches/{branch}"
    arguments = ("owner", "repo", "branch")
    response = Branch


class DeleteBranch(Endpoint):
    method = "DELETE"
    route = "repos/{owner}/{repo}/branches/{branch}"
    arguments = ("owner", "repo", "branch")


class CreateLabel(Endpoint):
    method = "POST"
    route = "repos/{owner}/{repo}/labels"
    arguments = ("owner", "repo", "name", "color")
    response = Label

    description = BodyParam()
    exclusive = BodyParam()
    is_archived = BodyParam()


class EditLabel(Endpoint):
    method = "PATCH"
    route = "repos/{owner}/{repo}/labels/{id}"
    arguments = ("owner", "repo", "id")
    response = Label

    color = BodyParam()
    name = BodyParam()
    description = BodyParam()
    exclusive = BodyParam()
    is_archived = BodyParam()


class UpdateRepoAvatar(StatusEndpoint):
    """Replaces a repository's avatar with a base64 encoded image."""
    method = "POST"
    route = "repos/{owner}/{repo}/avatar"
    arguments = ("owner", "repo", "image")


class MigrateRepo(Endpoint):
    """Migrates (imports or mirrors) a remote repository."""
    method = "POST"
    route = "repos/migrate"
    arguments = ("clone_addr", "repo_name")
    response = Repository

    auth_password = BodyParam()
    auth_token = BodyParam()
    auth_username = BodyParam()
    description = BodyParam()
    issues = BodyParam()
    labels = BodyParam()
    lfs = BodyParam()
    lfs_endpoint = BodyParam()
    milestones = BodyParam()
    mirror = BodyParam()
    mirror_interval = BodyParam()
    private = BodyParam()
    pull_requests = BodyParam()
    releases = BodyParam()
    repo_owner = BodyParam()
    # "git", "github", "gitea", "gitlab", ...
    service = BodyParam()
    wiki = BodyParam()
