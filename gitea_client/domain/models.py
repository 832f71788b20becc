"""Domain models mirroring the JSON schemas of the Gitea API.

These are only ever built by deserializing a response body. Every field is
optional or defaulted so that partial payloads (older Gitea versions, limited
token scopes) still validate.
"""
from enum import Enum
from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


T = TypeVar("T")


class GiteaModel(BaseModel):
    """Base for all response models."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# Enums

class State(str, Enum):
    """Issue/pull-request state filter used when listing."""
    OPEN = "open"
    CLOSED = "closed"
    ALL = "all"


class StateType(str, Enum):
    """State of a single issue or pull request."""
    OPEN = "open"
    CLOSED = "closed"


class IssueType(str, Enum):
    ISSUES = "issues"
    PULLS = "pulls"


class Sort(str, Enum):
    """Sort order for pull request listings."""
    OLDEST = "oldest"
    RECENT_UPDATE = "recentupdate"
    LEAST_UPDATE = "leastupdate"
    MOST_COMMENT = "mostcomment"
    LEAST_COMMENT = "leastcomment"
    PRIORITY = "priority"


class Visibility(str, Enum):
    PUBLIC = "public"
    LIMITED = "limited"
    PRIVATE = "private"


class ObjectFormatName(str, Enum):
    SHA1 = "sha1"
    SHA256 = "sha256"


class TrustModel(str, Enum):
    DEFAULT = "default"
    COLLABORATOR = "collaborator"
    COMMITTER = "committer"
    COLLABORATOR_COMMITTER = "collaboratorcommitter"


class Permission(str, Enum):
    NONE = "none"
    READ = "read"
    WRITE = "write"
    ADMIN = "admin"
    OWNER = "owner"


class ReviewStateType(str, Enum):
    APPROVED = "APPROVED"
    PENDING = "PENDING"
    COMMENT = "COMMENT"
    REQUEST_CHANGES = "REQUEST_CHANGES"
    REQUEST_REVIEW = "REQUEST_REVIEW"
    UNKNOWN = "UNKNOWN"


# Users

class User(GiteaModel):
    """A Gitea user account (also used for organization owners)."""
    active: bool = False
    avatar_url: str = ""
    created: str = ""
    description: str = ""
    email: str = ""
    followers_count: int = 0
    following_count: int = 0
    full_name: str = ""
    id: int = 0
    is_admin: bool = False
    language: str = ""
    last_login: str = ""
    location: str = ""
    login: str = ""
    login_name: str = ""
    prohibit_login: bool = False
    pronouns: str = ""
    restricted: bool = False
    starred_repos_count: int = 0
    visibility: str = ""
    website: str = ""


class AccessToken(GiteaModel):
    """A personal access token.

    `sha1` holds the token itself and is only populated in the response to
    the create call; listings return just the last eight characters.
    """
    id: int = 0
    name: str = ""
    scopes: Optional[List[str]] = None
    sha1: str = ""
    token_last_eight: str = ""


class UserSettings(GiteaModel):
    description: str = ""
    diff_view_style: str = ""
    enable_repo_unit_hints: bool = False
    full_name: str = ""
    hide_activity: bool = False
    hide_email: bool = False
    language: str = ""
    location: str = ""
    pronouns: str = ""
    theme: str = ""
    website: str = ""


# Repositories

class ExternalTracker(GiteaModel):
    """Settings for an external issue tracker."""
    external_tracker_format: str = ""
    external_tracker_regexp_pattern: str = ""
    external_tracker_style: str = ""
    external_tracker_url: str = ""


class ExternalWiki(GiteaModel):
    external_wiki_url: str = ""


class Repository(GiteaModel):
    """A Gitea repository."""
    allow_fast_forward_only_merge: bool = False
    allow_merge_commits: bool = False
    allow_rebase: bool = False
    allow_rebase_explicit: bool = False
    allow_rebase_update: bool = False
    allow_squash_merge: bool = False
    archived: bool = False
    archived_at: str = ""
    avatar_url: str = ""
    clone_url: str = ""
    created_at: str = ""
    default_allow_maintainer_edit: bool = False
    default_branch: str = ""
    default_delete_branch_after_merge: bool = False
    default_merge_style: str = ""
    description: str = ""
    empty: bool = False
    external_tracker: Optional[ExternalTracker] = None
    external_wiki: Optional[ExternalWiki] = None
    fork: bool = False
    forks_count: int = 0
    full_name: str = ""
    has_actions: bool = False
    has_issues: bool = False
    has_packages: bool = False
    has_projects: bool = False
    has_pull_requests: bool = False
    has_releases: bool = False
    has_wiki: bool = False
    html_url: str = ""
    id: int = 0
    ignore_whitespace_conflicts: bool = False
    internal: bool = False
    language: str = ""
    languages_url: str = ""
    link: str = ""
    mirror: bool = False
    mirror_interval: str = ""
    mirror_updated: str = ""
    name: str = ""
    object_format_name: Optional[ObjectFormatName] = None
    open_issues_count: int = 0
    open_pr_counter: int = 0
    original_url: str = ""
    owner: User = Field(default_factory=User)
    private: bool = False
    release_counter: int = 0
    size: int = 0
    ssh_url: str = ""
    stars_count: int = 0
    template: bool = False
    updated_at: str = ""
    url: str = ""
    watchers_count: int = 0
    website: str = ""
    wiki_branch: str = ""


class CommitUser(GiteaModel):
    date: str = ""
    email: str = ""
    name: str = ""


class RepoCommit(GiteaModel):
    author: CommitUser = Field(default_factory=CommitUser)
    committer: CommitUser = Field(default_factory=CommitUser)
    message: str = ""
    url: str = ""


class Commit(GiteaModel):
    """A commit as returned by the commit listing.

    `author`/`committer` are the Gitea accounts matched to the commit, if any;
    the raw git identities live under `commit`.
    """
    author: Optional[User] = None
    commit: RepoCommit = Field(default_factory=RepoCommit)
    committer: Optional[User] = None
    html_url: str = ""
    sha: str = ""
    url: str = ""


class PayloadUser(GiteaModel):
    email: str = ""
    name: str = ""
    username: str = ""


class PayloadCommit(GiteaModel):
    author: PayloadUser = Field(default_factory=PayloadUser)
    committer: PayloadUser = Field(default_factory=PayloadUser)
    id: str = ""
    message: str = ""
    added: Optional[List[str]] = None
    modified: Optional[List[str]] = None
    removed: Optional[List[str]] = None
    timestamp: str = ""
    url: str = ""


class Branch(GiteaModel):
    commit: PayloadCommit = Field(default_factory=PayloadCommit)
    effective_branch_protection_name: str = ""
    enable_status_check: bool = False
    name: str = ""
    protected: bool = False
    required_approvals: int = 0
    status_check_contexts: List[str] = Field(default_factory=list)
    user_can_merge: bool = False
    user_can_push: bool = False


# Issues

class Attachment(GiteaModel):
    browser_download_url: str = ""
    created_at: str = ""
    download_count: int = 0
    id: int = 0
    name: str = ""
    size: int = 0
    uuid: str = ""


class Label(GiteaModel):
    color: str = ""
    description: str = ""
    exclusive: bool = False
    id: int = 0
    is_archived: bool = False
    name: str = ""
    url: str = ""


class Issue(GiteaModel):
    """An issue (pull requests are issues too in search results)."""
    assets: List[Attachment] = Field(default_factory=list)
    assignee: Optional[User] = None
    assignees: Optional[List[User]] = None
    body: Optional[str] = None
    closed_at: Optional[str] = None
    comments: int = 0
    created_at: str = ""
    due_date: Optional[str] = None
    html_url: str = ""
    id: int = 0
    is_locked: bool = False
    labels: List[Label] = Field(default_factory=list)
    number: int = 0
    original_author: str = ""
    original_author_id: int = 0
    pin_order: int = 0
    ref: str = ""
    state: StateType = StateType.OPEN
    updated_at: str = ""
    title: str = ""
    url: str = ""
    user: User = Field(default_factory=User)


class Comment(GiteaModel):
    assets: List[Attachment] = Field(default_factory=list)
    body: str = ""
    created_at: str = ""
    html_url: str = ""
    id: int = 0
    issue_url: str = ""
    original_author: str = ""
    original_author_id: int = 0
    pull_request_url: str = ""
    updated_at: str = ""
    user: User = Field(default_factory=User)


# Pull requests

class PrBranchInfo(GiteaModel):
    """One side (head or base) of a pull request."""
    label: str = ""
    ref: str = ""
    repo: Optional[Repository] = None
    repo_id: int = 0
    sha: str = ""


class PullRequest(GiteaModel):
    additions: int = 0
    allow_maintainer_edit: bool = False
    assignees: Optional[List[User]] = None
    base: PrBranchInfo = Field(default_factory=PrBranchInfo)
    body: str = ""
    changed_files: int = 0
    closed_at: Optional[str] = None
    comments: int = 0
    created_at: str = ""
    deletions: int = 0
    diff_url: str = ""
    draft: bool = False
    due_date: Optional[str] = None
    head: PrBranchInfo = Field(default_factory=PrBranchInfo)
    html_url: str = ""
    id: int = 0
    is_locked: bool = False
    labels: List[Label] = Field(default_factory=list)
    merge_base: str = ""
    merge_commit_sha: Optional[str] = None
    mergeable: bool = False
    merged: bool = False
    merged_at: Optional[str] = None
    merged_by: Optional[User] = None
    number: int = 0
    patch_url: str = ""
    pin_order: int = 0
    requested_reviewers: Optional[List[Optional[User]]] = None
    review_comments: int = 0
    state: StateType = StateType.OPEN
    title: str = ""
    updated_at: str = ""
    url: str = ""
    user: User = Field(default_factory=User)


# Organizations

class Organization(GiteaModel):
    id: int = 0
    name: str = ""
    visibility: Visibility = Visibility.PUBLIC
    repo_admin_change_team_access: bool = False
    avatar_url: Optional[str] = None
    description: Optional[str] = None
    email: Optional[str] = None
    full_name: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None


class Team(GiteaModel):
    can_create_org_repo: bool = False
    description: str = ""
    id: int = 0
    includes_all_repositories: bool = False
    name: str = ""
    organization: Optional[Organization] = None
    permission: Permission = Permission.NONE
    units: List[str] = Field(default_factory=list)
    units_map: Dict[str, str] = Field(default_factory=dict)


class PullReview(GiteaModel):
    body: str = ""
    comments_count: int = 0
    commit_id: str = ""
    dismissed: bool = False
    html_url: str = ""
    id: int = 0
    official: bool = False
    pull_request_url: str = ""
    stale: bool = False
    state: ReviewStateType = ReviewStateType.UNKNOWN
    submitted_at: str = ""
    team: Optional[Team] = None
    updated_at: str = ""
    user: Optional[User] = None


# Envelopes

class SearchResults(GiteaModel, Generic[T]):
    """Envelope wrapping the results of the search endpoints."""
    ok: bool = False
    data: List[T] = Field(default_factory=list)
