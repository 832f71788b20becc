"""Site administration endpoints. These require an admin account."""
from gitea_client.application.endpoint import Endpoint
from gitea_client.domain.models import User
from gitea_client.domain.params import BodyParam


class CreateUser(Endpoint):
    method = "POST"
    route = "admin/users"
    arguments = ("email", "username", "password")
    response = User

    created_at = BodyParam()
    full_name = BodyParam()
    must_change_password = BodyParam()
    restricted = BodyParam()
    send_notify = BodyParam()
    source_id = BodyParam()
    visibility = BodyParam()
    login_name = BodyParam()


class UpdateUser(Endpoint):
    """Edits an existing user.

    Gitea requires `login_name` and `source_id` on every edit; use
    `source_id=0` and the username for local accounts.
    """
    method = "PATCH"
    route = "admin/users/{username}"
    arguments = ("username", "login_name", "source_id")
    response = User

    admin = BodyParam()
    allow_create_organization = BodyParam()
    allow_git_hook = BodyParam()
    allow_import_local = BodyParam()
    description = BodyParam()
    email = BodyParam()
    location = BodyParam()
    max_repo_creation = BodyParam()
    prohibit_login = BodyParam()
    website = BodyParam()
    full_name = BodyParam()
    must_change_password = BodyParam()
    password = BodyParam()
    restricted = BodyParam()
    visibility = BodyParam()
