"""Tests for optional parameter declaration and projection."""
import json
from datetime import date, datetime, timezone

from gitea_client.application.issues import CreateIssue, ListIssues
from gitea_client.application.pulls import ListPullRequests
from gitea_client.application.repos import EditRepo, GetCommits
from gitea_client.application.search import SearchIssues, SearchRepos
from gitea_client.domain.models import ExternalWiki, Sort, State
from gitea_client.domain.params import (
    BodyParam,
    QueryParam,
    declared_params,
    encode_query_value,
    project_body,
    project_query,
)


def test_unset_parameters_are_absent():
    """Test that a fresh builder projects nothing."""
    builder = ListIssues("acme", "widgets")

    assert project_query(builder) == []
    assert project_body(builder) == {}


def test_setters_chain_and_return_builder():
    """Test that each setter returns the same builder."""
    builder = ListIssues("acme", "widgets")

    assert builder.page(2).limit(10) is builder
    assert project_query(builder) == [("page", "2"), ("limit", "10")]


def test_projection_follows_declaration_order():
    """Test that parameters come out in declaration order, not call order."""
    builder = ListIssues("acme", "widgets").limit(10).state(State.OPEN).page(1)

    assert [name for name, _ in project_query(builder)] == ["state", "page", "limit"]


def test_wire_name_renames():
    """Test that parameters are sent under their wire names."""
    issues = ListIssues("acme", "widgets").query("crash").issue_type("pulls")
    commits = GetCommits("acme", "widgets").not_("deadbeef")
    repos = SearchRepos().starred_by(5)

    assert project_query(issues) == [("q", "crash"), ("type", "pulls")]
    assert project_query(commits) == [("not", "deadbeef")]
    assert project_query(repos) == [("starredBy", "5")]


def test_lists_are_comma_joined():
    """Test that list values become a single comma separated value."""
    issues = ListIssues("acme", "widgets").labels(["bug", "ui"])
    pulls = ListPullRequests("acme", "widgets").labels([1, 2])
    search = SearchIssues().milestones(["v1", "v2"]).labels(["bug"])

    assert project_query(issues) == [("labels", "bug,ui")]
    assert project_query(pulls) == [("labels", "1,2")]
    assert project_query(search) == [("labels", "bug"), ("milestones", "v1,v2")]


def test_query_value_encoding():
    """Test booleans, enums and numbers in the query string."""
    assert encode_query_value(True) == "true"
    assert encode_query_value(False) == "false"
    assert encode_query_value(Sort.RECENT_UPDATE) == "recentupdate"
    assert encode_query_value(3) == "3"

    builder = GetCommits("acme", "widgets").stat(False).files(True)
    assert project_query(builder) == [("stat", "false"), ("files", "true")]


def test_none_unsets_a_parameter():
    """Test that setting None returns the option to absent."""
    builder = ListIssues("acme", "widgets").page(3)
    builder.page(None)

    assert project_query(builder) == []


def test_attribute_assignment_sets_option():
    """Test that plain assignment goes through the descriptor."""
    builder = ListIssues("acme", "widgets")
    builder.limit = 50

    assert builder.options == {"limit": 50}


def test_body_projection_serializes_models():
    """Test that nested models are dumped without unset fields."""
    builder = EditRepo("acme", "widgets").description("").external_wiki(
        ExternalWiki(external_wiki_url="https://wiki.example.test")
    )

    assert project_body(builder) == {
        "description": "",
        "external_wiki": {"external_wiki_url": "https://wiki.example.test"},
    }


def test_body_and_query_params_are_kept_apart():
    """Test that body parameters never leak into the query string."""
    builder = CreateIssue("acme", "widgets", "bug").labels([1, 2]).closed(False)

    assert project_query(builder) == []
    assert project_body(builder) == {"closed": False, "labels": [1, 2]}


def test_declared_params_are_inherited():
    """Test that subclasses see their bases' parameters first."""
    class Base:
        page = QueryParam()

    class Child(Base):
        body = BodyParam()
        page = QueryParam("p")

    assert [p.name for p in declared_params(Child)] == ["page", "body"]
    assert [p.wire_name for p in declared_params(Child)] == ["p", "body"]


def test_dates_are_iso_formatted():
    """Test that dates and datetimes are sent as ISO 8601 text."""
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    issues = ListIssues("acme", "widgets").since(moment).before(date(2024, 2, 1))
    created = CreateIssue("acme", "widgets", "bug").due_date(moment)

    assert project_query(issues) == [
        ("since", "2024-01-02T03:04:05+00:00"),
        ("before", "2024-02-01"),
    ]
    assert project_body(created) == {"due_date": "2024-01-02T03:04:05+00:00"}
    assert json.dumps(created.render_body())
