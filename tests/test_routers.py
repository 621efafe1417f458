"""
HTTP-level tests for the /gitminer endpoints.

Repositories are replaced with AsyncMocks (see conftest), so these tests pin
down routing, parameter defaults, status codes and body validation.
"""

from gitminer.core.paging import PagingDirective


class TestAmbientEndpoints:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_root(self, client):
        assert client.get("/").status_code == 200


class TestListDefaults:
    """Every list defaults to page=5/size=5 except /projects (page=0)."""

    def test_projects_default_page_is_zero(self, client, repos):
        repos["projects"].list_all.return_value = []

        response = client.get("/gitminer/projects")

        assert response.status_code == 200
        assert response.json() == []
        repos["projects"].list_all.assert_awaited_once_with(None, PagingDirective(page=0, size=5))

    def test_users_default_page_is_five(self, client, repos):
        repos["users"].list_all.return_value = []

        client.get("/gitminer/users")

        repos["users"].list_all.assert_awaited_once_with(None, PagingDirective(page=5, size=5))

    def test_commits_filter_param(self, client, repos, sample_commit):
        repos["commits"].list_all.return_value = [sample_commit]

        response = client.get("/gitminer/commits", params={"author_name": "Ada", "order": "-title", "page": 0, "size": 10})

        assert response.status_code == 200
        assert response.json() == [sample_commit]
        repos["commits"].list_all.assert_awaited_once_with(
            "Ada",
            PagingDirective(page=0, size=10, sort_field="title", descending=True),
        )

    def test_issues_filter_param(self, client, repos):
        repos["issues"].list_all.return_value = []

        client.get("/gitminer/issues", params={"state": "closed"})

        repos["issues"].list_all.assert_awaited_once_with("closed", PagingDirective(page=5, size=5))

    def test_comments_filter_uses_name_param(self, client, repos):
        repos["comments"].list_all.return_value = []

        client.get("/gitminer/comments", params={"name": "Grace", "order": "created_at"})

        repos["comments"].list_all.assert_awaited_once_with(
            "Grace",
            PagingDirective(page=5, size=5, sort_field="created_at", descending=False),
        )

    def test_negative_size_is_passed_through(self, client, repos):
        repos["users"].list_all.return_value = []

        client.get("/gitminer/users", params={"size": -1})

        repos["users"].list_all.assert_awaited_once_with(None, PagingDirective(page=5, size=-1))


class TestGetById:
    def test_found(self, client, repos, sample_user):
        repos["users"].get_by_id.return_value = sample_user

        response = client.get("/gitminer/users/u1")

        assert response.status_code == 200
        assert response.json() == sample_user

    def test_not_found(self, client, repos):
        for resource in ("projects", "commits", "issues", "comments", "users"):
            repos[resource].get_by_id.return_value = None
            response = client.get(f"/gitminer/{resource}/missing")
            assert response.status_code == 404, resource

    def test_issue_is_served_with_nested_records(self, client, repos, sample_issue):
        repos["issues"].get_by_id.return_value = sample_issue

        body = client.get("/gitminer/issues/i1").json()

        assert body["author"]["username"] == "octocat"
        assert body["assignee"] is None
        assert [comment["id"] for comment in body["comments"]] == ["k1", "k2", "k3", "k4", "k5", "k6"]


class TestProjectWrites:
    def test_create_returns_201(self, client, repos, sample_project):
        repos["projects"].save.return_value = sample_project

        response = client.post("/gitminer/projects", json=sample_project)

        assert response.status_code == 201
        assert response.json()["id"] == "p1"
        assert repos["projects"].save.await_args.kwargs["project_id"] == "p1"

    def test_create_accepts_camel_case_body(self, client, repos):
        saved = {"id": "p2", "name": "x", "web_url": "https://example.com/x", "commits": [], "issues": []}
        repos["projects"].save.return_value = saved

        response = client.post("/gitminer/projects", json={"id": "p2", "name": "x", "webUrl": "https://example.com/x"})

        assert response.status_code == 201
        assert response.json()["web_url"] == "https://example.com/x"
        assert repos["projects"].save.await_args.kwargs["web_url"] == "https://example.com/x"

    def test_create_without_name_is_400(self, client, repos):
        response = client.post("/gitminer/projects", json={"id": "p1"})

        assert response.status_code == 400
        repos["projects"].save.assert_not_awaited()

    def test_create_without_id_is_400(self, client, repos):
        response = client.post("/gitminer/projects", json={"name": "gitminer"})

        assert response.status_code == 400

    def test_create_with_blank_id_is_400(self, client, repos):
        response = client.post("/gitminer/projects", json={"id": "   ", "name": "x"})

        assert response.status_code == 400
        repos["projects"].save.assert_not_awaited()

    def test_create_passes_id_through_unstripped(self, client, repos):
        saved = {"id": " p1", "name": "x", "web_url": None, "commits": [], "issues": []}
        repos["projects"].save.return_value = saved

        response = client.post("/gitminer/projects", json={"id": " p1", "name": "x"})

        assert response.status_code == 201
        assert repos["projects"].save.await_args.kwargs["project_id"] == " p1"
        assert response.json()["id"] == " p1"

    def test_update_returns_204(self, client, repos, sample_project):
        repos["projects"].exists.return_value = True
        repos["projects"].update.return_value = True

        response = client.put("/gitminer/projects/p1", json=sample_project)

        assert response.status_code == 204
        assert response.content == b""
        assert repos["projects"].update.await_args.args == ("p1",)

    def test_update_missing_is_404(self, client, repos):
        repos["projects"].exists.return_value = False

        response = client.put("/gitminer/projects/missing", json={"name": "x"})

        assert response.status_code == 404
        repos["projects"].update.assert_not_awaited()

    def test_update_invalid_body_is_400(self, client, repos):
        response = client.put("/gitminer/projects/p1", json={"name": ""})

        assert response.status_code == 400

    def test_delete_returns_204(self, client, repos):
        repos["projects"].exists.return_value = True
        repos["projects"].delete_by_id.return_value = True

        response = client.delete("/gitminer/projects/p1")

        assert response.status_code == 204
        repos["projects"].delete_by_id.assert_awaited_once_with("p1")

    def test_delete_missing_is_404(self, client, repos):
        repos["projects"].exists.return_value = False

        assert client.delete("/gitminer/projects/missing").status_code == 404


class TestCommitAndUserCreate:
    def test_commit_create(self, client, repos, sample_commit):
        repos["commits"].create.return_value = {**sample_commit, "id": "generated"}

        response = client.post("/gitminer/commits", json=sample_commit)

        assert response.status_code == 201
        assert response.json()["id"] == "generated"
        assert "id" not in repos["commits"].create.await_args.kwargs

    def test_commit_create_accepts_camel_case(self, client, repos):
        repos["commits"].create.return_value = {"id": "g", "title": "Fix", "author_name": "Ada"}

        client.post("/gitminer/commits", json={"title": "Fix", "authorName": "Ada"})

        assert repos["commits"].create.await_args.kwargs["author_name"] == "Ada"

    def test_commit_without_title_is_400(self, client, repos):
        assert client.post("/gitminer/commits", json={"message": "x"}).status_code == 400

    def test_user_create(self, client, repos, sample_user):
        repos["users"].create.return_value = {**sample_user, "id": "generated"}

        response = client.post("/gitminer/users", json=sample_user)

        assert response.status_code == 201
        assert response.json()["id"] == "generated"

    def test_user_without_username_is_400(self, client, repos):
        assert client.post("/gitminer/users", json={"name": "Ada"}).status_code == 400


class TestIssueComments:
    def test_default_window(self, client, repos, sample_issue, monkeypatch):
        monkeypatch.delenv("COMMENT_PAGING_MODE", raising=False)
        repos["issues"].get_by_id.return_value = sample_issue

        response = client.get("/gitminer/issues/i1/comments")

        # page=5, size=5 on 6 comments: start = 6 // 5 = 1
        assert response.status_code == 200
        assert [comment["id"] for comment in response.json()] == ["k2", "k3", "k4", "k5", "k6"]

    def test_documented_example(self, client, repos, sample_issue, monkeypatch):
        monkeypatch.delenv("COMMENT_PAGING_MODE", raising=False)
        repos["issues"].get_by_id.return_value = sample_issue

        response = client.get("/gitminer/issues/i1/comments", params={"page": 2, "size": 2})

        assert [comment["id"] for comment in response.json()] == ["k4", "k5"]

    def test_page_zero_is_400(self, client, repos, sample_issue, monkeypatch):
        monkeypatch.delenv("COMMENT_PAGING_MODE", raising=False)
        repos["issues"].get_by_id.return_value = sample_issue

        response = client.get("/gitminer/issues/i1/comments", params={"page": 0})

        assert response.status_code == 400

    def test_missing_issue_is_404(self, client, repos):
        repos["issues"].get_by_id.return_value = None

        assert client.get("/gitminer/issues/missing/comments").status_code == 404
