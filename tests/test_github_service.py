"""Tests for GitHubService and pull request pagination"""
from unittest.mock import Mock, patch

import pytest
import requests
from github import GithubException

from git_branch_sweeper.exceptions import PullRequestFetchError
from git_branch_sweeper.models.pull_request import PullRequestSet
from git_branch_sweeper.services.git import GitHubService, PullRequestPages


def node(number, merged=False, state="OPEN"):
    return {"number": number, "merged": merged, "state": state}


def connection(nodes, has_next_page=False, end_cursor=None):
    return {
        "nodes": nodes,
        "pageInfo": {"endCursor": end_cursor, "hasNextPage": has_next_page},
    }


def graphql_response(conn):
    """Shape returned by PyGithub's Requester.graphql_query."""
    return {}, {"data": {"repository": {"pullRequests": conn}}}


class TestPullRequestPages:
    """Test the lazy page sequence."""

    def test_accumulates_all_pages_in_order(self):
        """Test pages are followed until hasNextPage is false."""
        query_page = Mock(side_effect=[
            connection([node(1), node(2)], has_next_page=True, end_cursor="c1"),
            connection([node(3)], has_next_page=True, end_cursor="c2"),
            connection([node(4)], has_next_page=False, end_cursor="c3"),
        ])

        pages = list(PullRequestPages(query_page, "acme", "widgets", "feature/a"))

        assert [[pr.number for pr in page] for page in pages] == [[1, 2], [3], [4]]
        assert query_page.call_count == 3
        cursors = [call.args[0]["cursor"] for call in query_page.call_args_list]
        assert cursors == [None, "c1", "c2"]

    def test_query_variables(self):
        """Test the variables sent for the first page."""
        query_page = Mock(return_value=connection([node(1)]))

        list(PullRequestPages(query_page, "acme", "widgets", "feature/a", page_size=50))

        query_page.assert_called_once_with({
            "repositoryOwner": "acme",
            "repositoryName": "widgets",
            "branchName": "feature/a",
            "pageSize": 50,
            "cursor": None,
        })

    def test_empty_first_page_stops_immediately(self):
        """Test an empty first page yields nothing and is not an error."""
        query_page = Mock(return_value=connection([], has_next_page=True, end_cursor="c1"))

        pages = list(PullRequestPages(query_page, "acme", "widgets", "feature/a"))

        assert pages == []
        query_page.assert_called_once()

    def test_partial_then_empty_page_stops(self):
        """Test an empty page after a full one ends the sequence."""
        query_page = Mock(side_effect=[
            connection([node(1)], has_next_page=True, end_cursor="c1"),
            connection([], has_next_page=True, end_cursor="c2"),
        ])

        pages = list(PullRequestPages(query_page, "acme", "widgets", "feature/a"))

        assert [[pr.number for pr in page] for page in pages] == [[1]]
        assert query_page.call_count == 2

    def test_null_nodes_treated_as_empty(self):
        """Test `nodes: null` ends the sequence."""
        query_page = Mock(return_value={"nodes": None, "pageInfo": None})

        assert list(PullRequestPages(query_page, "acme", "widgets", "feature/a")) == []

    def test_is_restartable(self):
        """Test iterating twice starts over from the first page."""
        query_page = Mock(side_effect=[
            connection([node(1)], has_next_page=True, end_cursor="c1"),
            connection([node(2)]),
            connection([node(1)], has_next_page=True, end_cursor="c1"),
            connection([node(2)]),
        ])
        pages = PullRequestPages(query_page, "acme", "widgets", "feature/a")

        first = list(pages)
        second = list(pages)

        assert first == second
        cursors = [call.args[0]["cursor"] for call in query_page.call_args_list]
        assert cursors == [None, "c1", None, "c1"]

    def test_is_lazy(self):
        """Test no query runs until iteration starts."""
        query_page = Mock(return_value=connection([node(1)]))

        pages = PullRequestPages(query_page, "acme", "widgets", "feature/a")

        query_page.assert_not_called()
        next(iter(pages))
        query_page.assert_called_once()


class TestGitHubServiceSetup:
    """Test GitHub API client lifecycle."""

    def test_setup_github_api(self, mock_config):
        """Test the client is created with token auth."""
        service = GitHubService(mock_config)

        with patch('git_branch_sweeper.services.git.github.Github') as mock_github_class:
            service.setup_github_api("test_token")

            mock_github_class.assert_called_once()
            auth = mock_github_class.call_args.kwargs["auth"]
            assert auth.token == "test_token"
            assert service.github is mock_github_class.return_value

    def test_close(self, mock_config):
        """Test closing releases the client."""
        service = GitHubService(mock_config)
        client = Mock()
        service.github = client

        service.close()

        client.close.assert_called_once()
        assert service.github is None

    def test_close_without_setup(self, mock_config):
        """Test closing before setup is a no-op."""
        service = GitHubService(mock_config)

        service.close()

        assert service.github is None

    def test_page_size_from_config(self, mock_config):
        """Test the configured page size is used."""
        mock_config['page_size'] = 25
        service = GitHubService(mock_config)

        pages = service.iter_pull_request_pages("acme", "widgets", "feature/a")

        assert pages.page_size == 25


class TestFetchPullRequests:
    """Test fetching a branch's pull requests through GraphQL."""

    @pytest.fixture
    def service(self, mock_config):
        service = GitHubService(mock_config)
        service.github = Mock()
        return service

    def test_fetch_accumulates_pages(self, service):
        """Test pull requests from every page end up in one set."""
        service.github.requester.graphql_query.side_effect = [
            graphql_response(connection([node(1, True, "MERGED")], True, "c1")),
            graphql_response(connection([node(2, False, "CLOSED")])),
        ]

        prs = service.fetch_pull_requests("acme", "widgets", "feature/a")

        assert isinstance(prs, PullRequestSet)
        assert [pr.number for pr in prs] == [1, 2]
        assert service.github.requester.graphql_query.call_count == 2
        _, variables = service.github.requester.graphql_query.call_args_list[1].args
        assert variables["cursor"] == "c1"
        assert variables["branchName"] == "feature/a"

    def test_fetch_no_pull_requests(self, service):
        """Test a branch without pull requests yields an empty set."""
        service.github.requester.graphql_query.return_value = graphql_response(connection([]))

        prs = service.fetch_pull_requests("acme", "widgets", "feature/a")

        assert prs == PullRequestSet()

    def test_fetch_repository_not_found(self, service):
        """Test a null repository is a fetch failure."""
        service.github.requester.graphql_query.return_value = ({}, {"data": {"repository": None}})

        with pytest.raises(PullRequestFetchError, match="acme/widgets not found"):
            service.fetch_pull_requests("acme", "widgets", "feature/a")

    def test_fetch_api_error(self, service):
        """Test GitHub API errors become fetch failures."""
        service.github.requester.graphql_query.side_effect = GithubException(
            status=502, data={'message': 'Bad gateway'}
        )

        with pytest.raises(PullRequestFetchError) as exc_info:
            service.fetch_pull_requests("acme", "widgets", "feature/a")

        assert exc_info.value.branch == "feature/a"
        assert "502" in str(exc_info.value)

    def test_fetch_network_error(self, service):
        """Test transport errors become fetch failures."""
        service.github.requester.graphql_query.side_effect = requests.exceptions.ConnectionError(
            "connection reset"
        )

        with pytest.raises(PullRequestFetchError, match="network error"):
            service.fetch_pull_requests("acme", "widgets", "feature/a")

    def test_fetch_malformed_node(self, service):
        """Test payload errors become fetch failures."""
        service.github.requester.graphql_query.return_value = graphql_response(
            connection([{"number": 1, "merged": False, "state": "SOMETHING"}])
        )

        with pytest.raises(PullRequestFetchError, match="unexpected response payload"):
            service.fetch_pull_requests("acme", "widgets", "feature/a")

    def test_fetch_error_on_later_page(self, service):
        """Test a failure after the first page discards partial results."""
        service.github.requester.graphql_query.side_effect = [
            graphql_response(connection([node(1)], True, "c1")),
            GithubException(status=500, data={'message': 'Server error'}),
        ]

        with pytest.raises(PullRequestFetchError):
            service.fetch_pull_requests("acme", "widgets", "feature/a")
