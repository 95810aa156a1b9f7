"""Pytest fixtures for git-branch-sweeper tests"""
import io
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest
from rich.console import Console

from git_branch_sweeper.core import BranchSweeper
from git_branch_sweeper.models.pull_request import PullRequest, PullRequestSet, PullRequestState
from git_branch_sweeper.models.repository import RepositoryIdentity
from git_branch_sweeper.services.display_service import DisplayService
from git_branch_sweeper.services.gh_cli import GhCliService
from git_branch_sweeper.services.git import GitHubService, GitOperations


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'safe': False,
        'force': False,
        'verbose': False,
        'debug': False,
        'page_size': 100,
    }


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository on `main` with two feature branches."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")
    repo.git.branch('-M', 'main')

    # A branch with nothing new and one with an unmerged commit
    repo.create_head('feature/done')
    repo.git.checkout('-b', 'feature/wip')
    wip_file = repo_path / "wip.txt"
    wip_file.write_text("Work in progress\n")
    repo.index.add(["wip.txt"])
    repo.index.commit("Work in progress")
    repo.git.checkout('main')

    yield repo

    repo.close()


@pytest.fixture
def repository():
    """Identity of the repository used across sweeper tests."""
    return RepositoryIdentity(owner="acme", name="widgets", default_branch="main")


@pytest.fixture
def make_pr():
    """Factory for PullRequest objects."""
    def _make_pr(number, merged=False, state="OPEN"):
        return PullRequest(number=number, merged=merged, state=PullRequestState(state))
    return _make_pr


@pytest.fixture
def make_pr_set(make_pr):
    """Factory for PullRequestSet objects from (number, merged, state) tuples."""
    def _make_pr_set(*specs):
        return PullRequestSet(make_pr(*spec) for spec in specs)
    return _make_pr_set


@pytest.fixture
def output():
    """Buffer receiving everything the display service prints."""
    return io.StringIO()


@pytest.fixture
def display_service(output):
    """DisplayService writing plain text into the output buffer."""
    console = Console(file=output, width=200, soft_wrap=True, color_system=None)
    return DisplayService(output=console)


@pytest.fixture
def mock_git_service():
    """Create a mock GitOperations."""
    service = Mock(spec=GitOperations)
    service.list_local_branches = Mock(return_value=["* main", "  feature/done"])
    service.delete_local_branch = Mock(return_value=None)
    return service


@pytest.fixture
def mock_gh_cli(repository):
    """Create a mock GhCliService."""
    service = Mock(spec=GhCliService)
    service.get_auth_token = Mock(return_value="test_token_for_testing")
    service.get_repository = Mock(return_value=repository)
    return service


@pytest.fixture
def mock_github_service():
    """Create a mock GitHubService returning no pull requests."""
    service = Mock(spec=GitHubService)
    service.fetch_pull_requests = Mock(return_value=PullRequestSet())
    return service


@pytest.fixture
def sweeper(mock_config, mock_git_service, mock_gh_cli, mock_github_service, display_service):
    """BranchSweeper wired to in-memory fakes."""
    return BranchSweeper(
        "/fake/repo/path",
        mock_config,
        git_service=mock_git_service,
        gh_cli=mock_gh_cli,
        github_service=mock_github_service,
        display_service=display_service,
    )
