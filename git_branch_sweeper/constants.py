"""Shared constants for git-branch-sweeper."""

# Web root used to build pull request links
GITHUB_WEB_URL = "https://github.com"

# GitHub caps GraphQL connections at 100 nodes per page
DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 100

# Prefixes `git branch --list` puts in front of branch names
CURRENT_BRANCH_MARKER = "* "
WORKTREE_BRANCH_MARKER = "+ "

PULL_REQUESTS_QUERY = """
query($repositoryOwner: String!, $repositoryName: String!, $branchName: String!,
      $pageSize: Int!, $cursor: String) {
  repository(owner: $repositoryOwner, name: $repositoryName) {
    pullRequests(headRefName: $branchName, first: $pageSize, after: $cursor) {
      nodes {
        number
        merged
        state
      }
      pageInfo {
        endCursor
        hasNextPage
      }
    }
  }
}
"""

FORCE_HINT = "Use -force flag to delete branches with closed pull requests"
