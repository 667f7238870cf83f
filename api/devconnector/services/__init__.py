"""Services for the DevConnector API."""

from devconnector.services.github import GitHubClient, get_github_client

__all__ = ["GitHubClient", "get_github_client"]
