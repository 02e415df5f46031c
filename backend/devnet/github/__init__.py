from .service import GithubReposService, GithubUserNotFound

__all__ = ["GithubReposService", "GithubUserNotFound"]
