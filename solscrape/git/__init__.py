"""Git helpers for acquiring remote source trees."""

from .clone import RepoCloner, cloned_repository, extract_repo_name

__all__ = ["RepoCloner", "cloned_repository", "extract_repo_name"]
