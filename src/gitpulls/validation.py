"""Syntactic checks for GitHub owner and repository names."""

import re

# GitHub usernames: alphanumerics and single inner hyphens, at most 39 chars.
OWNER_PATTERN = re.compile(
    r"[a-z0-9](?:[a-z0-9]|-(?=[a-z0-9])){0,38}", re.IGNORECASE | re.ASCII
)
REPO_PATTERN = re.compile(r"[A-Za-z0-9._-]+")


def is_valid_owner(value: str) -> bool:
    return OWNER_PATTERN.fullmatch(value) is not None


def is_valid_repo(value: str) -> bool:
    return REPO_PATTERN.fullmatch(value) is not None
