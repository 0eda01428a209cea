"""Interactive prompts for picking a repository."""

import logging
from typing import Callable

from rich.console import Console

from gitpulls.errors import InvalidInputError
from gitpulls.models.repo import SelectedRepository
from gitpulls.validation import is_valid_owner, is_valid_repo

logger = logging.getLogger(__name__)

OWNER_PROMPT = "Who is the repo owner? "
REPO_PROMPT = "What is the repo name? "
OWNER_ERROR = "Please enter a correct owner username."
REPO_ERROR = "Please enter a correct repo name."


def _ask_until_valid(
    console: Console,
    prompt: str,
    error: str,
    is_valid: Callable[[str], bool],
    max_attempts: int | None,
    blank_line: bool = False,
) -> str:
    """
    Ask ``prompt`` until the answer passes ``is_valid``.

    Args:
        console: Console to read from and print to
        prompt: Question shown to the user
        error: Message printed after an invalid answer
        is_valid: Validation predicate
        max_attempts: Give up after this many answers, None to ask forever
        blank_line: Print an empty line after the error message

    Returns:
        The first valid answer

    Raises:
        InvalidInputError: If max_attempts answers were all invalid
        EOFError: If input ends before a valid answer
    """
    attempts = 0
    while True:
        answer = console.input(prompt, markup=False)
        attempts += 1
        if is_valid(answer):
            return answer

        logger.debug("Rejected input %r (attempt %d)", answer, attempts)
        if max_attempts is not None and attempts >= max_attempts:
            raise InvalidInputError(f"No valid answer after {attempts} attempts")
        console.print(error, markup=False)
        if blank_line:
            console.print()


def ask_owner(console: Console, max_attempts: int | None = None) -> str:
    """Ask for the repository owner."""
    return _ask_until_valid(console, OWNER_PROMPT, OWNER_ERROR, is_valid_owner, max_attempts)


def ask_repo(console: Console, max_attempts: int | None = None) -> str:
    """Ask for the repository name."""
    return _ask_until_valid(
        console, REPO_PROMPT, REPO_ERROR, is_valid_repo, max_attempts, blank_line=True
    )


def select_repository(
    console: Console, per_page: int = 100, max_attempts: int | None = None
) -> SelectedRepository:
    """Fill a fresh SelectedRepository from the prompts."""
    selection = SelectedRepository(per_page=per_page)
    selection.owner = ask_owner(console, max_attempts)
    console.print()
    selection.repo = ask_repo(console, max_attempts)
    return selection
