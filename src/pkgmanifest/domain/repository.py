"""Source repository metadata.

``Repository`` is a closed union discriminated by the ``type`` key of the
``[repository]`` table. Exactly one variant is active; the default is
:class:`NoRepository`.
"""

from __future__ import annotations

from typing import Annotated, Literal, assert_never

from pydantic import BaseModel, Field


class GitHub(BaseModel):
    model_config = {"frozen": True}

    type: Literal["github"] = "github"
    user: str
    repo: str


class GitLab(BaseModel):
    model_config = {"frozen": True}

    type: Literal["gitlab"] = "gitlab"
    user: str
    repo: str


class BitBucket(BaseModel):
    model_config = {"frozen": True}

    type: Literal["bitbucket"] = "bitbucket"
    user: str
    repo: str


class Custom(BaseModel):
    model_config = {"frozen": True}

    type: Literal["custom"] = "custom"
    url: str


class NoRepository(BaseModel):
    """No repository declared."""

    model_config = {"frozen": True}

    type: Literal["none"] = "none"


AnyRepository = GitHub | GitLab | BitBucket | Custom | NoRepository

Repository = Annotated[AnyRepository, Field(discriminator="type")]


def repository_url(repository: AnyRepository) -> str | None:
    """Return the browsable URL for *repository*, or None when there is none.

    BitBucket URLs use the ``bitbucket.com`` host; existing consumers
    depend on that value.
    """
    match repository:
        case GitHub(user=user, repo=repo):
            return f"https://github.com/{user}/{repo}"
        case GitLab(user=user, repo=repo):
            return f"https://gitlab.com/{user}/{repo}"
        case BitBucket(user=user, repo=repo):
            return f"https://bitbucket.com/{user}/{repo}"
        case Custom(url=url):
            return url
        case NoRepository():
            return None
        case _:
            assert_never(repository)
