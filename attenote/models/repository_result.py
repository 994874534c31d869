# /attenote/models/repository_result.py

"""
A two-variant result type returned at the repository boundary.

Callers branch on the variant with `isinstance` instead of catching
exceptions; raised errors are reserved for conditions the repository itself
cannot translate (the boundary converts everything else into
`RepositoryError`).
"""

from typing import Generic, Optional, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


class RepositorySuccess(BaseModel, Generic[T]):
    data: T


class RepositoryError(BaseModel):
    message: str


def get_or_none(result: Union[RepositorySuccess[T], RepositoryError]) -> Optional[T]:
    if isinstance(result, RepositorySuccess):
        return result.data
    return None


def get_or_raise(result: Union[RepositorySuccess[T], RepositoryError]) -> T:
    if isinstance(result, RepositorySuccess):
        return result.data
    raise RuntimeError(result.message)
