"""Resolution of route tokens into navigation targets."""

from __future__ import annotations

import logging
from typing import Mapping, Protocol, Sequence, TypeVar

from .errors import NoResolvableTargets
from .url import decompose_url

logger = logging.getLogger(__name__)

T_co = TypeVar("T_co", covariant=True)


class TargetFactory(Protocol[T_co]):
    """Application hook that maps one token, in context, to a target.

    Called once per token with the complete token sequence so the factory
    can inspect neighbouring tokens. Returning None marks the token as a
    structural segment with no screen of its own.
    """

    def __call__(
        self,
        token: str,
        tokens: Sequence[str],
        params: Mapping[str, str],
    ) -> T_co | None: ...


def previous_token(token: str, tokens: Sequence[str]) -> str | None:
    """Return the token preceding the first occurrence of ``token``.

    Returns None when ``token`` is first in the sequence or absent.
    """
    try:
        index = tokens.index(token)
    except ValueError:
        return None
    return tokens[index - 1] if index > 0 else None


def resolve_targets(
    tokens: Sequence[str],
    params: Mapping[str, str],
    factory: TargetFactory[T_co],
) -> list[T_co]:
    """Run the factory over every token and collect the resolved targets.

    Tokens the factory declines contribute nothing; relative order of the
    rest is preserved.

    Raises:
        NoResolvableTargets: If no token produced a target.
    """
    targets = []
    for token in tokens:
        target = factory(token, tokens, params)
        if target is not None:
            targets.append(target)

    if not targets:
        raise NoResolvableTargets(f"No targets for tokens {list(tokens)!r}")

    logger.debug("Resolved %s to %d target(s)", list(tokens), len(targets))
    return targets


def resolve_url(url: str, factory: TargetFactory[T_co]) -> list[T_co]:
    """Decompose a deep link and resolve it in one step."""
    tokens, params = decompose_url(url)
    try:
        return resolve_targets(tokens, params, factory)
    except NoResolvableTargets as e:
        e.url = url
        raise
