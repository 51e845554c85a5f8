"""Data models for sitedocs."""

import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

from sitedocs.core.exceptions import FetchError, UnknownSiteError

T = TypeVar("T")


class SiteKey(str, Enum):
    """Documentation sites known to the gateway."""

    MODULE_FEDERATION = "module-federation"
    MODERNJS = "modernjs"
    FIREBASE = "firebase"


@dataclass(frozen=True)
class SiteDescriptor:
    """Where a documentation site lives and where its index is."""

    key: SiteKey
    name: str
    base_url: str
    index_path: str = "/llms.txt"

    def __post_init__(self) -> None:
        if self.base_url.endswith("/"):
            raise ValueError(
                f"base_url for {self.key.value} must not end with '/': {self.base_url}"
            )
        if not self.index_path.startswith("/"):
            raise ValueError(
                f"index_path for {self.key.value} must start with '/': {self.index_path}"
            )


@dataclass(frozen=True)
class MatchContext:
    """A matching line and its immediate neighbours."""

    line_number: int  # 0-based
    line: str
    before: Optional[str] = None
    after: Optional[str] = None

    @property
    def lines(self) -> tuple[str, ...]:
        """Present lines in source order."""
        context = []
        if self.before is not None:
            context.append(self.before)
        context.append(self.line)
        if self.after is not None:
            context.append(self.after)
        return tuple(context)


@dataclass
class SearchResult:
    """Matches for a query, top to bottom."""

    query: str
    case_insensitive: bool = True
    matches: list[MatchContext] = field(default_factory=list)

    def __iter__(self) -> Iterator[MatchContext]:
        return iter(self.matches)

    def __len__(self) -> int:
        return len(self.matches)


@dataclass(frozen=True)
class FetchedDocument:
    """Raw text retrieved from a site."""

    url: str
    site: SiteDescriptor
    content: str


OperationError = Union[UnknownSiteError, FetchError]


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Outcome of a gateway operation: either a value or an error."""

    value: Optional[T] = None
    error: Optional[OperationError] = None
    site: Optional[SiteDescriptor] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T, site: SiteDescriptor) -> "OperationResult[T]":
        return cls(value=value, site=site)

    @classmethod
    def failure(
        cls, error: OperationError, site: Optional[SiteDescriptor] = None
    ) -> "OperationResult[T]":
        return cls(error=error, site=site)


@dataclass
class GatewayConfig:
    """Configuration for fetching documentation."""

    timeout: float = 30.0
    max_retries: int = 1  # total attempts
    retry_delay: float = 0.5
    user_agent: str = "sitedocs"

    ENV_PREFIX = "SITEDOCS_"

    def __post_init__(self) -> None:
        if self.max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {self.max_retries}")

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "GatewayConfig":
        """Build a config from ``SITEDOCS_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            Config with any set variables applied over the defaults.

        Raises:
            ValueError: If a numeric variable cannot be parsed.
        """
        env = os.environ if environ is None else environ
        config = cls()

        def _number(name: str, kind: type) -> None:
            var = cls.ENV_PREFIX + name.upper()
            raw = env.get(var)
            if raw is None or raw == "":
                return
            try:
                setattr(config, name, kind(raw))
            except ValueError:
                raise ValueError(f"{var} must be a {kind.__name__}, got {raw!r}") from None

        _number("timeout", float)
        _number("max_retries", int)
        _number("retry_delay", float)

        user_agent = env.get(cls.ENV_PREFIX + "USER_AGENT")
        if user_agent:
            config.user_agent = user_agent

        if config.max_retries < 1:
            raise ValueError(f"{cls.ENV_PREFIX}MAX_RETRIES must be at least 1")

        return config
