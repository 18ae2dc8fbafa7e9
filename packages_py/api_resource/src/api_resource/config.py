"""
Configuration for api_resource.
"""
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

logger = logging.getLogger("api_resource.config")


@dataclass
class TimeoutConfig:
    """Timeout configuration in seconds."""

    connect: float = 5.0
    read: float = 30.0
    write: float = 10.0


@dataclass
class ClientConfig:
    """Requester configuration."""

    timeout: Union[TimeoutConfig, float, None] = None
    headers: Dict[str, str] = field(default_factory=dict)
    content_type: str = "application/json"
    join_endpoint: bool = False
    """Append ``resource.endpoint`` to the base path when building URLs."""
    strict_decoding: bool = True
    """Reject lax coercions (e.g. "1" for an int) when decoding responses."""
    verify_ssl: Optional[bool] = None
    """None defers to SSL_CERT_VERIFY / NODE_TLS_REJECT_UNAUTHORIZED."""


# Default values
DEFAULT_TIMEOUT = TimeoutConfig()
DEFAULT_CONTENT_TYPE = "application/json"


@dataclass
class ResolvedConfig:
    """Resolved requester configuration with defaults applied."""

    timeout: TimeoutConfig
    headers: Dict[str, str]
    content_type: str
    join_endpoint: bool
    strict_decoding: bool
    verify_ssl: bool


def is_ssl_verify_disabled_by_env() -> bool:
    """
    Check if SSL verification is disabled via environment variables.

    Returns True if any of these are set:
    - NODE_TLS_REJECT_UNAUTHORIZED=0
    - SSL_CERT_VERIFY=0
    """
    node_tls = os.environ.get("NODE_TLS_REJECT_UNAUTHORIZED", "")
    ssl_cert_verify = os.environ.get("SSL_CERT_VERIFY", "")
    return node_tls == "0" or ssl_cert_verify == "0"


def normalize_timeout(timeout: Union[TimeoutConfig, float, None]) -> TimeoutConfig:
    """Normalize timeout config."""
    if timeout is None:
        return DEFAULT_TIMEOUT
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=timeout, read=timeout, write=timeout)
    return timeout


def validate_config(config: ClientConfig) -> None:
    """Validate requester configuration."""
    timeout = normalize_timeout(config.timeout)
    for name in ("connect", "read", "write"):
        value = getattr(timeout, name)
        if value <= 0:
            raise ValueError(f"timeout.{name} must be positive, got {value}")

    if not config.content_type:
        raise ValueError("content_type must not be empty")

    for key, value in config.headers.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValueError(f"Header names and values must be strings: {key!r}")


def resolve_config(config: Optional[ClientConfig] = None) -> ResolvedConfig:
    """Resolve requester configuration with defaults."""
    if config is None:
        config = ClientConfig()
    validate_config(config)

    verify_ssl = config.verify_ssl
    if verify_ssl is None:
        verify_ssl = not is_ssl_verify_disabled_by_env()
    if not verify_ssl:
        logger.debug("resolve_config: SSL verification disabled")

    return ResolvedConfig(
        timeout=normalize_timeout(config.timeout),
        headers=dict(config.headers),
        content_type=config.content_type or DEFAULT_CONTENT_TYPE,
        join_endpoint=config.join_endpoint,
        strict_decoding=config.strict_decoding,
        verify_ssl=verify_ssl,
    )
