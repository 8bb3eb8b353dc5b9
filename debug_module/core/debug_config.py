"""
Debug logger configuration

The specification string is usually taken from the DEBUG environment
variable, but any source can supply it through ``spec``.
"""

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

DEFAULT_ENV_VAR = "DEBUG"


@dataclass
class DebugConfig:
    """
    Debug logger configuration.

    Attributes:
        env_var: Environment variable read when ``spec`` is not set
        spec: Specification string, e.g. ``"app:*,-app:noisy"``
        stream: Output stream (default: sys.stderr)
    """

    env_var: str = DEFAULT_ENV_VAR
    spec: Optional[str] = None
    stream: Any = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.env_var:
            raise ValueError("env_var must not be empty")
        if self.spec is not None and not isinstance(self.spec, str):
            raise ValueError("spec must be a string")

    def resolve_spec(self, environ: Optional[Mapping[str, str]] = None) -> str:
        """
        Get the specification text to compile.

        Args:
            environ: Environment mapping (default: os.environ)

        Returns:
            ``spec`` if set, else the environment variable, else ``""``
        """
        if self.spec is not None:
            return self.spec
        environ = os.environ if environ is None else environ
        return environ.get(self.env_var, "")

    @classmethod
    def default(cls) -> "DebugConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        env_var: str = DEFAULT_ENV_VAR,
    ) -> "DebugConfig":
        """Create configuration with the spec read from the environment now."""
        config = cls(env_var=env_var)
        config.spec = config.resolve_spec(environ)
        return config

    @classmethod
    def enable_all(cls) -> "DebugConfig":
        """Create configuration that enables every logger."""
        return cls(spec="*")
