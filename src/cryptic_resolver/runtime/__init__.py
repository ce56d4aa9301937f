"""Runtime environment for cryptic-resolver.

This subpackage locates the user-global sheet directory and loads the
read-only configuration that sits next to it.
"""

from cryptic_resolver.runtime.config import ConfigError, ResolverConfig, load_config
from cryptic_resolver.runtime.home import HOME_ENV_VAR, get_resolver_home

__all__ = [
    "ConfigError",
    "HOME_ENV_VAR",
    "ResolverConfig",
    "get_resolver_home",
    "load_config",
]
