"""Where installed sheets live.

Every sheet is a directory directly under the resolver home, holding one TOML
bucket file per leading character::

    ~/.cryptic-resolver/
        cryptic_computer/
            a.toml
            x.toml
            0123456789.toml
        cryptic_medicine/
            a.toml
"""

from __future__ import annotations

import os
from pathlib import Path

from cryptic_resolver.core.constants import RESOLVER_HOME_DIR

HOME_ENV_VAR = "CRYPTIC_RESOLVER_HOME"
APP_DIR_NAME = "cryptic-resolver"


def _is_windows() -> bool:
    return os.name == "nt"


def get_resolver_home() -> Path:
    """Return the directory scanned for sheets.

    ``$CRYPTIC_RESOLVER_HOME`` wins when set (``~`` is expanded). Otherwise
    sheets are kept in ``~/.cryptic-resolver``, except on Windows where the
    per-user data directory from platformdirs is used. The directory is not
    created here; a missing home simply has no sheets.
    """
    override = os.environ.get(HOME_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()

    if not _is_windows():
        return Path.home() / RESOLVER_HOME_DIR

    from platformdirs import user_data_dir

    return Path(user_data_dir(APP_DIR_NAME))
