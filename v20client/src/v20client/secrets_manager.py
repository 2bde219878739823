"""
secrets_manager
================

Loading of the API access token.  Secrets are read from the environment,
or from a file when the corresponding ``*_FILE`` environment variable is
set.  This lets operators mount the token as a file (Docker or Kubernetes
secrets) without leaking it into the environment.  Subclass
``BaseSecretsManager`` and override ``get_secret`` to plug in another
backend.

Example usage::

    from v20client.secrets_manager import EnvFileSecretsManager

    secrets = EnvFileSecretsManager()
    token = secrets.get_secret("V20_ACCESS_TOKEN")
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)


class BaseSecretsManager:
    """Abstract base class for secrets managers."""

    def get_secret(self, name: str) -> Optional[str]:  # pragma: no cover - override
        """Return the secret value for ``name`` or ``None`` if unavailable."""
        raise NotImplementedError


class EnvFileSecretsManager(BaseSecretsManager):
    """
    Loads secrets from environment variables and optional ``*_FILE`` paths.

    If an environment variable ``{name}_FILE`` is set, the secret is read
    from that file.  If both ``{name}`` and ``{name}_FILE`` are set, the
    file takes precedence.  An unreadable file yields ``None`` rather than
    falling back to the plain variable.
    """

    def __init__(
        self,
        base_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        #: Optional base directory to resolve relative file paths.
        self.base_path = base_path
        self._environ = environ if environ is not None else os.environ
        self._cache: Dict[str, Optional[str]] = {}

    def get_secret(self, name: str) -> Optional[str]:
        if name in self._cache:
            return self._cache[name]

        value: Optional[str]
        file_path = self._environ.get(f"{name}_FILE")
        if file_path:
            path = Path(file_path)
            if not path.is_absolute() and self.base_path is not None:
                path = self.base_path / path
            try:
                value = path.read_text(encoding="utf-8").strip()
                logger.debug("Loaded %s from %s", name, path)
            except OSError as exc:
                logger.warning("Failed to read secret file %s: %s", path, exc)
                value = None
        else:
            value = self._environ.get(name)

        self._cache[name] = value
        return value


__all__ = ["BaseSecretsManager", "EnvFileSecretsManager"]
