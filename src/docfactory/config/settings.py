"""Environment-driven settings for docfactory's ambient behavior.

Priority chain (highest to lowest):
  1. Init kwargs
  2. Env vars — ``DOCFACTORY_*`` prefix
  3. Code defaults

Settings only influence logging. Conversion results never depend on them.
"""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

from docfactory.config.logging import configure_logging


class DocFactorySettings(BaseSettings):
    """Frozen settings object.

    Attributes:
        verbose: DEBUG logging for the ``docfactory`` logger.
        log_json: Emit JSON log lines instead of console output.
        propagate: Forward docfactory records to the host's root handlers too.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DOCFACTORY_",
    }

    verbose: bool = False
    log_json: bool = False
    propagate: bool = False

    def configure(self) -> logging.Logger:
        """Apply these settings to the ``docfactory`` logger."""
        return configure_logging(
            verbose=self.verbose,
            log_json=self.log_json,
            propagate=self.propagate,
        )
