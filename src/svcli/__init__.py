# svcli/__init__.py
"""
SVCLI package root.

Loads environment variables from a ``.env`` file so settings such as
``SVCLI_LOG_LEVEL`` can be kept next to a project instead of exported in the
shell.

Nothing else should be imported from here to keep side-effects minimal.
"""
from __future__ import annotations

import logging

from dotenv import load_dotenv

if load_dotenv():  # True if a .env file was found
    logging.getLogger(__name__).debug(".env loaded successfully")
