"""Lazy Firebase Admin app used to verify identity tokens.

The service-account path comes from ``settings.FIREBASE_SERVICE_ACCOUNT_FILE``.
Under the test runner the app is only initialised when
``firebase_admin.initialize_app`` has been mocked, and setup problems are not
logged, so tests never reach the network.
"""

import logging
import os
import sys

import firebase_admin
from django.conf import settings
from firebase_admin import credentials

logger = logging.getLogger(__name__)

_app = None


def _under_test_runner() -> bool:
    if "pytest" in sys.modules:
        return True
    return len(sys.argv) > 1 and sys.argv[1] == "test"


def _init_is_mocked() -> bool:
    return "unittest.mock" in type(firebase_admin.initialize_app).__module__


def _service_account_path():
    path = getattr(settings, "FIREBASE_SERVICE_ACCOUNT_FILE", "")
    if path and os.path.exists(path):
        return path
    if not _under_test_runner():
        logger.warning("Firebase service account file %r not found; token verification disabled", path)
    return None


def get_app():
    """Return the Firebase app, initialising it on first use; None when unavailable."""
    global _app
    if _app is not None:
        return _app
    if firebase_admin._apps:
        _app = firebase_admin.get_app()
        return _app
    if _under_test_runner() and not _init_is_mocked():
        return None

    path = _service_account_path()
    if path is None:
        return None
    try:
        _app = firebase_admin.initialize_app(credentials.Certificate(path))
    except (ValueError, OSError) as exc:
        if not _under_test_runner():
            logger.error("Failed to initialise Firebase: %s", exc)
        return None
    return _app
