# tests/__init__.py
"""
Expose common test utilities so tests can import directly:
    from tests import make_payload, make_settings, make_request
"""

from .utils import make_payload, make_request, make_settings

__all__ = ["make_payload", "make_request", "make_settings"]
