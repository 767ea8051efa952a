"""
Request authentication for the KGB protocol.
"""

from kgb_client.crypto.digest import compute_auth_digest

__all__ = ["compute_auth_digest"]
