"""
KGB request digest.

The relay authenticates a call by recomputing
``sha1_hex(password + project_id + body)`` over the raw request body and
comparing it with the ``X-KGB-Auth`` header. It is a keyed prefix hash, not
an HMAC: the relay only knows this construction.
"""

import hashlib


def compute_auth_digest(password: str, project_id: str, body: bytes) -> str:
    """
    Compute the ``X-KGB-Auth`` value for a request body.

    Args:
        password: Shared project password.
        project_id: Project identifier, sent in clear as ``X-KGB-Project``.
        body: Exact bytes that will be transmitted.

    Returns:
        Lowercase hex SHA-1 digest.
    """
    h = hashlib.sha1()  # noqa: S324
    h.update(password.encode())
    h.update(project_id.encode())
    h.update(body)
    return h.hexdigest()
