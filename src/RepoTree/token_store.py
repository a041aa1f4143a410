"""Personal access token storage in the OS keychain."""

from __future__ import annotations

import logging

from RepoTree.models import ProviderType

logger = logging.getLogger(__name__)

_SERVICE_NAME = "RepoTree"
_AVAILABLE = False

TOKEN_KEYS: dict[ProviderType, str] = {
    ProviderType.GITHUB: "github_personal_token",
    ProviderType.GITLAB: "gitlab_personal_token",
}

try:
    import keyring

    _AVAILABLE = True
except Exception:
    logger.warning("keyring not available; token persistence disabled")


def is_available() -> bool:
    """Return True if the OS keychain is usable."""
    return _AVAILABLE


def load_token(provider: ProviderType) -> str | None:
    """Load the token saved for *provider*. Returns None when there is none."""
    if not _AVAILABLE:
        return None
    try:
        return keyring.get_password(_SERVICE_NAME, TOKEN_KEYS[provider])
    except Exception:
        logger.warning("Failed to read %s token from keyring", provider.value)
        return None


def save_token(provider: ProviderType, token: str) -> bool:
    """Save *token* for *provider*. Returns True on success."""
    token = token.strip()
    if not _AVAILABLE or not token:
        return False
    try:
        keyring.set_password(_SERVICE_NAME, TOKEN_KEYS[provider], token)
        return True
    except Exception:
        logger.warning("Failed to save %s token to keyring", provider.value)
        return False


def delete_token(provider: ProviderType) -> bool:
    """Remove the token saved for *provider*. Returns True on success."""
    if not _AVAILABLE:
        return False
    try:
        keyring.delete_password(_SERVICE_NAME, TOKEN_KEYS[provider])
        return True
    except Exception:
        logger.warning("Failed to delete %s token from keyring", provider.value)
        return False
