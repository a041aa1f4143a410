"""Tests for token_store module."""

from unittest import mock

from RepoTree.models import ProviderType


class TestIsAvailable:
    def test_returns_bool(self):
        from RepoTree import token_store

        assert isinstance(token_store.is_available(), bool)


class TestWhenUnavailable:
    def test_load_returns_none(self):
        from RepoTree import token_store

        with mock.patch.object(token_store, "_AVAILABLE", False):
            assert token_store.load_token(ProviderType.GITHUB) is None

    def test_save_returns_false(self):
        from RepoTree import token_store

        with mock.patch.object(token_store, "_AVAILABLE", False):
            assert token_store.save_token(ProviderType.GITHUB, "value") is False

    def test_delete_returns_false(self):
        from RepoTree import token_store

        with mock.patch.object(token_store, "_AVAILABLE", False):
            assert token_store.delete_token(ProviderType.GITLAB) is False


class TestWithKeyring:
    def _patch(self, token_store, mock_keyring):
        return mock.patch.multiple(
            token_store, _AVAILABLE=True, keyring=mock_keyring, create=True
        )

    def test_load_uses_provider_key(self):
        from RepoTree import token_store

        mock_keyring = mock.MagicMock()
        mock_keyring.get_password.return_value = "glpat-123"
        with self._patch(token_store, mock_keyring):
            assert token_store.load_token(ProviderType.GITLAB) == "glpat-123"
        mock_keyring.get_password.assert_called_once_with(
            "RepoTree", "gitlab_personal_token"
        )

    def test_load_returns_none_on_exception(self):
        from RepoTree import token_store

        mock_keyring = mock.MagicMock()
        mock_keyring.get_password.side_effect = Exception("keyring error")
        with self._patch(token_store, mock_keyring):
            assert token_store.load_token(ProviderType.GITHUB) is None

    def test_save_strips_and_returns_true(self):
        from RepoTree import token_store

        mock_keyring = mock.MagicMock()
        with self._patch(token_store, mock_keyring):
            assert token_store.save_token(ProviderType.GITHUB, " ghp_x \n") is True
        mock_keyring.set_password.assert_called_once_with(
            "RepoTree", "github_personal_token", "ghp_x"
        )

    def test_save_blank_token_returns_false(self):
        from RepoTree import token_store

        mock_keyring = mock.MagicMock()
        with self._patch(token_store, mock_keyring):
            assert token_store.save_token(ProviderType.GITHUB, "   ") is False
        mock_keyring.set_password.assert_not_called()

    def test_save_returns_false_on_exception(self):
        from RepoTree import token_store

        mock_keyring = mock.MagicMock()
        mock_keyring.set_password.side_effect = Exception("keyring error")
        with self._patch(token_store, mock_keyring):
            assert token_store.save_token(ProviderType.GITHUB, "ghp_x") is False

    def test_delete_returns_true(self):
        from RepoTree import token_store

        mock_keyring = mock.MagicMock()
        with self._patch(token_store, mock_keyring):
            assert token_store.delete_token(ProviderType.GITHUB) is True
        mock_keyring.delete_password.assert_called_once_with(
            "RepoTree", "github_personal_token"
        )

    def test_delete_returns_false_on_exception(self):
        from RepoTree import token_store

        mock_keyring = mock.MagicMock()
        mock_keyring.delete_password.side_effect = Exception("not found")
        with self._patch(token_store, mock_keyring):
            assert token_store.delete_token(ProviderType.GITHUB) is False
