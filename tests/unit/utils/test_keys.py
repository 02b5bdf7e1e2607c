"""Unit tests for roots.utils.keys."""

from __future__ import annotations

import pytest
from nostr_sdk import Keys

from roots.core.exceptions import ConfigurationError, MalformedPrivateKeyError
from roots.utils.encoding import is_hex64
from roots.utils.keys import (
    ENV_PRIVATE_KEY,
    KeysConfig,
    derive_public_key,
    generate_private_key,
    load_private_key_from_env,
    parse_private_key,
)


class TestGeneratePrivateKey:
    def test_real_backend(self) -> None:
        sk = generate_private_key()
        assert is_hex64(sk)
        assert is_hex64(derive_public_key(sk))

    def test_fake_backend(self, fake_backend) -> None:
        sk = generate_private_key(backend=fake_backend)
        assert is_hex64(sk)
        assert fake_backend.calls == ["generate_private_key"]


class TestDerivePublicKey:
    def test_known_pair(self, private_key: str, public_key: str) -> None:
        assert derive_public_key(private_key) == public_key

    def test_uses_backend(self, fake_backend, private_key: str) -> None:
        pk = derive_public_key(private_key, backend=fake_backend)
        assert is_hex64(pk)
        assert fake_backend.calls == ["derive_public_key"]

    @pytest.mark.parametrize(
        "value",
        ["", "abc", "F43A0435F69529F310BBD1D6263D2FBF0977F54BFE2310CC37AE5904B83BB167", None],
    )
    def test_malformed_rejected_before_backend(self, fake_backend, value: object) -> None:
        with pytest.raises(MalformedPrivateKeyError):
            derive_public_key(value, backend=fake_backend)  # type: ignore[arg-type]
        assert fake_backend.calls == []

    def test_invalid_scalar(self) -> None:
        with pytest.raises(MalformedPrivateKeyError):
            derive_public_key("0" * 64)


class TestParsePrivateKey:
    def test_hex(self, private_key: str) -> None:
        assert parse_private_key(private_key) == private_key

    def test_strips_whitespace(self, private_key: str) -> None:
        assert parse_private_key(f"  {private_key}\n") == private_key

    def test_nsec(self, private_key: str) -> None:
        nsec = Keys.parse(private_key).secret_key().to_bech32()
        assert nsec.startswith("nsec1")
        assert parse_private_key(nsec) == private_key

    def test_garbage(self) -> None:
        with pytest.raises(MalformedPrivateKeyError):
            parse_private_key("not-a-key")


class TestLoadPrivateKeyFromEnv:
    def test_default_env_var(self, monkeypatch: pytest.MonkeyPatch, private_key: str) -> None:
        monkeypatch.setenv(ENV_PRIVATE_KEY, private_key)
        assert load_private_key_from_env() == private_key

    def test_custom_env_var(self, monkeypatch: pytest.MonkeyPatch, private_key: str) -> None:
        monkeypatch.setenv("ROOTS_SIGNER_KEY", private_key)
        assert load_private_key_from_env("ROOTS_SIGNER_KEY") == private_key

    def test_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(ENV_PRIVATE_KEY, raising=False)
        with pytest.raises(ConfigurationError, match="PRIVATE_KEY environment variable"):
            load_private_key_from_env()

    def test_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_PRIVATE_KEY, "")
        with pytest.raises(ConfigurationError):
            load_private_key_from_env()


class TestKeysConfig:
    def test_loads_from_env(
        self, monkeypatch: pytest.MonkeyPatch, private_key: str, public_key: str
    ) -> None:
        monkeypatch.setenv(ENV_PRIVATE_KEY, private_key)
        config = KeysConfig()
        assert config.private_key.get_secret_value() == private_key
        assert config.public_key == public_key

    def test_custom_keys_env(self, monkeypatch: pytest.MonkeyPatch, private_key: str) -> None:
        monkeypatch.delenv(ENV_PRIVATE_KEY, raising=False)
        monkeypatch.setenv("MY_KEY", private_key)
        assert KeysConfig(keys_env="MY_KEY").private_key.get_secret_value() == private_key

    def test_explicit_key_wins(self, monkeypatch: pytest.MonkeyPatch, private_key: str) -> None:
        monkeypatch.delenv(ENV_PRIVATE_KEY, raising=False)
        config = KeysConfig(private_key=private_key)
        assert config.private_key.get_secret_value() == private_key

    def test_secret_masked(self, private_key: str) -> None:
        config = KeysConfig(private_key=private_key)
        assert private_key not in repr(config)
        assert private_key not in str(config.model_dump())

    def test_missing_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(ENV_PRIVATE_KEY, raising=False)
        with pytest.raises(ConfigurationError):
            KeysConfig()

    def test_malformed_key(self) -> None:
        with pytest.raises(MalformedPrivateKeyError):
            KeysConfig(private_key="not-a-key")
