"""Token service unit tests."""
from __future__ import annotations

import asyncio
import re
import secrets
from pathlib import Path

import pytest

from token_gate.config import Settings, TokenSettings
from token_gate.infrastructure.token_store import TokenRecord, TokenStore
from token_gate.tokens.exceptions import AuthError, ConflictError, TokenGenerationError
from token_gate.tokens.service import TokenService, generate_token


@pytest.mark.parametrize("length", [1, 24, 25, 26, 64])
def test_generate_token_has_requested_hex_length(length: int) -> None:
    token = generate_token(length)
    assert re.fullmatch(rf"[0-9a-f]{{{length}}}", token)


def test_generate_token_draws_only_needed_bytes(monkeypatch: pytest.MonkeyPatch) -> None:
    requested: list[int] = []

    def _fake_token_hex(nbytes: int) -> str:
        requested.append(nbytes)
        return "ab" * nbytes

    monkeypatch.setattr(secrets, "token_hex", _fake_token_hex)

    assert generate_token(25) == "ab" * 12 + "a"
    assert requested == [13]


def test_generate_token_wraps_random_source_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def _broken(nbytes: int) -> str:
        raise OSError("no entropy")

    monkeypatch.setattr(secrets, "token_hex", _broken)

    with pytest.raises(TokenGenerationError):
        generate_token(25)


def test_tokens_are_unique_across_issuances() -> None:
    assert len({generate_token(25) for _ in range(200)}) == 200


def test_empty_shared_secret_only_accepts_empty_header(tmp_path: Path) -> None:
    settings = Settings(_env_file=None, shared_secret="")
    service = TokenService(TokenStore(tmp_path / "tokens.json"), settings)

    service.authorize(None)
    service.authorize("")
    with pytest.raises(AuthError):
        service.authorize("anything")


def test_issue_uses_configured_length(tmp_path: Path) -> None:
    settings = Settings(_env_file=None, shared_secret="s", token=TokenSettings(length=32))
    store = TokenStore(tmp_path / "tokens.json")
    service = TokenService(store, settings)

    token = asyncio.run(service.issue("u1", "g1", auth_header="s"))

    assert len(token) == 32
    assert store.load() == {"u1": TokenRecord(token=token, guild_id="g1")}


def test_conflicting_issue_does_not_generate_token(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    store = TokenStore(tmp_path / "tokens.json")
    store.save({"u1": TokenRecord(token="existing", guild_id="g1")})
    service = TokenService(store, Settings(_env_file=None, shared_secret="s"))

    def _unexpected(nbytes: int) -> str:
        raise AssertionError("token generated for a conflicting issuance")

    monkeypatch.setattr(secrets, "token_hex", _unexpected)

    with pytest.raises(ConflictError):
        asyncio.run(service.issue("u1", "g2", auth_header="s"))

    assert store.load() == {"u1": TokenRecord(token="existing", guild_id="g1")}


def test_verify_returns_consumed_record(tmp_path: Path) -> None:
    store = TokenStore(tmp_path / "tokens.json")
    store.save({"u1": TokenRecord(token="t1", guild_id="g1")})
    service = TokenService(store, Settings(_env_file=None, shared_secret="s"))

    record = asyncio.run(service.verify("u1", "t1"))

    assert record == TokenRecord(token="t1", guild_id="g1")
    assert store.load() == {}


def test_header_outside_latin1_is_rejected(tmp_path: Path) -> None:
    service = TokenService(TokenStore(tmp_path / "tokens.json"), Settings(_env_file=None, shared_secret="€uro"))

    with pytest.raises(AuthError):
        service.authorize("€uro")
    service.authorize("€uro".encode("utf-8").decode("latin-1"))
