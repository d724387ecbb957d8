"""Tests for Discord token validation."""

from __future__ import annotations

import pytest

from discord_addons.core.errors import InvalidTokenError
from discord_addons.tokens import TokenType, is_valid_token, try_validate_token, validate_token

# base64("123456789012345678") + timestamp + HMAC
VALID_BOT_TOKEN = "MTIzNDU2Nzg5MDEyMzQ1Njc4.GhIiP9.abcdefghijklmnopqrstuvwxyz0"
# base64("80351110224678912") with its "=" padding stripped
UNPADDED_BOT_TOKEN = "ODAzNTExMTAyMjQ2Nzg5MTI.GhIiP9.abcdefghijklmnopqrstuvwxyz0"


class TestValidateToken:
    def test_valid_bot_token(self):
        validate_token(VALID_BOT_TOKEN)

    def test_unpadded_user_id_segment(self):
        validate_token(UNPADDED_BOT_TOKEN)

    @pytest.mark.parametrize(
        "token,code",
        [
            ("", "empty_token"),
            ("   ", "empty_token"),
            ("MTIzNDU2Nzg5MDEyMzQ1Njc4.GhIiP9 abcdefghijklmnopqrstuvwxyz0", "token_whitespace"),
            ("MTIzNDU2Nzg5MDEyMzQ1Njc4.GhIiP9.abc", "token_too_short"),
            ("MTIzNDU2Nzg5MDEyMzQ1Njc4GhIiP9abcdefghijklmnopqrstuvwxyz0123", "token_segments"),
            ("MTIzNDU2Nzg5MDEyMzQ1Njc4.GhIiP9.abcdefghijklmnop.qrstuvwxyz0", "token_segments"),
            ("YWJjYWJjYWJjYWJjYWJjYWJj.GhIiP9.abcdefghijklmnopqrstuvwxyz0", "token_user_id"),
            ("!!!!!!!!!!!!!!!!!!!!!!!!.GhIiP9.abcdefghijklmnopqrstuvwxyz0", "token_user_id"),
        ],
    )
    def test_invalid_bot_tokens(self, token, code):
        with pytest.raises(InvalidTokenError) as exc_info:
            validate_token(token)
        assert exc_info.value.code == code

    @pytest.mark.parametrize("token_type", [TokenType.BEARER, TokenType.WEBHOOK])
    def test_other_types_only_check_blank_and_whitespace(self, token_type):
        validate_token("short", token_type)
        with pytest.raises(InvalidTokenError):
            validate_token("has space", token_type)


class TestNonRaisingVariants:
    def test_is_valid_token(self):
        assert is_valid_token(VALID_BOT_TOKEN)
        assert not is_valid_token("nope")

    def test_unexpected_input_is_invalid(self):
        assert not is_valid_token(None)  # type: ignore[arg-type]
        assert not is_valid_token(12345)  # type: ignore[arg-type]

    def test_try_validate_token(self):
        assert try_validate_token(VALID_BOT_TOKEN) == VALID_BOT_TOKEN
        assert try_validate_token("nope") is None
        assert try_validate_token("nope", TokenType.BEARER) == "nope"
