"""
test_core.py - Tokens, caller resolution, pagination and schema aliases
"""
from datetime import timedelta

import pytest

from gmgn_server.core.pagination import PaginationParams, paginate
from gmgn_server.core.security import (
    TokenError,
    bearer_token,
    create_access_token,
    decode_token,
    resolve_user_id,
)
from gmgn_server.schemas import OrderOut, Page, to_camel


def test_access_token_round_trip(settings):
    token = create_access_token("user-7", "seven@example.com", settings)
    payload = decode_token(token, settings)
    assert payload["sub"] == "user-7"
    assert payload["email"] == "seven@example.com"
    assert payload["type"] == "access"


def test_expired_or_forged_tokens_are_rejected(settings):
    expired = create_access_token("user-7", "seven@example.com", settings, expires_delta=timedelta(minutes=-1))
    with pytest.raises(TokenError):
        decode_token(expired, settings)
    with pytest.raises(TokenError):
        decode_token("not.a.token", settings)


def test_bearer_token_parsing():
    assert bearer_token("Bearer abc") == "abc"
    assert bearer_token("Basic abc") is None
    assert bearer_token(None) is None


def test_resolve_user_id_precedence(settings):
    token = create_access_token("user-2", "alice@example.com", settings)
    assert resolve_user_id("user-9", f"Bearer {token}", settings) == "user-9"
    assert resolve_user_id(None, f"Bearer {token}", settings) == "user-2"
    assert resolve_user_id(None, "Bearer broken", settings) == "user-1"
    assert resolve_user_id(None, None, settings) == "user-1"


@pytest.mark.parametrize(
    "page, limit, expected",
    [
        (None, None, (1, 20)),
        ("3", "50", (3, 50)),
        ("0", "500", (1, 100)),
        ("-2", "0", (1, 20)),
        ("abc", "xyz", (1, 20)),
    ],
)
def test_pagination_params_are_clamped(page, limit, expected):
    params = PaginationParams.parse(page, limit)
    assert (params.page, params.limit) == expected


def test_paginate_slices_pages():
    items = list(range(45))
    assert paginate(items, PaginationParams(page=3, limit=20)) == list(range(40, 45))
    assert paginate(items, PaginationParams(page=4, limit=20)) == []


def test_page_envelope_metadata():
    page = Page[int].build(list(range(45)), PaginationParams(page=2, limit=20))
    body = page.model_dump(by_alias=True)
    assert body["items"] == list(range(20, 40))
    assert body["pagination"] == {"page": 2, "limit": 20, "total": 45, "totalPages": 3, "hasMore": True}


def test_camel_case_aliases_keep_digit_suffixes():
    assert to_camel("price_change_24h") == "priceChange24h"
    assert to_camel("pnl_percent_7d") == "pnlPercent7d"
    assert to_camel("tx_hash") == "txHash"
    assert "filledPrice" in OrderOut.model_json_schema(by_alias=True)["properties"]
