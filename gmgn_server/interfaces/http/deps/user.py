"""Resolve which demo user a request acts for."""

from typing import Optional

from fastapi import Depends, Header, Query

from gmgn_server.core.config import Settings
from gmgn_server.core.security import resolve_user_id

from .services import get_app_settings


def get_current_user_id(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_app_settings),
) -> str:
    return resolve_user_id(user_id, authorization, settings)


__all__ = ["get_current_user_id"]
