# billing_engine/api/deps.py
"""FastAPI dependencies shared by all routers."""

from __future__ import annotations

from fastapi import Depends, Request

from billing_engine.config.settings import Settings
from billing_engine.domain.models.document import IssuerProfile


def get_settings(request: Request) -> Settings:
    """Settings injected into the app by ``create_app``."""
    return request.app.state.settings


def get_default_issuer(settings: Settings = Depends(get_settings)) -> IssuerProfile:
    return IssuerProfile(
        company_name=settings.ISSUER_COMPANY_NAME,
        home_state=settings.ISSUER_HOME_STATE,
        home_state_code=settings.ISSUER_HOME_STATE_CODE,
        email_template=settings.ISSUER_EMAIL_TEMPLATE,
    )
