"""Default Flask configuration. Override with FLASK_* environment variables."""

from sip_backend.core.display import DEFAULT_CURRENCY_SYMBOL


class Config:
    CORS_ORIGINS = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    SIP_GROWTH_SERIES = "divided"
    SIP_CURRENCY_SYMBOL = DEFAULT_CURRENCY_SYMBOL
    SIP_MAX_YEARS = 100
    LOG_LEVEL = "INFO"
