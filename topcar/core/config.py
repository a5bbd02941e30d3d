# topcar/core/config.py
import os, logging

# ── Helpers ───────────────────────────────────────────────────────────────────
def _split_csv(env_val: str) -> list[str]:
    return [x.strip() for x in (env_val or "").split(",") if x.strip()]

def _flag(env_val: str) -> bool:
    return (env_val or "").strip() in ("1", "true", "True", "yes")

# ── Database ─────────────────────────────────────────────────────────────────
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./topcar.db")

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# ── Local timezone (sales windows are computed against this calendar) ───────
TZ_NAME = os.environ.get("TZ_NAME", "Australia/Sydney")

# ── HTTP ─────────────────────────────────────────────────────────────────────
CORS_ORIGINS = _split_csv(os.environ.get("CORS_ORIGINS", "*"))

# ── Mock integrations ────────────────────────────────────────────────────────
PAYMENT_SUCCESS_RATE   = float(os.environ.get("PAYMENT_SUCCESS_RATE", "0.9"))
PAYMENT_DELAY_SECONDS  = float(os.environ.get("PAYMENT_DELAY_SECONDS", "1.0"))
GEOCODER_DELAY_SECONDS = float(os.environ.get("GEOCODER_DELAY_SECONDS", "0.5"))
UPLOAD_BASE_URL        = os.environ.get("UPLOAD_BASE_URL", "https://storage.topcardetailing.test/uploads").rstrip("/")

# ── Flags ────────────────────────────────────────────────────────────────────
SEED_DEMO_DATA = _flag(os.environ.get("SEED_DEMO_DATA", "0"))

# ── Startup logging ──────────────────────────────────────────────────────────
logger = logging.getLogger(__name__)
logger.info(f"[CONFIG] DATABASE_URL={DATABASE_URL.split('://')[0]}://..., TZ_NAME={TZ_NAME}, SEED_DEMO_DATA={SEED_DEMO_DATA}")
