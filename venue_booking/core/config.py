import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


# -------- DATABASE --------
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./venue_booking.db")
FALLBACK_DATABASE_URL = os.getenv("FALLBACK_DATABASE_URL") or DATABASE_URL

# -------- REDIS (slot locks) --------
REDIS_URL = os.getenv("REDIS_URL")
SLOT_LOCK_TIMEOUT_SECONDS = float(os.getenv("SLOT_LOCK_TIMEOUT_SECONDS", 30))
SLOT_LOCK_WAIT_SECONDS = float(os.getenv("SLOT_LOCK_WAIT_SECONDS", 10))

# -------- AUTH --------
JWT_SECRET = os.getenv("JWT_SECRET")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

# -------- LOGGING --------
LOG_DIR = os.getenv("LOG_DIR", "logs")

# -------- MAIL --------
MAIL_USERNAME = os.getenv("MAIL_USERNAME")
MAIL_PASSWORD = os.getenv("MAIL_PASSWORD")
MAIL_FROM = os.getenv("MAIL_FROM")
MAIL_SERVER = os.getenv("MAIL_SERVER", "smtp.gmail.com")
MAIL_PORT = int(os.getenv("MAIL_PORT", 587))

# -------- PRICING --------
# When on, bookings without any matching pricing rule are rejected
# instead of falling back to the client estimate.
REQUIRE_PRICING_RULE = _flag("REQUIRE_PRICING_RULE")
