from logging.config import fileConfig
from sqlalchemy import create_engine, pool
from alembic import context

# -----------------------------
# Load settings (.env via python-dotenv)
# -----------------------------
from venue_booking.core.config import DATABASE_URL

# -----------------------------
# Import SQLAlchemy Base + Models
# -----------------------------
from venue_booking.db.session import Base
from venue_booking.models.tenant import Tenant  # noqa: F401
from venue_booking.models.customer import Customer  # noqa: F401
from venue_booking.models.resource import Resource  # noqa: F401
from venue_booking.models.pricing import PricingRule  # noqa: F401
from venue_booking.models.booking import Booking  # noqa: F401
from venue_booking.models.notification import Notification  # noqa: F401

# -----------------------------
# Alembic Configuration
# -----------------------------
config = context.config
config.set_main_option("sqlalchemy.url", DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


# ===============================================================
# OFFLINE MIGRATIONS
# ===============================================================
def run_migrations_offline():
    """Run migrations in 'offline' mode."""
    url = config.get_main_option("sqlalchemy.url")

    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        compare_server_default=True,
    )

    with context.begin_transaction():
        context.run_migrations()


# ===============================================================
# ONLINE MIGRATIONS
# ===============================================================
def run_migrations_online():
    """Run migrations in 'online' mode."""
    connectable = create_engine(
        config.get_main_option("sqlalchemy.url"),
        poolclass=pool.NullPool
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            compare_server_default=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
