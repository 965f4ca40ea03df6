"""Alembic environment for the posts schema.

Online runs reuse the application's engine so migrations hit the same store
the API is configured for (``APP_DB_PATH`` or ``DATABASE_URL``).
"""

from logging.config import fileConfig

from alembic import context
from posts_service.app.db.base import Base
from posts_service.app.db.engine import engine
from posts_service.app.models.post_record import PostRecord  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata

if context.is_offline_mode():
    # --sql: render DDL against the URL in alembic.ini
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
    )
    with context.begin_transaction():
        context.run_migrations()
else:
    with engine.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()
