"""Settings read from the environment."""

import os

# In-memory SQLite by default: games only live as long as the process does.
DATABASE_URL = os.environ.get("TICTACTOE_DATABASE_URL", "sqlite:///:memory:")
DATABASE_ECHO = os.environ.get("TICTACTOE_DB_ECHO", "").lower() in ("1", "true", "yes")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
