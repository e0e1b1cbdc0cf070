import os
from dotenv import load_dotenv

# Load variables from .env file
load_dotenv()

# Database
SOURCE_DATABASE_URL = os.getenv("SOURCE_DATABASE_URL")
DESTINATION_DATABASE_URL = os.getenv("DESTINATION_DATABASE_URL")
DATABASE_NAME = os.getenv("DATABASE_NAME")

# Driver (milliseconds before giving up on an unreachable server)
SERVER_SELECTION_TIMEOUT_MS = int(os.getenv("SERVER_SELECTION_TIMEOUT_MS", "30000"))

# Retention
# How many backup databases to keep before the oldest one is dropped
BACKUP_RETENTION = int(os.getenv("BACKUP_RETENTION", "10"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
