"""Pin the environment before anything imports the app: in-memory store, cheap bcrypt."""

import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("USER_STORE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")
