"""Pin the environment before the app (and its cached settings) is imported."""

import os
import tempfile

os.environ["APP_ENV"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-key-that-is-at-least-32-bytes-long"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["AUTH_RATE_LIMIT_MAX"] = "100"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="daily-menu-uploads-")
os.environ["PUBLIC_BASE_URL"] = "http://testserver"
os.environ["UPLOAD_MAX_BYTES"] = str(1024 * 1024)
