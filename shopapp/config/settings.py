# shopapp/config/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

API_PREFIX = os.getenv("API_PREFIX", "/api/v1").rstrip("/")

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret-change-me")
JWT_ALGORITHM = "HS256"
# seconds; 30 days
JWT_EXPIRATION_SECONDS = int(os.getenv("JWT_EXPIRATION", "2592000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DEBUG = os.getenv("DEBUG", "False").lower() == "true"

MAX_IMAGES_PER_PRODUCT = 5

CORS_ALLOWED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
CORS_ALLOWED_HEADERS = ["authorization", "content-type", "x-auth-token"]
CORS_EXPOSED_HEADERS = ["x-auth-token"]
