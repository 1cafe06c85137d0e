import os

# Database Configuration
# Uses default credentials for local Docker Compose setup
DB_URL = os.getenv("DATABASE_URL", "postgres://user:password@db:5432/stocktrack")

# Application Metadata
PROJECT_NAME = "StockTrack Inventory Service"
VERSION = "1.0.0"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Session / JWT Configuration
JWT_SECRET = os.getenv("JWT_SECRET", "devsecret")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
SESSION_EXPIRES_SECONDS = int(os.getenv("SESSION_EXPIRES_SECONDS", 86400)) # One day
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "stocktrack_session")
SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "false").lower() == "true"

# Inventory Rules
LOW_STOCK_THRESHOLD = int(os.getenv("LOW_STOCK_THRESHOLD", 10)) # Below this an item is "Low Stock"
