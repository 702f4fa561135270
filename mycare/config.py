"""
Environment configuration for MyCare
Values come from the process environment, optionally seeded from a .env file
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Backend the auth service talks to
API_URL = os.getenv("MYCARE_API_URL", "http://localhost:3001/api")

# Server exercised by the smoke-test script
SMOKE_TEST_URL = os.getenv("MYCARE_SMOKE_URL", "http://localhost:5000")

# Durable client-side session storage
SESSION_FILE = os.getenv("MYCARE_SESSION_FILE", ".mycare_session.json")

# Required by the index migration, no default
MONGO_URI = os.getenv("MONGO_URI")

# Stub backend
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./mycare.db")
SECRET_KEY = os.getenv("SECRET_KEY", "mycare-secret-change-in-production")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
