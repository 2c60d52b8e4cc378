"""
Application configuration using environment variables.
"""
import os
from dataclasses import dataclass
from dotenv import load_dotenv

# Load .env file
load_dotenv()

@dataclass
class Settings:
    """Application settings."""
    APP_NAME: str = os.getenv("APP_NAME", "Trusted Advisor Stats")
    
    # AWS Support API (only served from us-east-1)
    AWS_REGION: str = os.getenv("AWS_REGION", "us-east-1")
    AWS_PROFILE: str = os.getenv("AWS_PROFILE", "")
    
    # Trusted Advisor
    ADVISOR_LANGUAGE: str = os.getenv("ADVISOR_LANGUAGE", "en")
    
    # Support client settings
    SUPPORT_CONNECT_TIMEOUT: int = int(os.getenv("SUPPORT_CONNECT_TIMEOUT", "10"))
    SUPPORT_READ_TIMEOUT: int = int(os.getenv("SUPPORT_READ_TIMEOUT", "60"))
    SUPPORT_MAX_ATTEMPTS: int = int(os.getenv("SUPPORT_MAX_ATTEMPTS", "1"))  # 1 = no retries
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
