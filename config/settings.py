"""Configuration settings for the Twitch Helix client."""

import os

class Config:
    """Centralized configuration."""
    
    # API Endpoints
    HELIX_BASE = "https://api.twitch.tv/helix/"
    
    # Credentials
    CLIENT_ID = os.environ.get("TWITCH_CLIENT_ID", "")
    BEARER_TOKEN = os.environ.get("TWITCH_BEARER_TOKEN", "")
    
    # Request Settings
    TIMEOUT = 30  # seconds per HTTP call
    
    # Logging
    LOGGER_NAME = "helix"
    
    # Defaults
    DEFAULT_CLIP_LIMIT = 20  # Helix maximum is 100
    DEFAULT_RUNS_DIR = "runs"
