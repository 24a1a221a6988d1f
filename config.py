# config.py
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_USER_AGENT = "OpenMeteoPy-Client"
DEFAULT_HOST = "api.open-meteo.com"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def client_settings() -> dict:
    """read client settings from the environment at call time"""
    return {
        # commercial key, switches requests to the customer-* hosts when set
        "api_key": os.getenv("OPEN_METEO_API_KEY") or None,
        "user_agent": os.getenv("OPEN_METEO_USER_AGENT") or DEFAULT_USER_AGENT,
        "host": os.getenv("OPEN_METEO_HOST") or DEFAULT_HOST,
    }
