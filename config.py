import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    "Central client configuration"

    # Graph API endpoint
    GRAPH_SCHEME = "https"
    GRAPH_HOST = "graph.facebook.com"
    GRAPH_API_VERSION = "v2.11"

    # Timeouts in seconds
    GRAPH_TIMEOUT = 10
    CONTINUATION_TIMEOUT = 10

    # Credentials
    FB_ACCESS_TOKEN = os.getenv("FB_ACCESS_TOKEN")
    FB_APP_ID = os.getenv("FB_APP_ID")
    FB_APP_SECRET = os.getenv("FB_APP_SECRET")
    FB_BUSINESS_ID = os.getenv("FB_BUSINESS_ID")
