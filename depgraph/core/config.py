import os

from dotenv import load_dotenv

load_dotenv(override=False)


class Settings:
    """Library settings loaded from environment variables."""

    def __init__(self):
        # Logging
        self.LOG_LEVEL = os.getenv("DEPGRAPH_LOG_LEVEL", "WARNING").strip().upper()

        # Verify index invariants after every mutation (O(E) per call)
        self.DEBUG = os.getenv("DEPGRAPH_DEBUG", "false").strip().lower() == "true"


settings = Settings()
