"""Root conftest — shared test configuration."""

import os

# Ensure tests never dial a real deployment by accident
os.environ.setdefault("MONGO_URL", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_SERVER_SELECTION_TIMEOUT_MS", "50")
