"""Root conftest: shared test configuration."""

import os

# Never reach the real payment processor; start every app with an empty store
os.environ["STRIPE_SECRET_KEY"] = ""
os.environ.setdefault("SEED_SAMPLE_DATA", "false")
os.environ.setdefault("LOG_FORMAT", "text")
