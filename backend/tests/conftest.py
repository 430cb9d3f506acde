import os
import tempfile

# Must run before anything imports podiumboard.config.
os.environ["ENVIRONMENT"] = "CI"
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="podiumboard-tests-"), "podiumboard.db"
)
os.environ["API_SECRET"] = "test-api-secret"
