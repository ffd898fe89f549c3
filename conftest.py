import os

# Load .env.test for local overrides before settings are first read
from dotenv import load_dotenv

env_test_path = os.path.join(os.path.dirname(__file__), ".env.test")
if os.path.exists(env_test_path):
    load_dotenv(env_test_path, override=True)

os.environ.setdefault("API_BASE_URL", "http://trainer-api.test/api/trainer")
os.environ.setdefault("RECAPTCHA_SITE_KEY", "test-site-key")
os.environ.setdefault("ENVIRONMENT", "local")

from libs.common.config import get_settings  # noqa: E402

# Clear cached settings to reload with the test env vars
get_settings.cache_clear()
