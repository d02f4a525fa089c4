import sys
from pathlib import Path

import pytest

# Ensure project root is importable when pytest is invoked from non-root directories.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _force_stub_backend(monkeypatch: pytest.MonkeyPatch):
    from app.core.config import get_settings
    from app.main import app
    from app.services.inference_factory import build_inference_client

    # Keep tests offline regardless of caller shell environment or a local .env file.
    monkeypatch.setattr("app.core.config.load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.setenv("INFERENCE_BACKEND", "stub")
    monkeypatch.delenv("AZURE_OPENAI_ENDPOINT", raising=False)
    monkeypatch.delenv("AZURE_OPENAI_KEY", raising=False)
    monkeypatch.delenv("AZURE_OPENAI_MODEL", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    build_inference_client.cache_clear()
    yield
    app.dependency_overrides.clear()
    get_settings.cache_clear()
    build_inference_client.cache_clear()
