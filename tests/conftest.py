"""
Shared pytest fixtures for nif-check tests.

This module provides:
- `src/` on sys.path (src layout, no install required)
- HTML pages mimicking each nif.pt response shape
- A factory for httpx clients backed by `httpx.MockTransport`
"""

import sys
from pathlib import Path

import httpx
import pytest

PROJECT_ROOT = Path(__file__).parent.parent
SRC_ROOT = PROJECT_ROOT / "src"
sys.path.insert(0, str(SRC_ROOT))


# =============================================================================
# HTML FIXTURES
# =============================================================================

ERROR_PAGE = """
<html><body>
  <div class="alert-message error block-message">
    <p>O NIF indicado não é válido.</p>
  </div>
</body></html>
"""

VALID_UNKNOWN_PAGE = """
<html><body>
  <div class="alert-message success block-message">
    <p>O NIF indicado é válido mas não conseguimos determinar a entidade associada.</p>
  </div>
</body></html>
"""

MULTIPLE_RESULTS_PAGE = """
<html><body>
  <div id="search-results">
    <div class="search-result"><a class="search-title" href="/1">EMPRESA A, LDA</a></div>
    <div class="search-result"><a class="search-title" href="/2">EMPRESA B, SA</a></div>
  </div>
</body></html>
"""

VALID_KNOWN_PAGE = """
<html><body>
  <div class="alert-message success block-message"><p>NIF válido.</p></div>
  <div class="detail">
    <span class="big-nif">500960046</span>
    <div class="search-title">EMPRESA EXEMPLO, LDA</div>
  </div>
</body></html>
"""

EMPTY_PAGE = "<html><head><title>nif.pt</title></head><body><p>Nada.</p></body></html>"


@pytest.fixture
def html_pages():
    """Named HTML bodies for each classification outcome."""
    return {
        "error": ERROR_PAGE,
        "valid_unknown": VALID_UNKNOWN_PAGE,
        "multiple_results": MULTIPLE_RESULTS_PAGE,
        "valid_known": VALID_KNOWN_PAGE,
        "empty": EMPTY_PAGE,
    }


# =============================================================================
# HTTP FIXTURES
# =============================================================================

@pytest.fixture
def mock_client_factory():
    """Build an `httpx.Client` whose requests are answered by `handler`.

    Every request seen by the transport is appended to the returned list.
    """
    clients = []

    def factory(handler):
        seen = []

        def recording_handler(request):
            seen.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(recording_handler))
        clients.append(client)
        return client, seen

    yield factory

    for client in clients:
        client.close()


# =============================================================================
# ENVIRONMENT ISOLATION
# =============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's NIF_CHECK_* variables and .env file."""
    for key in ("LOOKUP_BASE_URL", "HTTP_TIMEOUT_SECONDS", "USER_AGENT", "LOG_LEVEL"):
        monkeypatch.delenv(f"NIF_CHECK_{key}", raising=False)
    monkeypatch.chdir(tmp_path)
