"""
Shared fixtures: sample pages and a canned-response HTTP transport.
"""
import httpx
import pytest

ACCESSIBLE_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><title>Example</title></head>
<body>
  <a href="#main">Skip to content</a>
  <nav><a href="/about">About us</a></nav>
  <main id="main">
    <h1>Title</h1>
    <h2>Section</h2>
    <img src="photo.jpg" alt="A photo of the team">
    <form>
      <label for="email">Email</label>
      <input type="email" id="email">
      <button type="submit">Send</button>
    </form>
    <table aria-label="Prices">
      <tr><th>Item</th></tr>
      <tr><td>Tea</td></tr>
    </table>
  </main>
</body>
</html>
"""


@pytest.fixture
def accessible_page():
    return ACCESSIBLE_PAGE


@pytest.fixture
def transport_for():
    """Build an httpx.MockTransport answering every request with `handler`."""

    def _make(handler):
        return httpx.MockTransport(handler)

    return _make


@pytest.fixture
def html_response():
    def _handler(body: str, status_code: int = 200):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, text=body, headers={"content-type": "text/html"})

        return handler

    return _handler
