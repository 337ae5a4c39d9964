"""Shared fixtures for the auditor test suite."""

import pytest
from fastapi.testclient import TestClient

from seo_auditor.main import app


SAMPLE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <title>  Trail Running Shoes   Guide </title>
  <meta name="description" content="How to pick trail running shoes.">
  <style>.hero { color: red; }</style>
  <script>var tracking = "analytics analytics";</script>
</head>
<body>
  <header><h1>Trail Running Shoes</h1><p>Header promo text</p></header>
  <nav><a href="/">Home</a> <a href="/shop">Shop</a></nav>
  <main>
    <h2>Grip and Cushioning</h2>
    <p>Trail running shoes need grip. Trail running shoes need cushioning.</p>
    <h2>Fit</h2>
    <p>A good fit matters on long trail runs.</p>
    <svg><text>vector label</text></svg>
    <iframe src="https://example.com/embed"></iframe>
  </main>
  <footer>Copyright footer text</footer>
</body>
</html>
"""


@pytest.fixture
def sample_html() -> str:
    return SAMPLE_HTML


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
