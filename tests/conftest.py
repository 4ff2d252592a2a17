import pytest
from fastapi.testclient import TestClient
from faleproxy.main import app

SAMPLE_HTML_WITH_YALE = """<!DOCTYPE html>
<html>
<head>
  <title>Yale University Test Page</title>
  <meta name="description" content="Yale University official site">
  <style>.yale-blue { color: #00356b; }</style>
</head>
<body>
  <header>
    <h1>Welcome to Yale University</h1>
    <nav>
      <ul>
        <li><a href="https://www.yale.edu/about">About Yale</a></li>
        <li><a href="https://www.yale.edu/admissions">Admissions</a></li>
        <li><a href="https://www.yale.edu/academics">Academics</a></li>
      </ul>
    </nav>
  </header>
  <main>
    <section class="yale-blue">
      <p>Yale University is a private Ivy League research university in New Haven, Connecticut.</p>
      <p>Founded in 1701, YALE is the third-oldest institution of higher education in the United States.</p>
      <img src="https://www.yale.edu/images/logo.png" alt="Yale Logo">
      <p>Contact us at <a href="mailto:info@yale.edu">info@yale.edu</a></p>
    </section>
  </main>
  <!-- yale footer -->
  <script>var campus = "yale";</script>
  <footer>&copy; Yale University</footer>
</body>
</html>
"""

@pytest.fixture
def sample_html():
    return SAMPLE_HTML_WITH_YALE

@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
