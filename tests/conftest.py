from __future__ import annotations

import pytest

from teatree_scraper.utils.logging import get_logger


RESULTS_HTML = """
<html>
<body>
<div id="content">
  <h4 class="non_table_headers">10  Park  Lane SA 5091 - Land Division</h4>
  <div>
    <p class="rowDataOnly"><span class="key">Type of Work</span><span class="inputField">Fence</span></p>
    <p class="rowDataOnly"><span class="key">Application No.</span><span class="inputField">123/2019</span></p>
    <p class="rowDataOnly"><span class="key">Date Lodged</span><span class="inputField">1/6/2019</span></p>
  </div>
  <h4 class="non_table_headers">
      12-14   Main Road   MODBURY SA 5092 - Building Rules Application
  </h4>
  <div>
    <p class="rowDataOnly"><span class="key">Application No.</span><span class="inputField"> 550/1234/19 </span></p>
    <p class="rowDataOnly"><span class="key">Type of Work</span><span class="inputField">Verandah</span></p>
    <p class="rowDataOnly"><span class="key">Date Lodged</span><span class="inputField">not a date</span></p>
    <p class="rowDataOnly"><span class="key">Applicant</span><span class="inputField">J Smith</span></p>
  </div>
  <h4 class="non_table_headers">1 Nowhere Street SA 5091</h4>
  <div>
    <p class="rowDataOnly"><span class="key">Type of Work</span><span class="inputField">Carport</span></p>
  </div>
</div>
</body>
</html>
"""


class FakeResponse:
    def __init__(self, status: int, body=""):
        self.status = status
        self._body = body

    async def text(self, encoding="utf-8", errors="strict"):
        if isinstance(self._body, bytes):
            return self._body.decode(encoding, errors)
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession; the first response sets a cookie."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.requests = []
        self.cookie_jar = []
        self.closed = False

    def get(self, url, **kwargs):
        self.requests.append(str(url))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if len(self.requests) == 1:
            self.cookie_jar.append(("JSESSIONID_live", "abc123"))
        return response

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self.closed = True
        return False


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    get_logger().handlers.clear()


@pytest.fixture
def results_html() -> str:
    return RESULTS_HTML
