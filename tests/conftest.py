"""
Shared fixtures: saved TARIC consultation page snippets and an in-memory clipboard.
"""

import io

import pytest


CHAPTERS_PAGE = """
<html>
<body>
<table>
  <tr class="section_heading">
    <td class="tdcode">01</td>
    <td class="tddescription">
      Live animals
    </td>
  </tr>
  <tr class="section_heading">
    <td class="tdcode">02</td>
    <td class="tddescription">Meat and edible offal</td>
  </tr>
  <tr class="section_heading">
    <td class="tdcode">03</td>
    <td class="tddescription"><span>Fish and crustaceans,</span> molluscs and other <b>aquatic invertebrates</b></td>
  </tr>
  <tr>
    <td class="tdcode">0301</td>
    <td class="tddescription">Live fish</td>
  </tr>
</table>
</body>
</html>
"""

QUOTES_PAGE = """
<html><body>
<div class="section_heading"><p class="tddescription">Meat and edible offal</p></div>
<div class="section_heading"><p class="tddescription">O'Brien's list</p></div>
</body></html>
"""

EMPTY_PAGE = """
<html><body>
<div class="section_heading"><p class="tdcode">01</p></div>
<p class="tddescription">Outside of any heading</p>
</body></html>
"""


class FakeClipboard:
    def __init__(self):
        self.text = None
        self.calls = 0

    def copy(self, text: str) -> None:
        self.calls += 1
        self.text = text


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def page_file(tmp_path):
    """Write CHAPTERS_PAGE to a temp file and return its path."""
    path = tmp_path / "taric_consultation.html"
    path.write_text(CHAPTERS_PAGE, encoding="utf-8")
    return path


LITHUANIAN_PAGE = """
<html>
<head><meta charset="windows-1257"></head>
<body>
<div class="section_heading"><p class="tddescription">Gyvi gyvūnai</p></div>
<div class="section_heading"><p class="tddescription">Mėsa ir valgomieji mėsos subproduktai</p></div>
</body>
</html>
""".encode("cp1257")


def fake_stdin(data: bytes) -> io.TextIOWrapper:
    """Text stream over data, with the raw bytes reachable through .buffer like sys.stdin."""
    return io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")


@pytest.fixture
def lithuanian_page_file(tmp_path):
    path = tmp_path / "taric_consultation_lt.html"
    path.write_bytes(LITHUANIAN_PAGE)
    return path
