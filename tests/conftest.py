import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from portfoliodata.cli_config import UserConfig  # noqa: E402


CAREER_HTML = """<!DOCTYPE html>
<html lang="ko">
<head><meta charset="utf-8"><title>Career</title></head>
<body>
  <table class="discord-career-table">
    <thead>
      <tr><th>No</th><th>Server</th><th>Category</th><th>Members</th>
          <th>Department</th><th>Position</th><th>Job</th><th>Term</th></tr>
    </thead>
    <tbody>
      <tr>
        <td>1</td>
        <td>Test Server<sup data-note="Details">[Note]</sup></td>
        <td>Category</td>
        <td>100</td>
        <td>Dept</td>
        <td>Pos</td>
        <td>Job Desc</td>
        <td>2023-2024</td>
      </tr>
      <tr>
        <td>2</td>
        <td> Plain &amp; Simple </td>
        <td>Community</td>
        <td>2,500</td>
        <td>Ops</td>
        <td>Admin</td>
        <td>Moderation</td>
        <td>2021-2022</td>
      </tr>
    </tbody>
  </table>
</body>
</html>
"""

THANKS_HTML = """<!DOCTYPE html>
<html lang="ko">
<head><meta charset="utf-8"><title>Special Thanks</title></head>
<body>
  <section id="gift-list-container">
    <div class="gift-year" id="year-2024">
      <h3 class="year-title">2024</h3>
      <div class="gift-grid">
        <article class="gift-card card" data-type="nitro">
          <div class="gift-card-header">
            <span class="gift-number">1</span>
            <div class="gift-user">User1</div>
          </div>
          <div class="gift-card-body"><span class="tag tag-nitro">Nitro</span></div>
          <div class="gift-meta"><time datetime="2024-01-01T12:00:00+09:00">2024년 1월 1일</time></div>
        </article>
        <article class="gift-card card">
          <div class="gift-card-header">
            <span class="gift-number">2</span>
            <div class="gift-user">User2</div>
          </div>
          <div class="gift-card-body"><span class="tag">Banner</span></div>
          <div class="gift-meta"><time datetime="2024-03-05T09:30:00+09:00">2024-03-05</time></div>
        </article>
      </div>
    </div>
    <div class="gift-year" id="year-2023">
      <h3 class="year-title">2023</h3>
      <div class="gift-grid">
        <article class="gift-card card" data-type="banner">
          <div class="gift-card-header">
            <span class="gift-number">3</span>
            <div class="gift-user">User3</div>
          </div>
          <div class="gift-card-body"><span class="tag tag-banner">Profile Banner</span></div>
          <div class="gift-meta"><time datetime="2023-12-24T20:00:00+09:00">2023-12-24</time></div>
        </article>
      </div>
    </div>
  </section>
</body>
</html>
"""


@pytest.fixture
def career_html() -> str:
    return CAREER_HTML


@pytest.fixture
def thanks_html() -> str:
    return THANKS_HTML


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A site checkout with both source pages and no data directory yet."""
    (tmp_path / "career-table.html").write_text(CAREER_HTML, encoding="utf-8")
    (tmp_path / "special-thanks.html").write_text(THANKS_HTML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_config(site_root: Path):
    def _make(**kwargs) -> UserConfig:
        kwargs.setdefault("root_dir", site_root)
        return UserConfig(**kwargs)

    return _make
