from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from sorg.config import BuildConfig, SitePaths
from sorg.stylesheets import STYLESHEETS

REPO_ROOT = Path(__file__).resolve().parent.parent

HELLO_ARTICLE = """---
title: Hello
published_at: 2020-01-01T00:00:00Z
hook: A first post.
hn_link: https://news.ycombinator.com/item?id=1
---
Body *text*
"""

NOTE_FRAGMENT = """---
title: A note
published_at: 2021-03-04
---
Short and ~~sweet~~ to the point.
"""


def write_site(root: Path) -> Path:
    """Lay out a small but complete site under ``root``."""
    shutil.copytree(REPO_ROOT / "layouts", root / "layouts")
    shutil.copytree(REPO_ROOT / "views", root / "views")

    content = root / "content"
    for name in ("articles", "fragments", "images", "stylesheets"):
        (content / name).mkdir(parents=True)

    (content / "articles" / "hello.md").write_text(HELLO_ARTICLE, encoding="utf-8")
    (content / "fragments" / "note.md").write_text(NOTE_FRAGMENT, encoding="utf-8")
    (content / "images" / "photo.jpg").write_bytes(b"\xff\xd8\xff\xe0not-really-a-jpeg")

    for name in STYLESHEETS:
        path = content / "stylesheets" / name
        if name.endswith(".sass"):
            path.write_text(".%s\n  margin: 0\n" % name.split(".")[0].strip("_"), encoding="utf-8")
        else:
            path.write_text("pre { color: #586e75; }\n", encoding="utf-8")
    return root


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    return write_site(tmp_path / "site")


@pytest.fixture
def site_paths(site_root: Path) -> SitePaths:
    return SitePaths.from_root(site_root, "r1")


@pytest.fixture
def config() -> BuildConfig:
    return BuildConfig(database_url=None, google_analytics_id="UA-1234-5", verbose=False, release="r1")
