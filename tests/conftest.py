from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _clear_shutdown_flag():
    from blog_deploy.core.process_control import clear_shutdown_request

    clear_shutdown_request()
    yield
    clear_shutdown_request()


@pytest.fixture(autouse=True)
def _clean_deploy_env(monkeypatch):
    for key in (
        "BLOG_DEPLOY_ROOT",
        "BLOG_DEPLOY_BUILD_CMD",
        "BLOG_DEPLOY_THEME",
        "BLOG_DEPLOY_OUTPUT_DIR",
        "BLOG_DEPLOY_REMOTE",
        "BLOG_DEPLOY_BRANCH",
        "BLOG_DEPLOY_FORCE_ADD",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def output_checkout(tmp_path):
    """A site root whose ``public`` directory looks like a git checkout."""
    site = tmp_path / "site"
    public = site / "public"
    (public / ".git").mkdir(parents=True)
    return site
