import pytest

from lp_hedge.calculator.fields import FIELDS
from lp_hedge.core.config import ENV_PREFIX, Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's config dir, .env and LP_HEDGE_* variables out of tests"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("LP_HEDGE_CONFIG_DIR", raising=False)
    for spec in FIELDS:
        monkeypatch.delenv(ENV_PREFIX + spec.name.upper(), raising=False)
    Config.reload()
