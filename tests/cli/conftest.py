import json
import logging
import os

import pytest

IPS_VARS = ("IPS_MAX_CHARS", "IPS_SIZE_METRIC", "IPS_LOG_LEVEL")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    for name in IPS_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    # load_dotenv zapisuje bezpośrednio do os.environ
    for name in IPS_VARS:
        os.environ.pop(name, None)


@pytest.fixture
def policy_file(tmp_path, s3_ec2_policy):
    path = tmp_path / "policy.json"
    path.write_text(json.dumps(s3_ec2_policy, indent=2), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def restore_root_logger():
    # setup_logging podmienia handlery root loggera (basicConfig(force=True))
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
