"""
Shared fixtures for the env detector test suite.
Each test gets its own project tree under tmp_path:

    <root>/.env.example
    <root>/bootstrap/app.py
    <root>/bootstrap/environment_detector.py
"""
import pytest
from flask import Flask

from env_detector import EnvDetector
from env_detector.config import Options
from env_detector.stubs import load_stub

ENTRY_SOURCE = (
    "from flask import Flask\n"
    "\n"
    "\n"
    "def create_app():\n"
    "    app = Flask(__name__)\n"
    "    app.config.from_mapping(SECRET_KEY=\"dev\")\n"
    "    return app\n"
)

TEMPLATE_SOURCE = (
    "APP_NAME=Demo\n"
    "APP_ENV=local\n"
    "APP_KEY=\n"
    "APP_DEBUG=true\n"
    "\n"
    "DB_HOST=127.0.0.1\n"
)

ENVIRONMENTS = {"prod": "Production", "stage": "Staging"}


@pytest.fixture
def project(tmp_path):
    """Project root with template, entry file and installed detector."""
    boot = tmp_path / "bootstrap"
    boot.mkdir()
    (boot / "app.py").write_text(ENTRY_SOURCE, encoding="utf-8")
    (boot / "environment_detector.py").write_text(
        load_stub("environment_detector.stub"), encoding="utf-8"
    )
    (tmp_path / ".env.example").write_text(TEMPLATE_SOURCE, encoding="utf-8")
    return tmp_path


@pytest.fixture
def opts(project):
    return Options(root=project, environments=dict(ENVIRONMENTS))


@pytest.fixture
def snippet(opts):
    return opts.snippet_text()


@pytest.fixture
def app(project):
    app = Flask(__name__)
    app.config.update(
        TESTING=True,
        ENV_DETECTOR_ROOT=str(project),
        ENV_DETECTOR_ENVIRONMENTS=dict(ENVIRONMENTS),
    )
    EnvDetector(app)
    return app


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def always_yes():
    asked = []

    def _confirm(question):
        asked.append(question)
        return True

    _confirm.asked = asked
    return _confirm


@pytest.fixture
def always_no():
    asked = []

    def _confirm(question):
        asked.append(question)
        return False

    _confirm.asked = asked
    return _confirm
