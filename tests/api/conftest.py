import pytest
from fastapi.testclient import TestClient

from ses_mock.infrastructure.audit.filesystem_sink import FilesystemAuditSink
from ses_mock.main import create_app
from ses_mock.presentation.dependencies import get_audit_sink, get_message_ids
from ses_mock.settings import Settings
from tests.fakes import SequentialMessageIds

SEND_PATH = "/v2/email/outbound-emails"


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(_env_file=None, output_dir=tmp_path / "out")


@pytest.fixture()
def app_and_deps(settings, clock):
    app = create_app(settings)
    sink = FilesystemAuditSink(settings.output_dir, clock=clock)
    ids = SequentialMessageIds()

    app.dependency_overrides[get_audit_sink] = lambda: sink
    app.dependency_overrides[get_message_ids] = lambda: ids

    try:
        yield app, sink, ids
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app_and_deps):
    app, _, _ = app_and_deps
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def audit_dirs(settings):
    """Every audit directory written under the output root so far."""

    def _list():
        root = settings.output_dir
        if not root.exists():
            return []
        return sorted(p for p in root.glob("*/*-log") if p.is_dir())

    return _list
