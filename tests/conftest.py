"""
Test Configuration and Fixtures
"""
import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from resume_api import create_app
from resume_api.errors import CompletionError
from resume_api.storage import UploadStore

APP_KEY = "test-app-key"


class FakeCompletions:
    """Stands in for CompletionClient; records every prompt it is sent"""

    model = "fake-model"

    def __init__(self, output="Looks great."):
        self.output = output
        self.prompts = []
        self.fail = None

    def ready(self):
        return True, ""

    def complete(self, prompt):
        self.prompts.append(prompt)
        if self.fail is not None:
            raise self.fail
        return self.output


def make_pdf(*lines):
    """One-page PDF with each line drawn as text"""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    y = 720
    for line in lines:
        c.drawString(72, y, line)
        y -= 18
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture
def completions():
    return FakeCompletions()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def app(completions, upload_dir):
    """Create application for testing"""
    app = create_app(
        "testing",
        completions=completions,
        store=UploadStore(str(upload_dir)),
    )
    app.config["APP_SECRET"] = APP_KEY
    yield app


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {"x-app-key": APP_KEY}


@pytest.fixture
def pdf_factory():
    return make_pdf


@pytest.fixture
def resume_pdf():
    return make_pdf("John Doe, Software Engineer")


@pytest.fixture
def upload(client, auth_headers):
    """Upload bytes and return the stored handle"""
    def _upload(data, name="resume.pdf"):
        response = client.post(
            "/api/upload",
            data={"file": (io.BytesIO(data), name)},
            headers=auth_headers,
            content_type="multipart/form-data",
        )
        assert response.status_code == 200
        return response.get_json()["filename"]
    return _upload


@pytest.fixture
def failing_completion():
    return CompletionError("simulated network error")
