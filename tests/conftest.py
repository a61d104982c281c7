import pytest

from skills_assessment.config import settings
from skills_assessment.llm.providers import LLMProvider

SAMPLE_PDF = b"%PDF-1.4\n%fake cv for tests\n"


class FakeProvider(LLMProvider):
    """Provider returning canned responses and recording the calls it gets."""

    def __init__(self, response="", documents=True, error=None):
        self.response = response
        self.documents = documents
        self.error = error
        self.calls = []

    @property
    def model(self):
        return "fake-model"

    def supports_documents(self):
        return self.documents

    def analyze_pdf(self, prompt, pdf_content, max_tokens):
        self.calls.append({"prompt": prompt, "pdf_content": pdf_content, "max_tokens": max_tokens})
        if self.error:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def _no_llm_logging(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "LLM_LOGGING", False)
    monkeypatch.setattr(settings, "LLM_LOGS_DIR", str(tmp_path / "logs" / "llm"))
