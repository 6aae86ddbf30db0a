"""Shared fixtures for FOLIO tests."""

from pathlib import Path

import pytest

from folio.contexts.composition.document_data_structure import ResumeDocument
from folio.contexts.templating.registries import TemplateDescriptorRegistry

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_resume_path() -> Path:
    return FIXTURES_PATH / "sample_resume.yaml"


@pytest.fixture
def sample_document(sample_resume_path) -> ResumeDocument:
    """Complete editor export with hidden entries, custom sections and overrides."""
    return ResumeDocument.from_file(sample_resume_path)


@pytest.fixture(scope="session")
def registry() -> TemplateDescriptorRegistry:
    """Registry built from the packaged templates.yaml."""
    return TemplateDescriptorRegistry()
