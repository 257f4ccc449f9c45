import pytest

from app.preferences.models import Preferences


@pytest.fixture()
def session_notes_with_pii() -> str:
    """Session notes containing several recognizable PII categories."""
    return (
        "Jane Smith attended on 03/14/2024. Contact: john.doe@example.com, "
        "phone (555) 123-4567. MRN: 448812. Reports improved sleep and reduced "
        "anxiety since the last appointment."
    )


@pytest.fixture()
def plain_session_notes() -> str:
    """Session notes without any recognizable PII."""
    return (
        "the client reported improved sleep and fewer panic episodes. "
        "we practiced grounding exercises and reviewed coping strategies."
    )


@pytest.fixture()
def default_preferences() -> Preferences:
    return Preferences()
