import pytest

from fieldschema import ContainerField, LeafField
from fieldschema.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from FIELDSCHEMA_* variables and the cached settings"""
    monkeypatch.delenv("FIELDSCHEMA_STRICT", raising=False)
    monkeypatch.delenv("FIELDSCHEMA_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FIELDSCHEMA_LOG_FILE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fields():
    """A base schema with leaves, two levels of containers and an array"""
    return {
        "title": LeafField(kind="text", label="Title", default="Default Title"),
        "count": LeafField(kind="number", label="Count", default=0, min=0, max=10),
        "enabled": LeafField(kind="switch", label="Enabled", default=False),
        "nested": ContainerField(
            label="Nested",
            description="Nested description",
            children={
                "value": LeafField(kind="text", label="Value", default="default value"),
                "deep": ContainerField(
                    label="Deep",
                    children={
                        "data": LeafField(kind="number", label="Data", default=42),
                    },
                ),
            },
        ),
        "array": LeafField(
            kind="array",
            label="Array",
            default=[],
            item_fields={
                "label": LeafField(kind="text", label="Label", default=""),
            },
        ),
    }
