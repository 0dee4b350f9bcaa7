"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидатора dual_state:
- Валидность самой схемы
- Валидация правильных снапшотов
- Детекция нарушений required полей, типов и диапазона coherence
- Интеграция с Pydantic моделью DualState
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    DEFAULT_SCHEMA_DIR,
    DualStateValidator,
    SchemaLoader,
    validate_dual_state,
)
from src.core.contracts import validators
from src.core.domain import DualState


@pytest.fixture
def valid_snapshot():
    """Валидный снапшот dual_state."""
    return {
        "id": "iceberg_01",
        "observed": False,
        "field": {
            "primary": {"label": "energy", "magnitude": 42.0},
            "secondary": {"label": "energy", "magnitude": -41.8},
            "coherence": 0.011792452830188704,
        },
    }


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    def test_load_dual_state_schema(self):
        schema = SchemaLoader().load_schema("dual_state")
        assert schema["title"] == "DualState snapshot"
        assert set(schema["required"]) == {"id", "field", "observed"}

    def test_default_schema_dir_inside_package(self):
        """Схемы лежат внутри пакета и не зависят от корня репозитория"""
        package_dir = Path(validators.__file__).parent
        assert DEFAULT_SCHEMA_DIR == package_dir / "schema"
        assert SchemaLoader().schema_dir == DEFAULT_SCHEMA_DIR
        assert (DEFAULT_SCHEMA_DIR / "dual_state.json").is_file()

    def test_schema_is_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("dual_state") is loader.load_schema("dual_state")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path: Path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path: Path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


class TestDualStateValidator:
    """Тесты валидатора dual_state."""

    def test_valid_snapshot(self, valid_snapshot):
        validate_dual_state(valid_snapshot)
        assert DualStateValidator().is_valid(valid_snapshot)

    def test_missing_required_field(self, valid_snapshot):
        del valid_snapshot["observed"]
        with pytest.raises(ValidationError):
            validate_dual_state(valid_snapshot)

    def test_wrong_type(self, valid_snapshot):
        valid_snapshot["field"]["primary"]["magnitude"] = "42"
        assert not DualStateValidator().is_valid(valid_snapshot)

    @pytest.mark.parametrize("coherence", [-0.01, 1.01])
    def test_coherence_out_of_range(self, valid_snapshot, coherence):
        valid_snapshot["field"]["coherence"] = coherence
        with pytest.raises(ValidationError):
            validate_dual_state(valid_snapshot)

    def test_unknown_property_rejected(self, valid_snapshot):
        valid_snapshot["entangled_with"] = "iceberg_02"
        assert not DualStateValidator().is_valid(valid_snapshot)

    def test_iter_errors_collects_all(self, valid_snapshot):
        del valid_snapshot["id"]
        valid_snapshot["observed"] = "yes"
        errors = list(DualStateValidator().iter_errors(valid_snapshot))
        assert len(errors) == 2


class TestPydanticIntegration:
    """Снапшоты DualState соответствуют контракту."""

    def test_fresh_state_snapshot(self):
        validate_dual_state(DualState.create("iceberg_01", "energy", 42.0, -41.8).to_snapshot())

    def test_observed_inverted_state_snapshot(self):
        state = DualState.create("s", "", 0.0, 0.0)
        state.observe()
        state.invert()
        snapshot = state.to_snapshot()
        validate_dual_state(snapshot)
        assert DualState.from_snapshot(snapshot) == state
