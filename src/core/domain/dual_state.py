"""
DualState — Модель дуального состояния (matter ↔ antimatter)

Pydantic модели "квазиквантового" значения:
- Token: помеченная магнитуда (immutable)
- DualField: пара Token (primary/secondary) + производная coherence (immutable)
- DualState: владеющая сущность с id и флагом observed (mutable)

Жизненный цикл DualState:
    SUPERPOSED (начальное) --observe()--> OBSERVED (терминальное)
    invert() допустим в обоих состояниях и не меняет флаг observed.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. coherence вычисляется при создании DualField и не задаётся независимо
2. invert() заменяет DualField целиком, coherence НЕ пересчитывается
   (формула симметрична, сохранённое значение остаётся корректным)
3. observe() идемпотентен: повторный вызов возвращает то же значение
4. Строковые поля не валидируются (пустые строки допустимы),
   NaN/Inf магнитуды не отклоняются
"""

import logging
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator

from src.core.math.coherence import collapse_mean, compute_coherence
from src.core.math.numerical_safeguards import all_valid_floats, is_close

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class StateTag(str, Enum):
    """Текстовый тег состояния"""

    SUPERPOSED = "Superposed"
    OBSERVED = "Observed"


# =============================================================================
# VALUE OBJECTS
# =============================================================================


class Token(BaseModel):
    """
    Помеченная магнитуда.

    Immutable модель (frozen=True). Label — неформальный тег (например,
    'energy'), ограничений на значения нет.
    """

    label: str = Field(..., description="Тип токена (например, 'energy')")
    magnitude: float = Field(..., description="Магнитуда (NaN/Inf допустимы)")

    model_config = {"frozen": True}


class DualField(BaseModel):
    """
    Дуальное поле: primary (matter) ↔ secondary (antimatter).

    Immutable модель. Создавать через DualField.from_magnitudes():
    coherence вычисляется из магнитуд. При прямом создании coherence,
    не совпадающая с формулой, отклоняется (для конечных магнитуд).
    """

    primary: Token = Field(..., description="Primary токен (matter)")
    secondary: Token = Field(..., description="Secondary токен (antimatter)")
    coherence: float = Field(..., description="Мера симметрии пары, [0, 1]")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_coherence_derived(self) -> "DualField":
        """
        Coherence должна совпадать с формулой для текущих магнитуд.

        Для NaN/Inf магнитуд проверка пропускается, как и при переполнении
        арифметики формулы (например, 1e308 и -1e308 дают NaN).
        """
        primary = self.primary.magnitude
        secondary = self.secondary.magnitude
        expected = compute_coherence(primary, secondary)
        if not all_valid_floats(primary, secondary, expected):
            return self

        if not is_close(self.coherence, expected):
            raise ValueError(
                f"coherence {self.coherence:.6f} does not match magnitudes "
                f"({primary}, {secondary}), expected {expected:.6f}"
            )
        return self

    @classmethod
    def from_magnitudes(cls, label: str, primary: float, secondary: float) -> "DualField":
        """
        Создание поля из двух магнитуд под общим label.

        Args:
            label: Общий тип обоих токенов
            primary: Магнитуда primary
            secondary: Магнитуда secondary

        Returns:
            DualField с вычисленной coherence
        """
        return cls(
            primary=Token(label=label, magnitude=primary),
            secondary=Token(label=label, magnitude=secondary),
            coherence=compute_coherence(primary, secondary),
        )

    def swapped(self) -> "DualField":
        """Новое поле с переставленными primary/secondary, coherence сохраняется."""
        return self.model_copy(
            update={"primary": self.secondary, "secondary": self.primary}
        )


# =============================================================================
# DUAL STATE
# =============================================================================


class DualState(BaseModel):
    """
    Владеющая сущность: id + DualField + флаг observed.

    Mutable модель: observe() и invert() изменяют состояние in-place.
    Уникальность id не проверяется.
    """

    id: str = Field(..., description="Идентификатор состояния (задаётся вызывающим)")
    field: DualField = Field(..., description="Дуальное поле")
    observed: bool = Field(default=False, description="True после observe()")

    model_config = {"validate_assignment": True}

    def __setattr__(self, name: str, value: Any) -> None:
        # OBSERVED терминально: обратный переход в SUPERPOSED запрещён
        if name == "observed" and self.observed and not value:
            raise ValueError(f"DualState {self.id} is observed and cannot revert to superposed")
        super().__setattr__(name, value)

    @classmethod
    def create(
        cls,
        state_id: str,
        label: str,
        primary_value: float,
        secondary_value: float,
    ) -> "DualState":
        """
        Создание нового состояния в суперпозиции.

        Args:
            state_id: Идентификатор
            label: Тип обоих токенов
            primary_value: Магнитуда primary (matter)
            secondary_value: Магнитуда secondary (antimatter)

        Returns:
            DualState с observed=False
        """
        return cls(
            id=state_id,
            field=DualField.from_magnitudes(label, primary_value, secondary_value),
        )

    @property
    def state(self) -> StateTag:
        """Текущий тег состояния"""
        return StateTag.OBSERVED if self.observed else StateTag.SUPERPOSED

    def observe(self) -> float:
        """
        Коллапс суперпозиции.

        Переводит состояние в OBSERVED (необратимо) и возвращает
        среднее магнитуд. Coherence не читается и не изменяется.

        Returns:
            (primary.magnitude + secondary.magnitude) / 2.0
        """
        if not self.observed:
            logger.debug("DualState %s collapsed", self.id)
        self.observed = True
        return collapse_mean(self.field.primary.magnitude, self.field.secondary.magnitude)

    def measure_coherence(self) -> float:
        """Сохранённая coherence (read-only)"""
        return self.field.coherence

    def invert(self) -> None:
        """
        Инверсия: обмен primary ↔ secondary.

        Токены переставляются целиком (label и magnitude вместе).
        Флаг observed не меняется.
        """
        self.field = self.field.swapped()
        logger.debug("DualState %s inverted", self.id)

    def render(self) -> str:
        """
        Человекочитаемое многострочное представление.

        Числовые поля форматируются до 3 знаков после запятой.
        """
        primary = self.field.primary
        secondary = self.field.secondary
        return (
            f"🧊 DualState [{self.id}]\n"
            f"Type: {primary.label}\n"
            f"Matter: {primary.magnitude:.3f}\n"
            f"Antimatter: {secondary.magnitude:.3f}\n"
            f"Coherence: {self.field.coherence:.3f}\n"
            f"State: {self.state.value}"
        )

    def __str__(self) -> str:
        return self.render()

    # -------------------------------------------------------------------------
    # Snapshot (контракт contracts/schema/dual_state.json)
    # -------------------------------------------------------------------------

    def to_snapshot(self) -> Dict[str, Any]:
        """JSON-совместимый снапшот состояния"""
        return self.model_dump(mode="json")

    @classmethod
    def from_snapshot(cls, data: Dict[str, Any]) -> "DualState":
        """
        Восстановление состояния из снапшота.

        Raises:
            ValidationError: Если структура некорректна или coherence
                не соответствует магнитудам
        """
        return cls.model_validate(data)
