from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum, IntEnum
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, computed_field


class DieType(IntEnum):
    D4 = 4
    D6 = 6
    D8 = 8
    D10 = 10
    D12 = 12
    D20 = 20
    D100 = 100

    @property
    def label(self) -> str:
        return f"d{self.value}"

    @classmethod
    def parse(cls, value: int | str | DieType) -> DieType:
        """Accept 20, "20", "d20" or "D20"."""
        if isinstance(value, DieType):
            return value
        text = str(value).strip().lower()
        if text.startswith("d"):
            text = text[1:]
        try:
            return cls(int(text))
        except ValueError:
            raise ValueError(f"Unsupported die type: {value!r}") from None


# Accepts 20, "20", "d20" or a DieType on any model field.
ParsedDieType = Annotated[DieType, BeforeValidator(DieType.parse)]


class RollMode(str, Enum):
    NORMAL = "normal"
    ADVANTAGE = "advantage"
    DISADVANTAGE = "disadvantage"


class RollSpecification(BaseModel):
    model_config = ConfigDict(frozen=True)

    die_type: ParsedDieType
    count: int = Field(default=1, ge=1)
    modifier: int = 0
    mode: RollMode = RollMode.NORMAL
    label: Optional[str] = None

    @property
    def notation(self) -> str:
        from roll_with_it.mechanics.dice import format_notation

        return format_notation(self.die_type, self.count, self.modifier)


class RollOutcome(BaseModel):
    """Result of a single evaluation. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    die_type: ParsedDieType
    count: int
    modifier: int = 0
    mode: RollMode = RollMode.NORMAL
    kept_values: tuple[int, ...]
    discarded_values: tuple[int, ...] = ()
    label: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @computed_field
    @property
    def sum(self) -> int:
        return sum(self.kept_values)

    @computed_field
    @property
    def total(self) -> int:
        return self.sum + self.modifier

    @property
    def notation(self) -> str:
        from roll_with_it.mechanics.dice import format_notation

        return format_notation(self.die_type, self.count, self.modifier)

    @property
    def is_critical(self) -> bool:
        return self.die_type is DieType.D20 and 20 in self.kept_values

    @property
    def is_fumble(self) -> bool:
        return self.die_type is DieType.D20 and 1 in self.kept_values
