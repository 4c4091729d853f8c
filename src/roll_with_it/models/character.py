from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Ability(str, Enum):
    STRENGTH = "strength"
    DEXTERITY = "dexterity"
    CONSTITUTION = "constitution"
    INTELLIGENCE = "intelligence"
    WISDOM = "wisdom"
    CHARISMA = "charisma"

    @property
    def abbreviation(self) -> str:
        return self.value[:3].upper()


class AbilityScores(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    strength: int = 10
    dexterity: int = 10
    constitution: int = 10
    intelligence: int = 10
    wisdom: int = 10
    charisma: int = 10

    def score(self, ability: Ability | str) -> int:
        return getattr(self, Ability(ability).value)


class Denomination(str, Enum):
    COPPER = "cp"
    SILVER = "sp"
    GOLD = "gp"
    PLATINUM = "pp"

    @classmethod
    def parse(cls, value: str | Denomination) -> Denomination:
        """Accept either the abbreviation ("gp") or the full name ("gold")."""
        if isinstance(value, Denomination):
            return value
        text = value.strip().lower()
        for denom in cls:
            if text in (denom.value, denom.name.lower()):
                return denom
        raise ValueError(f"Unknown denomination: {value!r}")


class Currency(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    pp: int = 0
    gp: int = 0
    sp: int = 0
    cp: int = 0


class InventoryItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    quantity: int = 1
    weight: float | None = None
