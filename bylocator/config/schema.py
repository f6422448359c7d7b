from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from bylocator.core.locator import By
from bylocator.core.serializer import WireDialect
from bylocator.core.strategy import Strategy


class FinderSettings(BaseModel):
    default_timeout_seconds: float = Field(default=0, ge=0)
    poll_interval_seconds: float = Field(default=0.2, gt=0)
    wire_dialect: WireDialect = WireDialect.STRICT
    audit_root: str | None = None


class LocatorSpec(BaseModel):
    strategy: Strategy
    value: str

    @field_validator("strategy", mode="before")
    @classmethod
    def parse_strategy(cls, value) -> Strategy:
        return Strategy.parse(value)

    def to_locator(self) -> By:
        return By.using(self.strategy, self.value)


class LocatorDefinition(LocatorSpec):
    key: str
    fallbacks: list[LocatorSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_locators(self) -> LocatorDefinition:
        # Construction errors surface here, when the catalog is loaded.
        self.to_locators()
        return self

    def to_locators(self) -> list[By]:
        return [self.to_locator(), *(item.to_locator() for item in self.fallbacks)]


class LocatorCatalog(BaseModel):
    settings: FinderSettings = Field(default_factory=FinderSettings)
    locators: list[LocatorDefinition] = Field(default_factory=list)

    @field_validator("locators")
    @classmethod
    def validate_unique_keys(cls, value: list[LocatorDefinition]) -> list[LocatorDefinition]:
        seen: set[str] = set()
        duplicates: set[str] = set()
        for item in value:
            if item.key in seen:
                duplicates.add(item.key)
            seen.add(item.key)
        if duplicates:
            raise ValueError(f"Duplicate locator keys: {', '.join(sorted(duplicates))}")
        return value

    def get_element(self, key: str) -> LocatorDefinition:
        for definition in self.locators:
            if definition.key == key:
                return definition
        raise KeyError(f"Unknown element key: {key}")

    def locator(self, key: str) -> By:
        return self.get_element(key).to_locator()

    def candidates(self, key: str) -> list[By]:
        return self.get_element(key).to_locators()
