"""Application configuration."""

import os
from pathlib import Path
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENV", "production")

DEFAULT_DATA_FILE_NAME = "foundationfoods_2025-04-24.json"

# Returned by the simplified search when the caller does not pick nutrients.
DEFAULT_NUTRIENTS: tuple[str, ...] = (
    "Energy",
    "Protein",
    "Total lipid (fat)",
    "Fatty acids, total saturated",
    "Fatty acids, total monounsaturated",
    "Fatty acids, total polyunsaturated",
    "Fatty acids, total trans",
    "Cholesterol",
    "Carbohydrate, by difference",
    "Fiber, total dietary",
    "Sugars, Total",
    "Total Sugars",
    "Water",
    "Vitamin A, RAE",
    "Vitamin C, total ascorbic acid",
    "Vitamin D (D2 + D3)",
    "Vitamin E (alpha-tocopherol)",
    "Vitamin K (phylloquinone)",
    "Thiamin",
    "Riboflavin",
    "Niacin",
    "Vitamin B-6",
    "Folate, total",
    "Vitamin B-12",
    "Calcium, Ca",
    "Iron, Fe",
    "Magnesium, Mg",
    "Phosphorus, P",
    "Potassium, K",
    "Sodium, Na",
    "Zinc, Zn",
    "Copper, Cu",
    "Selenium, Se",
    "PUFA 18:2",
    "PUFA 18:3",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    auth_token: str = Field(
        default="super-secret-token",
        validation_alias=AliasChoices("FOUNDATIONFOODS_MCP_TOKEN", "auth_token"),
    )
    data_dir: Path = Path("./data")
    foundation_foods_json_file: Path | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "FOUNDATIONFOODS_JSON_FILE", "foundation_foods_json_file"
        ),
    )
    host: str = "0.0.0.0"
    port: int = 8080
    environment: str = Field(
        default=_ENVIRONMENT, validation_alias=AliasChoices("ENV", "environment")
    )
    log_level: str | None = None
    default_nutrients: Annotated[tuple[str, ...], NoDecode] = DEFAULT_NUTRIENTS

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("default_nutrients", mode="before")
    @classmethod
    def _split_nutrients(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_nutrient_list(value)
        return value

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def data_file(self) -> Path:
        """Resolved dataset path."""
        if self.foundation_foods_json_file is not None:
            return self.foundation_foods_json_file
        return self.data_dir / DEFAULT_DATA_FILE_NAME

    @property
    def resolved_log_level(self) -> str:
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.is_development else "INFO"


def parse_nutrient_list(raw: str) -> tuple[str, ...]:
    """Parse a semicolon separated nutrient list.

    Nutrient names themselves contain commas ("Calcium, Ca"), so commas are
    part of the name.
    """
    return tuple(chunk.strip() for chunk in raw.split(";") if chunk.strip())
