"""Pydantic schemas for runtime validation of build inputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from icon_source_builder.types import OptionValue


def _require_text(value: str, label: str) -> str:
    stripped = value.strip()
    if not stripped:
        raise ValueError(f"{label} cannot be empty.")
    return stripped


class BuildConfig(BaseModel):
    """Validated input for a single build run."""

    model_config = ConfigDict(extra="forbid")

    icons: str
    worker_name: str = "echo"
    worker_modules: list[str] = Field(default_factory=list)
    options: dict[str, object] = Field(default_factory=dict)

    @field_validator("icons")
    @classmethod
    def _validate_icons(cls, value: str) -> str:
        return _require_text(value, "icon source reference")

    @field_validator("worker_name")
    @classmethod
    def _validate_worker_name(cls, value: str) -> str:
        return _require_text(value, "worker name")


class IconSourceReference(BaseModel):
    """Parsed ``module:attribute`` reference to an icon mapping."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: str
    attribute: str = "icons"

    @field_validator("target", "attribute")
    @classmethod
    def _validate_parts(cls, value: str) -> str:
        return _require_text(value, "icon source reference part")


class SvgWorkerOptions(BaseModel):
    """Validated options for the built-in ``svg`` worker."""

    model_config = ConfigDict(extra="ignore", strict=True)

    width: int = Field(default=24, gt=0)
    height: int = Field(default=24, gt=0)
    stroke_width: int | float = Field(default=2, gt=0)
    class_prefix: str = "feather"
    attrs: dict[str, str] | None = None

    @field_validator("attrs", mode="before")
    @classmethod
    def _normalize_attrs(cls, value: OptionValue) -> dict[str, str] | None:
        if value is None:
            return None
        if not isinstance(value, dict):
            raise ValueError("attrs must be a mapping.")
        return {str(key): str(item) for key, item in value.items()}


class PythonModuleWorkerOptions(BaseModel):
    """Validated options for the built-in ``python-module`` worker."""

    model_config = ConfigDict(extra="ignore", strict=True)

    variable: str = "ICONS"
    docstring: str | None = "Generated icon definitions."

    @field_validator("variable")
    @classmethod
    def _validate_variable(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError("variable must be a valid Python identifier.")
        return value
