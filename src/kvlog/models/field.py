"""Pydantic model for a single key/value(s) record of a log entry."""

from __future__ import annotations

from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from kvlog.render.values import render_value, sanitize_key

# loguru substitutes positional ``{}`` placeholders with str.format.
DEFAULT_TEMPLATE = "{}"


class LogField(BaseModel):
    """One ``key="template"`` segment plus the values that fill its placeholders.

    Fields are frozen once built so builders can share them freely. The raw
    key is kept as given; sanitizing and the empty-key filter only happen when
    the entry is rendered.
    """

    model_config = ConfigDict(frozen=True)

    key: str | None = None
    template: str = DEFAULT_TEMPLATE
    values: Tuple[Any, ...] = ()

    @field_validator("template", mode="before")
    @classmethod
    def default_template(cls, value: Any) -> Any:
        return DEFAULT_TEMPLATE if value is None else value

    @field_validator("values", mode="before")
    @classmethod
    def default_values(cls, value: Any) -> Any:
        return () if value is None else tuple(value)

    @classmethod
    def single(cls, key: str | None, value: Any) -> "LogField":
        """Field holding exactly one value under the default template."""

        return cls(key=key, values=(value,))

    @property
    def clean_key(self) -> str:
        return sanitize_key(self.key)

    @property
    def is_renderable(self) -> bool:
        return bool(self.clean_key)

    def format_segment(self) -> str:
        return f'{self.clean_key}="{self.template}"'

    def rendered_values(self) -> List[str]:
        return [render_value(value) for value in self.values]
