"""Converter configuration.

BeanConverterConfig is a frozen Pydantic model; one instance is fixed per
BeanConverter, so cached copy plans never go stale.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BeanConverterConfig(BaseModel):
    """Property pairing options for a BeanConverter."""

    model_config = ConfigDict(frozen=True)

    exclude: frozenset[str] = frozenset()
    aliases: dict[str, str] = Field(default_factory=dict)  # source name -> target name
    include_private: bool = False

    @field_validator("aliases")
    @classmethod
    def _targets_unique(cls, value: dict[str, str]) -> dict[str, str]:
        targets = list(value.values())
        duplicates = sorted({name for name in targets if targets.count(name) > 1})
        if duplicates:
            raise ValueError(f"aliases map several source properties onto {duplicates}")
        return value

    def target_name(self, source_name: str) -> str:
        """Target property name a source property is copied into."""
        return self.aliases.get(source_name, source_name)
