from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from confstore.types.duration import TimeUnit

DEFAULT_TRUE_TOKENS = frozenset({"true", "yes", "on", "y", "t", "1"})
DEFAULT_FALSE_TOKENS = frozenset({"false", "no", "off", "n", "f", "0"})


class StoreSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    list_delimiter: str = Field(
        default=",", min_length=1, max_length=1, description="separator for string arrays"
    )
    trim_list_elements: bool = Field(
        default=True, description="strip whitespace around string array elements"
    )
    true_tokens: frozenset[str] = Field(
        default=DEFAULT_TRUE_TOKENS, description="case-insensitive tokens read as True"
    )
    false_tokens: frozenset[str] = Field(
        default=DEFAULT_FALSE_TOKENS, description="case-insensitive tokens read as False"
    )
    default_duration_unit: TimeUnit = Field(
        default=TimeUnit.MILLISECONDS, description="unit for durations stored without one"
    )

    @field_validator("true_tokens", "false_tokens")
    @classmethod
    def _lower_tokens(cls, tokens: frozenset[str]) -> frozenset[str]:
        lowered = frozenset(token.strip().lower() for token in tokens)
        if not lowered or "" in lowered:
            raise ValueError("boolean tokens must be non-empty strings")
        return lowered

    @model_validator(mode="after")
    def _disjoint_tokens(self) -> "StoreSettings":
        overlap = self.true_tokens & self.false_tokens
        if overlap:
            raise ValueError(f"tokens cannot be both true and false: {sorted(overlap)}")
        return self
