"""
Option Schemas

pydantic models for options crossing the service boundary: OptionParam for
incoming key/value pairs, OptionOutput for display.
"""

from pydantic import BaseModel, ConfigDict, Field


class OptionParam(BaseModel):
    """A key/value pair submitted for saving."""
    option_key: str = Field(min_length=1, max_length=100)
    option_value: str = Field(default='', max_length=1023)


class OptionOutput(BaseModel):
    """Read-only projection of an Option for the presentation layer."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    option_key: str
    option_value: str
