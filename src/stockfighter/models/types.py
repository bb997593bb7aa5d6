"""Shared field types."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictInt

U64_MAX = 2**64 - 1

# Unsigned 64-bit integer. Python ints are unbounded, so the range is explicit.
U64 = Annotated[int, Field(ge=0, le=U64_MAX)]

# Same range, but rejects bools, floats and numeric strings on input.
StrictU64 = Annotated[StrictInt, Field(ge=0, le=U64_MAX)]
