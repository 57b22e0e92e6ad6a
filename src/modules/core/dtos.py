"""Field types shared by the module DTOs."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

# Identities are signed 64-bit surrogate keys (BigAutoField).
MAX_ID = 2**63 - 1

EntityId = Annotated[int, Field(gt=0, le=MAX_ID)]
