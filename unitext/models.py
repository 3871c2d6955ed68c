from __future__ import annotations

import enum
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NewlineMode(str, enum.Enum):
    NONE = "none"
    LS = "LS"
    PS = "PS"
    LF = "LF"


class NormalizationFlags(BaseModel):
    """Normalization switches that can travel over the wire."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    stable: bool = False
    compat: bool = False
    compose: bool = True
    decompose: bool = False
    strip_ignorable: bool = False
    reject_unassigned: bool = False
    newline_mode: NewlineMode = NewlineMode.NONE
    strip_control: bool = False
    casefold: bool = False
    lump: bool = False
    strip_mark: bool = False


class NormalizationOptions(NormalizationFlags):
    """Immutable option record for one `normalize` call.

    `transform` maps each input code point to a replacement code point
    before it is decomposed. It may be called more than once per code point
    and must be pure.
    """

    transform: Optional[Callable[[int], int]] = Field(default=None, exclude=True)


class NormalizeRequest(BaseModel):
    text: str
    form: Optional[str] = Field(default=None, examples=["NFC"])
    options: Optional[NormalizationFlags] = None


class NormalizeResponse(BaseModel):
    text: str
    form: Optional[str] = None
    changed: bool


class NormalizedFile(BaseModel):
    text: str
    encoding: Optional[str] = None
    decode_fallback: bool = False
    sha256: str
    form: str


class GraphemesRequest(BaseModel):
    text: str


class GraphemesResponse(BaseModel):
    clusters: List[str]
    count: int


class CaseMode(str, enum.Enum):
    LOWER = "lower"
    UPPER = "upper"
    TITLE = "title"
    UPPERCASE_FIRST = "uppercase_first"
    LOWERCASE_FIRST = "lowercase_first"


class CaseRequest(BaseModel):
    text: str
    mode: CaseMode
    strict: bool = True


class CaseResponse(BaseModel):
    text: str
    mode: CaseMode


class InspectRequest(BaseModel):
    text: str


class CharInfo(BaseModel):
    char: str
    codepoint: str
    category: str
    category_label: str
    width: int
    valid: bool


class InspectResponse(BaseModel):
    chars: List[CharInfo] = Field(default_factory=list)
    graphemes: int = 0
    width: int = 0


class HealthResponse(BaseModel):
    ok: bool = True
