import logging

from fastapi import FastAPI, UploadFile, File, Form, HTTPException

from .case import lowercase, lowercase_first, uppercase, uppercase_first
from .chars import category_abbrev, category_string, char_width, text_width
from .errors import ConfigurationError, NormalizationError
from .graphemes import graphemes
from .models import (
    CaseMode,
    CaseRequest,
    CaseResponse,
    CharInfo,
    GraphemesRequest,
    GraphemesResponse,
    HealthResponse,
    InspectRequest,
    InspectResponse,
    NormalizedFile,
    NormalizeRequest,
    NormalizeResponse,
    NormalizationOptions,
)
from .normalize import decode_bytes, normalize, sha256_hex
from .rules import DEFAULT_FORM, MAX_UPLOAD_BYTES
from .titlecase import titlecase
from .validate import is_valid

logger = logging.getLogger(__name__)

app = FastAPI(
    title="unitext",
    description="Unicode normalization, case conversion and grapheme segmentation",
    version="0.1.0",
)

_CASE_MODES = {
    CaseMode.LOWER: lowercase,
    CaseMode.UPPER: uppercase,
    CaseMode.UPPERCASE_FIRST: uppercase_first,
    CaseMode.LOWERCASE_FIRST: lowercase_first,
}


def _normalize_or_raise(text: str, form=None, options=None) -> str:
    try:
        if options is not None:
            return normalize(text, options=NormalizationOptions(**options.model_dump()))
        return normalize(text, form or DEFAULT_FORM)
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except NormalizationError as e:
        logger.warning("normalization failed: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/normalize", response_model=NormalizeResponse)
def normalize_text(req: NormalizeRequest):
    if req.form is not None and req.options is not None:
        raise HTTPException(status_code=422, detail="Give either a form or options, not both")

    out = _normalize_or_raise(req.text, req.form, req.options)
    form = None if req.options is not None else (req.form or DEFAULT_FORM)
    return {"text": out, "form": form, "changed": out != req.text}


@app.post("/normalize/file", response_model=NormalizedFile)
async def normalize_file(file: UploadFile = File(...), form: str = Form(DEFAULT_FORM)):
    raw = await file.read()
    if len(raw) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large")

    text, report = decode_bytes(raw)
    out = _normalize_or_raise(text, form)
    return {
        "text": out,
        "encoding": report["decode_used"],
        "decode_fallback": report["decode_fallback"],
        "sha256": sha256_hex(out),
        "form": form,
    }


@app.post("/graphemes", response_model=GraphemesResponse)
def split_graphemes(req: GraphemesRequest):
    # a comprehension does not ask __len__ for a size, so the text is scanned once
    clusters = [c for c in graphemes(req.text)]
    return {"clusters": clusters, "count": len(clusters)}


@app.post("/case", response_model=CaseResponse)
def convert_case(req: CaseRequest):
    if req.mode == CaseMode.TITLE:
        out = titlecase(req.text, strict=req.strict)
    else:
        out = _CASE_MODES[req.mode](req.text)
    return {"text": out, "mode": req.mode}


@app.post("/inspect", response_model=InspectResponse)
def inspect_text(req: InspectRequest):
    chars = [
        CharInfo(
            char=c,
            codepoint=f"U+{ord(c):04X}",
            category=category_abbrev(c),
            category_label=category_string(c),
            width=char_width(c),
            valid=is_valid(c),
        )
        for c in req.text
    ]
    return {"chars": chars, "graphemes": len(graphemes(req.text)), "width": text_width(req.text)}
