import logging
from typing import List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from a11yscan.core.config import get_settings
from a11yscan.core.contrast import check_contrast
from a11yscan.core.engine import CHECKS, run_alt_report, run_scan, scan_many
from a11yscan.core.exceptions import A11yScanError
from a11yscan.core.logging import setup_logging
from a11yscan.models.schemas import (
    AltReportRequest,
    BatchScanRequest,
    ContrastRequest,
    ContrastResult,
    ImageAltReport,
    RuleInfo,
    ScanRequest,
    ScanResult,
)
from a11yscan.api.llm import router as llm_router

settings = get_settings()
setup_logging(settings)
logger = logging.getLogger(__name__)

app = FastAPI(title="A11yScan API", version=settings.app_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(A11yScanError)
async def scan_error_handler(request: Request, exc: A11yScanError):
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.error_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

@app.get("/health")
def health():
    return {"status": "ok"}

@app.get("/rules", response_model=List[RuleInfo])
def list_rules():
    return [
        RuleInfo(id=c.key, title=c.title, severity=c.severity, wcag_reference=c.wcag_reference)
        for c in CHECKS
    ]

_LAST_SCAN: ScanResult | None = None

@app.post("/scan", response_model=ScanResult, response_model_exclude_none=True)
async def start_scan(req: ScanRequest):
    global _LAST_SCAN
    _LAST_SCAN = await run_scan(
        url=req.url,
        markup=req.markup,
        timeout_ms=req.timeout_ms or settings.fetch_timeout_ms,
        disabled_rules=req.disabled_rules or settings.disabled_rules,
        user_agent=settings.user_agent,
        max_redirects=settings.max_redirects,
    )
    return _LAST_SCAN

@app.get("/scan/last", response_model=ScanResult, response_model_exclude_none=True)
async def last_scan():
    if _LAST_SCAN is None:
        return JSONResponse(status_code=404, content={"error": "No scan data"})
    return _LAST_SCAN

@app.post("/scan/batch", response_model=List[ScanResult], response_model_exclude_none=True)
async def batch_scan(req: BatchScanRequest):
    return await scan_many(
        req.urls,
        concurrency=settings.batch_concurrency,
        timeout_ms=req.timeout_ms or settings.fetch_timeout_ms,
        disabled_rules=settings.disabled_rules,
        user_agent=settings.user_agent,
        max_redirects=settings.max_redirects,
    )

@app.post("/contrast", response_model=ContrastResult)
def contrast(req: ContrastRequest):
    return check_contrast(req.foreground, req.background)

@app.post("/images/alt-report", response_model=ImageAltReport)
async def alt_report(req: AltReportRequest):
    return await run_alt_report(
        url=req.url,
        markup=req.markup,
        timeout_ms=req.timeout_ms or settings.fetch_timeout_ms,
        user_agent=settings.user_agent,
        max_redirects=settings.max_redirects,
    )

# remediation assistant
app.include_router(llm_router)
