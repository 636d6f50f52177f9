from typing import Literal, List, Optional
from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["critical", "warning", "info"]

class Issue(BaseModel):
    model_config = ConfigDict(frozen=True)

    rule_id: str = Field(min_length=1)
    severity: Severity
    description: str
    element_snippet: Optional[str] = None
    wcag_reference: str = ""

class Summary(BaseModel):
    model_config = ConfigDict(frozen=True)

    critical: int = 0
    warning: int = 0
    info: int = 0

class ScanResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    url: str
    issues: Optional[List[Issue]] = None
    summary: Optional[Summary] = None
    score: Optional[int] = Field(default=None, ge=0, le=100)
    error: Optional[str] = None

class ContrastResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    foreground: str
    background: str
    ratio: float
    wcag_aa_normal: bool
    wcag_aa_large: bool
    wcag_aaa_normal: bool
    wcag_aaa_large: bool
    recommendation: str

class RuleInfo(BaseModel):
    id: str
    title: str
    severity: Severity
    wcag_reference: str

# ---- Image alt-text inventory
class ImageAltEntry(BaseModel):
    src: str
    alt: Optional[str] = None
    status: Literal["ok", "empty", "missing"]

class ImageAltSummary(BaseModel):
    total: int
    has_alt: int
    missing: int
    empty: int
    compliance_rate: float

class ImageAltReport(BaseModel):
    url: str
    images: List[ImageAltEntry] = Field(default_factory=list)
    summary: ImageAltSummary

# ---- Request bodies
class ScanRequest(BaseModel):
    url: Optional[str] = None
    markup: Optional[str] = None
    timeout_ms: Optional[int] = Field(default=None, gt=0)
    disabled_rules: List[str] = Field(default_factory=list)

class BatchScanRequest(BaseModel):
    urls: List[str] = Field(min_length=1)
    timeout_ms: Optional[int] = Field(default=None, gt=0)

class ContrastRequest(BaseModel):
    foreground: str
    background: str

class AltReportRequest(BaseModel):
    url: Optional[str] = None
    markup: Optional[str] = None
    timeout_ms: Optional[int] = Field(default=None, gt=0)
