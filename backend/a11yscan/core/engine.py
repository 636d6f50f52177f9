import asyncio
import enum
import logging
from typing import Dict, Iterable, List, Optional

import httpx

from a11yscan.checks.base import Check
from a11yscan.checks.images import ImgAltCheck, ImgAltEmptyCheck, ImgLinkAltCheck, alt_text_report
from a11yscan.checks.headings import (
    HeadingH1Check,
    HeadingH1MultipleCheck,
    HeadingOrderCheck,
    HeadingEmptyCheck,
)
from a11yscan.checks.links import LinkNameCheck, LinkTextGenericCheck, LinkNewWindowCheck
from a11yscan.checks.forms import FormLabelCheck, ButtonNameCheck
from a11yscan.checks.tables import TableHeadersCheck, TableCaptionCheck
from a11yscan.checks.structure import (
    HtmlLangCheck,
    HtmlLangValidCheck,
    LandmarkMainCheck,
    LandmarkMainMultipleCheck,
    LandmarkNavCheck,
    SkipLinkCheck,
)
from a11yscan.checks.styles import FocusVisibleCheck, ColorAloneCheck
from a11yscan.core.document import Document, parse
from a11yscan.core.exceptions import FetchError, ValidationError
from a11yscan.core.http import DEFAULT_TIMEOUT_MS, MAX_REDIRECTS, client_for, fetch
from a11yscan.core.config import DEFAULT_UA
from a11yscan.models.schemas import ImageAltReport, Issue, ScanResult, Summary

logger = logging.getLogger(__name__)

INLINE_URL = "<inline>"

# Execution order is the order issues are reported in.
CHECKS: tuple = (
    ImgAltCheck(),
    ImgAltEmptyCheck(),
    ImgLinkAltCheck(),
    HeadingH1Check(),
    HeadingH1MultipleCheck(),
    HeadingOrderCheck(),
    HeadingEmptyCheck(),
    LinkNameCheck(),
    LinkTextGenericCheck(),
    LinkNewWindowCheck(),
    FormLabelCheck(),
    ButtonNameCheck(),
    TableHeadersCheck(),
    TableCaptionCheck(),
    HtmlLangCheck(),
    HtmlLangValidCheck(),
    LandmarkMainCheck(),
    LandmarkMainMultipleCheck(),
    LandmarkNavCheck(),
    SkipLinkCheck(),
    FocusVisibleCheck(),
    ColorAloneCheck(),
)

CHECKS_BY_KEY: Dict[str, Check] = {c.key: c for c in CHECKS}


class ScanState(str, enum.Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    PARSING = "parsing"
    EVALUATING = "evaluating"
    DONE = "done"
    FAILED = "failed"


def select_checks(disabled: Optional[Iterable[str]] = None) -> List[Check]:
    disabled_set = set(disabled or [])
    unknown = sorted(disabled_set - CHECKS_BY_KEY.keys())
    if unknown:
        raise ValidationError(f"Unknown rule id(s): {', '.join(unknown)}", field="disabled_rules", rules=unknown)
    return [c for c in CHECKS if c.key not in disabled_set]


def summarize(issues: List[Issue]) -> Summary:
    return Summary(
        critical=sum(1 for i in issues if i.severity == "critical"),
        warning=sum(1 for i in issues if i.severity == "warning"),
        info=sum(1 for i in issues if i.severity == "info"),
    )


def score_from(summary: Summary) -> int:
    score = 100
    score -= summary.critical * 15
    score -= summary.warning * 5
    score -= summary.info * 1
    return max(score, 0)


def evaluate(doc: Document, checks: Optional[Iterable[Check]] = None) -> List[Issue]:
    """Run checks in order over a parsed document and concatenate their issues."""
    issues: List[Issue] = []
    for check in (CHECKS if checks is None else checks):
        try:
            issues.extend(check.run(doc))
        except Exception:
            # a broken rule must not sink the scan; it is logged, not reported
            logger.exception("Rule %s failed; skipping", check.key)
    return issues


def _enter(state: ScanState, url: str) -> None:
    logger.debug("%s -> %s", url, state.value)


def _validate_target(url: Optional[str], markup: Optional[str]) -> None:
    if (url is None) == (markup is None):
        raise ValidationError("Exactly one of url or markup must be provided", field="url")
    if url is not None and not url.strip():
        raise ValidationError("url must not be empty", field="url")


def _result(url: str, issues: List[Issue]) -> ScanResult:
    summary = summarize(issues)
    return ScanResult(success=True, url=url, issues=issues, summary=summary, score=score_from(summary))


async def run_scan(
    url: Optional[str] = None,
    markup: Optional[str] = None,
    timeout_ms: Optional[int] = None,
    disabled_rules: Optional[Iterable[str]] = None,
    user_agent: str = DEFAULT_UA,
    max_redirects: int = MAX_REDIRECTS,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ScanResult:
    """
    Scan a page given either its URL or its markup.

    Raises ValidationError for caller misuse. A failed fetch is not raised:
    it comes back as ScanResult(success=False, error=...).
    """
    _validate_target(url, markup)
    checks = select_checks(disabled_rules)
    timeout_ms = timeout_ms or DEFAULT_TIMEOUT_MS

    if url is not None:
        logger.info("Scanning %s", url)
        _enter(ScanState.FETCHING, url)
        try:
            async with client_for(timeout_ms, user_agent, max_redirects, transport) as client:
                markup = await fetch(client, url, timeout_ms)
        except FetchError as e:
            _enter(ScanState.FAILED, url)
            logger.warning("Scan of %s failed: %s", url, e.message)
            return ScanResult(success=False, url=url, error=e.message)
    else:
        url = INLINE_URL

    _enter(ScanState.PARSING, url)
    doc = parse(markup)

    _enter(ScanState.EVALUATING, url)
    issues = evaluate(doc, checks)

    result = _result(url, issues)
    _enter(ScanState.DONE, url)
    logger.info(
        "Scan of %s done: %d critical, %d warning, %d info, score %d",
        url, result.summary.critical, result.summary.warning, result.summary.info, result.score,
    )
    return result


async def scan_many(
    urls: List[str],
    concurrency: int = 4,
    timeout_ms: Optional[int] = None,
    **options,
) -> List[ScanResult]:
    """
    Scan several URLs with at most `concurrency` fetches in flight. Results keep input order.

    Every target is validated before the first fetch starts, so a bad entry
    rejects the batch up front instead of leaving sibling scans running.
    """
    if concurrency < 1:
        raise ValidationError("concurrency must be at least 1", field="concurrency")
    for index, target in enumerate(urls):
        if not isinstance(target, str) or not target.strip():
            raise ValidationError(f"urls[{index}] must be a non-empty URL", field="urls", index=index)
    select_checks(options.get("disabled_rules"))
    sem = asyncio.Semaphore(concurrency)

    async def _one(target: str) -> ScanResult:
        async with sem:
            return await run_scan(url=target, timeout_ms=timeout_ms, **options)

    results = await asyncio.gather(*[_one(u) for u in urls], return_exceptions=True)
    for outcome in results:
        if isinstance(outcome, BaseException):
            raise outcome
    return list(results)


async def run_alt_report(
    url: Optional[str] = None,
    markup: Optional[str] = None,
    timeout_ms: Optional[int] = None,
    user_agent: str = DEFAULT_UA,
    max_redirects: int = MAX_REDIRECTS,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ImageAltReport:
    """Image alt-text inventory for one page. Unlike run_scan, fetch failures raise FetchError."""
    _validate_target(url, markup)
    timeout_ms = timeout_ms or DEFAULT_TIMEOUT_MS
    if url is not None:
        async with client_for(timeout_ms, user_agent, max_redirects, transport) as client:
            markup = await fetch(client, url, timeout_ms)
    else:
        url = INLINE_URL
    return alt_text_report(parse(markup), url)
