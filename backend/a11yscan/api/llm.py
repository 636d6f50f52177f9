import logging
import uuid
from typing import Dict, List, Any, Optional
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from openai import OpenAI

from a11yscan.core.config import get_settings

logger = logging.getLogger(__name__)

# ---- In-memory session store; sessions do not survive a restart.
_SESSIONS: Dict[str, List[Dict[str, str]]] = {}

_client: Optional[OpenAI] = None

def get_client() -> OpenAI:
    """OpenAI client, created on first use so the scanner runs without an API key."""
    global _client
    if _client is None:
        api_key = get_settings().openai_api_key
        if not api_key:
            raise HTTPException(status_code=503, detail="OPENAI_API_KEY not set; remediation assistant disabled.")
        _client = OpenAI(api_key=api_key)
    return _client

router = APIRouter(prefix="/llm", tags=["llm"])

# ---- Request models
class BootRequest(BaseModel):
    scan: Dict[str, Any]                      # a ScanResult as returned by POST /scan
    model: Optional[str] = None

class MessageRequest(BaseModel):
    session_id: str
    user_message: str
    model: Optional[str] = None

SYSTEM_PROMPT = """You are a practical *web accessibility remediation assistant*.
Constraints:
- Ground every answer in WCAG 2.x success criteria; cite the criterion number.
- Prefer the smallest markup change that fixes the issue (alt text, labels, landmarks, heading levels, ARIA only when native HTML cannot do it).
- For each suggestion, include a short rationale and a *verification step* (re-scan, keyboard-only check, or screen reader check).
- Be concise; show a minimal HTML/CSS snippet.
- If the user provides markup, return a unified diff when useful.
- If information is insufficient, ask one specific question at a time.
"""

def _scan_context_summary(scan: Dict[str, Any]) -> str:
    url = scan.get("url", "(unknown)")
    score = scan.get("score", "?")
    issues = scan.get("issues") or []
    summary = scan.get("summary") or {}
    lines = [
        f"Page: {url}",
        f"Score: {score}",
        f"Critical: {summary.get('critical', 0)}, warnings: {summary.get('warning', 0)}, info: {summary.get('info', 0)}",
        f"Issues ({len(issues)}):",
    ]
    for i in issues[:15]:  # cap
        ref = f" [{i.get('wcag_reference')}]" if i.get("wcag_reference") else ""
        lines.append(f"- {i.get('rule_id')} ({i.get('severity')}){ref}: {i.get('description')}")
    if len(issues) > 15:
        lines.append(f"... and {len(issues)-15} more")
    return "\n".join(lines)

def _complete(messages: List[Dict[str, str]], model: Optional[str]) -> str:
    try:
        resp = get_client().chat.completions.create(
            model=model or get_settings().openai_model,
            messages=messages,
            temperature=0.3,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.warning("OpenAI request failed: %r", e)
        raise HTTPException(status_code=502, detail=f"OpenAI error: {e}")
    return resp.choices[0].message.content

@router.post("/session")
def boot_session(body: BootRequest):
    """
    Create a chat session seeded with the scan result and return the
    assistant's opening message asking which issue to fix first.
    """
    if body.scan.get("success") is False:
        raise HTTPException(status_code=400, detail="Cannot start a session from a failed scan.")

    session_id = str(uuid.uuid4())
    messages: List[Dict[str, str]] = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": f"Here is the latest accessibility scan.\n\n{_scan_context_summary(body.scan)}\n\n"
                       f"You have all the evidence in memory. Do not ask me to paste it again."
        },
    ]

    first = _complete(
        messages + [
            {
                "role": "user",
                "content": (
                    "Greet the user briefly, then ask which issue they would like to fix first. "
                    "Offer a short numbered list of the current issues, critical ones first. "
                    "Remind them they can paste the relevant markup for a tailored fix."
                )
            }
        ],
        body.model,
    )

    messages.append({"role": "assistant", "content": first})
    _SESSIONS[session_id] = messages
    return {"session_id": session_id, "messages": messages, "first": first}

@router.post("/message")
def chat_message(body: MessageRequest):
    """Continue a session with the user's next message."""
    if body.session_id not in _SESSIONS:
        raise HTTPException(status_code=404, detail="Unknown session_id")
    thread = _SESSIONS[body.session_id]

    user_turn = {"role": "user", "content": body.user_message}
    reply = _complete(thread + [user_turn], body.model)

    thread.extend([user_turn, {"role": "assistant", "content": reply}])
    return {"session_id": body.session_id, "messages": thread, "reply": reply}
