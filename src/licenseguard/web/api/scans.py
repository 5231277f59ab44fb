"""REST API for scanning and policy evaluation."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from licenseguard.policy.evaluator import PolicyEvaluator
from licenseguard.scanner.engine import ScanEngine, ScanError

router = APIRouter(tags=["scans"])


class ScanRequest(BaseModel):
    root: str
    exclude: list[str] = []


@router.post("/scans")
def create_scan(body: ScanRequest, request: Request):
    config = request.app.state.config
    engine = ScanEngine(exclude_patterns=body.exclude, workers=config.workers)
    try:
        scan = engine.scan(body.root)
    except ScanError as e:
        return JSONResponse(status_code=400, content={"detail": str(e)})

    evaluator = PolicyEvaluator(
        request.app.state.policy,
        strict_expiry=config.strict_expiry,
    )
    return {
        "scan": scan.to_dict(),
        "policy": evaluator.evaluate(scan).to_dict(),
    }
