from fastapi import APIRouter

from app.api.schemas import LeadRequest, LeadResponse
from app.leads.capture import capture_lead

router = APIRouter(prefix="/api", tags=["lead"])


@router.post("/lead", response_model=LeadResponse)
def lead(payload: LeadRequest) -> LeadResponse:
    capture_lead(payload.email, ts=payload.ts, ua=payload.ua)
    return LeadResponse(ok=True)
