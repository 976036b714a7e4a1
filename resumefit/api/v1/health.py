from fastapi import APIRouter

from resumefit.ai.config import load_ai_config
from resumefit.ai.factory import get_enricher

router = APIRouter()


def _enrichment_status() -> str:
    try:
        enricher = get_enricher()
    except (ValueError, RuntimeError):
        return "misconfigured"
    if enricher is None:
        return "disabled"
    return load_ai_config().provider


@router.get("/health", summary="Health Check", description="Service status and the active enrichment provider.")
async def health_check():
    return {"status": "healthy", "enrichment": _enrichment_status()}
