from fastapi import APIRouter

from chacara.core.labels import CATEGORY_LABELS, MONTH_NAMES, RECURRENCE_LABELS, URGENCY_LABELS

router = APIRouter(prefix="/meta", tags=["meta"])


@router.get("/labels")
async def get_labels() -> dict:
    return {
        "categories": CATEGORY_LABELS,
        "recurrences": RECURRENCE_LABELS,
        "urgencies": URGENCY_LABELS,
        "months": MONTH_NAMES,
    }
