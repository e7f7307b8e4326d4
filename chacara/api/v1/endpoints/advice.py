from fastapi import APIRouter

from chacara.core.deps import AdvisorDep
from chacara.schemas.advice import AdviceAnswer, AdviceQuery

router = APIRouter(prefix="/advice", tags=["advice"])


@router.post("", response_model=AdviceAnswer)
async def ask_advice(data: AdviceQuery, advisor: AdvisorDep):
    return AdviceAnswer(answer=await advisor.ask(data.query))
