from fastapi import APIRouter

from .health import health_router
from .emotion import emotion_router
from .transaction import transaction_router
from .finance import finance_router
from .debts import debt_router
from .savings import savings_router
from .advisor import advisor_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(emotion_router, tags=["Emotion"])
router.include_router(transaction_router, tags=["Transactions"])
router.include_router(finance_router, tags=["Finance"])
router.include_router(debt_router, tags=["Debts"])
router.include_router(savings_router, tags=["Savings"])
router.include_router(advisor_router, tags=["Advisor"])
