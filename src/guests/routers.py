from fastapi import APIRouter

from .features.find_party.router import router as find_party_router
from .features.submit_rsvp.router import router as submit_rsvp_router

router = APIRouter()

router.include_router(find_party_router)
router.include_router(submit_rsvp_router)
