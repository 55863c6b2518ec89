"""
API routes for the rent-or-buy calculator.
"""

from fastapi import APIRouter

from app.api import calculations

router = APIRouter()

router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
