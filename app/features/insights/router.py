"""Insights API routes."""

from fastapi import APIRouter

from app.features.insights.routes.isp_insights import router as isp_insights_router

router = APIRouter()

router.include_router(isp_insights_router)
