"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import auth, health, meals, menu_requests, reviews, upload

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(meals.router, prefix="/meals", tags=["meals"])
router.include_router(reviews.router, prefix="/reviews", tags=["reviews"])
router.include_router(menu_requests.router, prefix="/menu-requests", tags=["menu-requests"])
router.include_router(upload.router, prefix="/upload", tags=["upload"])
