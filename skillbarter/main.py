# skillbarter/main.py - application entry point
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from skillbarter.config import settings
from skillbarter.api import match, profile, reward, skill, swap

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Initialize FastAPI app. The schema lives in the hosted database,
# so no tables are created here.
app = FastAPI(title="SkillBarter API")

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routers
app.include_router(match.router)   # /matches/*
app.include_router(swap.router)    # /swaps/*
app.include_router(reward.router)  # /rewards/*
app.include_router(skill.router)   # /skills/*
app.include_router(profile.router) # /profile/*


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "SkillBarter API is running",
        "version": "0.1.0",
    }
