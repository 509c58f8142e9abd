"""
Static 90s content endpoints.
"""

import random

from fastapi import APIRouter

from app.data.nineties import NINETIES_DATA
from app.models.schemas import Movie, RandomPick, Song
from app.utils.helpers import now_iso

router = APIRouter()


@router.get("")
async def welcome():
    """Welcome message with every movie, song and trend."""
    return {
        "message": "Welcome to the 90s! 🎉",
        "timestamp": now_iso(),
        "data": NINETIES_DATA,
    }


@router.get("/movies", response_model=list[Movie])
async def list_movies():
    return NINETIES_DATA.movies


@router.get("/music", response_model=list[Song])
async def list_music():
    return NINETIES_DATA.music


@router.get("/trends", response_model=list[str])
async def list_trends():
    return NINETIES_DATA.trends


@router.get("/random", response_model=RandomPick)
async def random_pick():
    """One random movie, song and trend."""
    return RandomPick(
        movie=random.choice(NINETIES_DATA.movies),
        song=random.choice(NINETIES_DATA.music),
        trend=random.choice(NINETIES_DATA.trends),
    )
