from typing import Optional

from fastapi import APIRouter, Query

from lipsum.config import settings
from lipsum.services.generator import lipsum, lipsum_title, lipsum_words, make_rng

router = APIRouter(prefix="/lipsum", tags=["Lipsum"])


@router.get("/text")
async def text(
    words: int = Query(default=settings.DEFAULT_WORDS, ge=0, le=settings.MAX_WORDS),
    seed: Optional[int] = None,
):
    """Classical lorem ipsum, continued at random past the first paragraph."""
    result = lipsum(words, make_rng(seed))
    return {"ok": True, "data": {"text": result, "words": words}}


@router.get("/words")
async def random_words(
    words: int = Query(default=settings.DEFAULT_WORDS, ge=0, le=settings.MAX_WORDS),
    seed: Optional[int] = None,
):
    result = lipsum_words(words, make_rng(seed))
    return {"ok": True, "data": {"text": result, "words": words}}


@router.get("/title")
async def title(seed: Optional[int] = None):
    return {"ok": True, "data": {"title": lipsum_title(make_rng(seed))}}
