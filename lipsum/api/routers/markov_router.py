from collections import OrderedDict
from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from lipsum.config import settings
from lipsum.services.generator import make_rng
from lipsum.services.markov import ChainOrderError, EmptyChainError, MarkovChain, train_from_corpus
from lipsum.utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/markov", tags=["Markov"])

# In-memory model cache, oldest trained model evicted first
MODEL_CACHE: "OrderedDict[str, MarkovChain]" = OrderedDict()


class TrainRequest(BaseModel):
    corpus: list[str]
    order: int = 2
    model_name: str = "default"


class GenerateRequest(BaseModel):
    model_name: str = "default"
    seed: str = ""
    max_len: int = Field(default=50, ge=0, le=settings.MAX_WORDS)
    random_seed: Optional[int] = None


def get_model(model_name: str) -> MarkovChain:
    model = MODEL_CACHE.get(model_name)
    if model is None:
        raise HTTPException(status_code=404, detail="model not found, train first")
    return model


@router.post("/train")
async def train(req: TrainRequest):
    if not req.corpus:
        raise HTTPException(status_code=400, detail="corpus is empty")
    if sum(len(line) for line in req.corpus) > settings.MAX_CORPUS_CHARS:
        raise HTTPException(status_code=400, detail=f"corpus exceeds {settings.MAX_CORPUS_CHARS} characters")
    try:
        model = train_from_corpus(req.corpus, req.order)
    except ChainOrderError as e:
        raise HTTPException(status_code=400, detail=str(e))

    MODEL_CACHE[req.model_name] = model
    MODEL_CACHE.move_to_end(req.model_name)
    while len(MODEL_CACHE) > settings.MAX_CACHED_MODELS:
        evicted, _ = MODEL_CACHE.popitem(last=False)
        logger.info(f"[MARKOV] Evicted model '{evicted}'")

    logger.info(f"[MARKOV] Trained model '{req.model_name}': {model.size()} keys")
    return {"ok": True, "data": {"model": req.model_name, "order": model.order, "keys": model.size()}}


@router.post("/generate")
async def generate(req: GenerateRequest):
    model = get_model(req.model_name)
    try:
        if req.seed:
            text = model.generate_from(req.max_len, req.seed, make_rng(req.random_seed))
        else:
            text = model.generate(req.max_len, make_rng(req.random_seed))
    except EmptyChainError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return {"ok": True, "data": {"text": text}}


@router.get("/{model_name}/stats")
async def stats(model_name: str):
    model = get_model(model_name)
    return {"ok": True, "data": asdict(model.stats())}
