from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config import LOG_LEVEL
from plan_recommendation.routes import router as recommendation_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
)
logging.info("App starting")

app = FastAPI(title="Plan Recommendation API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recommendation_router)


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}
