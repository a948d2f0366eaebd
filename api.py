# api.py (JSON surface over the signal engine)
import logging
import os
from typing import List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from analyzer import analyze_resume_keywords, analyze_single_text, analyze_two_texts
from catalog import CatalogSelector, load_catalog
from profile_match import match_profile_skills
from skills import category_descriptions

load_dotenv()

logger = logging.getLogger(__name__)

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
MAX_TEXT_CHARS = int(os.getenv("MAX_TEXT_CHARS", "50000"))


app = FastAPI(title="Job Signal Engine")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class DecodeRequest(BaseModel):
    text: str


class ResumeRequest(BaseModel):
    resume_text: str


class SkillsGapRequest(BaseModel):
    resume_text: str
    job_text: str


class SkillsMatchRequest(BaseModel):
    user_skills: List[str]
    job_title: str
    job_description: str
    job_requirements: Optional[str] = None


def _check_length(field_name: str, value: Optional[str]) -> None:
    if value and len(value) > MAX_TEXT_CHARS:
        raise HTTPException(
            status_code=413,
            detail=f"{field_name} exceeds the {MAX_TEXT_CHARS} character limit.",
        )


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/catalogs")
async def list_catalogs():
    catalogs = []
    for selector in CatalogSelector:
        catalog = load_catalog(selector)
        catalogs.append(
            {
                "selector": selector.value,
                "version": catalog.version,
                "entries": len(catalog.entries),
                "categories": catalog.categories(),
                "category_descriptions": (
                    category_descriptions() if selector is CatalogSelector.SKILLS_TAXONOMY else {}
                ),
            }
        )
    return {"catalogs": catalogs}


@app.post("/decode/")
async def decode_job_posting(request: DecodeRequest):
    _check_length("text", request.text)
    result = analyze_single_text(request.text)
    logger.info("Decoded job posting: score=%d label=%s", result.score, result.score_label)
    return result.to_dict()


@app.post("/resume-keywords/")
async def resume_keywords(request: ResumeRequest):
    _check_length("resume_text", request.resume_text)
    result = analyze_resume_keywords(request.resume_text)
    logger.info("Resume keywords scanned: score=%d found=%d", result.score, len(result.keywords))
    return result.to_dict()


@app.post("/skills-gap/")
async def skills_gap(request: SkillsGapRequest):
    _check_length("resume_text", request.resume_text)
    _check_length("job_text", request.job_text)
    result = analyze_two_texts(request.resume_text, request.job_text)
    logger.info(
        "Skills gap analysed: score=%d matched=%d gaps=%d",
        result.score,
        len(result.matched),
        len(result.gaps),
    )
    return result.to_dict()


@app.post("/skills-match/")
async def skills_match(request: SkillsMatchRequest):
    if not request.job_title.strip() or not request.job_description.strip():
        raise HTTPException(status_code=400, detail="job_title and job_description are required")
    _check_length("job_title", request.job_title)
    _check_length("job_description", request.job_description)
    _check_length("job_requirements", request.job_requirements)
    _check_length("user_skills", ", ".join(request.user_skills))
    result = match_profile_skills(
        request.user_skills,
        request.job_title,
        request.job_description,
        request.job_requirements,
    )
    logger.info("Skills match for %r: %d%%", request.job_title, result.percentage)
    return result.to_dict()
