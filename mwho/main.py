"""
mWHO Calculator - FastAPI Application

Stateless API over the classification engine:
- Disease groups and their question sets
- Classification (mWHO class + notes + guidance)
- Plain-text summary export
- Guidance reference by class
"""
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from mwho import config
from mwho.core.clinical import (
    ClassificationEngine,
    DiseaseGroup,
    DISCLAIMER,
    SEVERITY_ORDER,
    lookup,
    parse_class,
    parse_group,
)
from mwho.core.reports import build_summary
from mwho.models import (
    ClassifyRequest,
    ClassificationResponse,
    GroupInfo,
    GroupListResponse,
    GuidanceResponse,
    HealthResponse,
    QuestionnaireResponse,
    SummaryResponse,
)
from mwho.utils import (
    InvalidAnswerError,
    UnknownClassError,
    UnknownGroupError,
    get_logger,
    setup_logging,
)

setup_logging(config.LOG_LEVEL, config.LOG_FILE or None)
logger = get_logger(__name__)


# ---- Application Lifespan ----

@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.engine = _engine
    logger.info(
        f"mWHO calculator API ready: {len(_engine.registered_groups())} disease groups"
    )
    yield
    logger.info("mWHO calculator API shut down.")


# ---- FastAPI Application ----

app = FastAPI(
    title="mWHO Pregnancy Risk Calculator API",
    description="Modified WHO (mWHO 2.0) cardiovascular risk classification in pregnancy",
    version=config.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

START_TIME = datetime.now()
_engine = ClassificationEngine()


# ---- Utility Functions ----

def _parse_group(group_name: str) -> DiseaseGroup:
    """Parse a group label or alias, 404 if unknown."""
    try:
        return parse_group(group_name)
    except UnknownGroupError as e:
        raise HTTPException(status_code=404, detail=e.to_dict())


def _classify(request: ClassifyRequest):
    """Shared body of /classify and /summary."""
    try:
        group = parse_group(request.group)
    except UnknownGroupError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())

    try:
        result = _engine.classify(group, request.answers, strict=request.strict)
    except InvalidAnswerError as e:
        logger.warning(f"Rejected answers for {group.value}: {e.message}")
        raise HTTPException(status_code=400, detail=e.to_dict())

    return group, result


def _health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=config.APP_VERSION,
        timestamp=datetime.now().isoformat(),
        uptime_seconds=(datetime.now() - START_TIME).total_seconds(),
    )


# ---- API Endpoints ----

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """API root - health check."""
    return _health()


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return _health()


@app.get("/api/v1/groups", response_model=GroupListResponse, tags=["Reference"])
async def list_groups():
    """
    List the disease groups, in display order.
    """
    return GroupListResponse(groups=[
        GroupInfo(name=g.value, description=_engine.questionnaire(g).description)
        for g in _engine.registered_groups()
    ])


@app.get("/api/v1/groups/{group}/questions", response_model=QuestionnaireResponse, tags=["Reference"])
async def get_questions(group: str):
    """
    Question set for one disease group.

    The group may be given by label or by alias, e.g. `valvular`,
    `coronary`, `ventricular`.  Use the alias for labels containing "/".
    """
    questionnaire = _engine.questionnaire(_parse_group(group))
    return QuestionnaireResponse(**questionnaire.to_dict())


@app.get("/api/v1/classes", tags=["Reference"])
async def list_classes():
    """
    mWHO classes in increasing order of severity.
    """
    return {"classes": [c.value for c in SEVERITY_ORDER]}


@app.get("/api/v1/guidance/{mwho_class}", response_model=GuidanceResponse, tags=["Reference"])
async def get_guidance(mwho_class: str):
    """
    Risk meaning and management guidance for one class.

    `II-III` (ASCII hyphen) is accepted for `II–III`.
    """
    try:
        cls = parse_class(mwho_class)
    except UnknownClassError as e:
        raise HTTPException(status_code=404, detail=e.to_dict())

    return GuidanceResponse(mwho_class=cls.value, label=cls.label, **lookup(cls).to_dict())


@app.post("/api/v1/classify", response_model=ClassificationResponse, tags=["Assessment"])
async def classify(request: ClassifyRequest):
    """
    Classify one disease group's answers.

    A null `mwho_class` means the answers are insufficient so far; it is
    returned with status 200.
    """
    group, result = _classify(request)
    return ClassificationResponse(**ClassificationEngine.summarise(group, result))


@app.post("/api/v1/summary", response_model=SummaryResponse, tags=["Assessment"])
async def summary(request: ClassifyRequest):
    """
    Classify and render the plain-text summary for export.
    """
    group, result = _classify(request)
    return SummaryResponse(
        group=group.value,
        mwho_class=result.mwho_class.value if result.mwho_class else None,
        summary=build_summary(group, result),
        disclaimer=DISCLAIMER,
    )


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
