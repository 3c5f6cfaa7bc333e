"""
Little Journey Web Server

FastAPI-based web server for growth tracking and percentile lookups.
"""

import json
import logging
import os
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

# Setup paths
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from knowledge.growth import classify, get_reference_table, percentile_curves, METRIC_UNITS
from src.db.client import is_configured as db_configured
from src.db.repositories import ChildRepository, MeasurementRepository
from src.engines import GrowthTracker, InMemoryMeasurementStore
from src.exporters import (
    build_report_data,
    export_report_html,
    export_report_markdown,
    export_report_json,
)
from src.logging_config import configure_logging
from src.models import (
    ChildProfile,
    GrowthMeasurement,
    MeasurementType,
    NewMeasurement,
    PercentileStandard,
    Sex,
)

logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title="Little Journey",
    description="Little Journey - Growth Tracking API",
    version="0.1.0",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _default_standard() -> PercentileStandard:
    raw = os.environ.get("LITTLE_JOURNEY_STANDARD", PercentileStandard.WHO.value)
    try:
        return PercentileStandard(raw.lower())
    except ValueError:
        logger.warning("Ignoring unknown LITTLE_JOURNEY_STANDARD=%r", raw)
        return PercentileStandard.WHO


def _build_tracker() -> GrowthTracker:
    if db_configured():
        logger.info("Using Supabase measurement store")
        return GrowthTracker(MeasurementRepository(), _default_standard())
    logger.info("SUPABASE_URL or SUPABASE_SERVICE_KEY not set; using in-memory measurement store")
    return GrowthTracker(InMemoryMeasurementStore(), _default_standard())


tracker = _build_tracker()

# In-memory child profiles when Supabase is not configured
children_store: dict[str, ChildProfile] = {}


# Request/Response models
class PercentileRequest(BaseModel):
    """Request model for a one-off percentile lookup."""
    value: float = Field(..., gt=0, allow_inf_nan=False, description="cm for height/head, kg for weight")
    age_months: int = Field(..., description="Age in months at measurement; negative counts as 0")
    sex: Sex
    metric: MeasurementType
    standard: Optional[PercentileStandard] = Field(None, description="Defaults to the preferred standard")


class PercentileResponse(BaseModel):
    """Percentile classification result."""
    band: str
    percentile: int
    is_within_normal_range: bool
    range_description: str
    reference_age_months: int
    standard: str


class CreateChildRequest(BaseModel):
    """Request model for registering a child."""
    name: str = Field(..., min_length=1)
    date_of_birth: date
    sex: Optional[Sex] = None


class AddMeasurementRequest(BaseModel):
    """Request model for recording a measurement."""
    type: MeasurementType
    value: float = Field(..., gt=0, allow_inf_nan=False)
    date: date
    photo_uri: Optional[str] = None


class StandardSetting(BaseModel):
    standard: PercentileStandard


def _get_child(child_id: str) -> ChildProfile:
    if db_configured():
        child = ChildRepository().get_by_id(child_id)
    else:
        child = children_store.get(child_id)
    if child is None:
        raise HTTPException(status_code=404, detail="Child not found")
    return child


def _measurement_payload(measurement: GrowthMeasurement, child: ChildProfile) -> dict:
    data = measurement.model_dump(mode="json")
    result = tracker.percentile_for_child(measurement, child)
    data["percentile"] = result.to_dict() if result else None
    return data


# Routes
@app.get("/", response_class=HTMLResponse)
async def root():
    """API landing page."""
    return HTMLResponse(content="<h1>Little Journey API</h1><p>Use /docs for API documentation.</p>")


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "storage": "supabase" if db_configured() else "memory",
    }


@app.post("/api/percentile", response_model=PercentileResponse)
async def calculate_percentile(request: PercentileRequest):
    """Classify a single measurement without storing it."""
    standard = request.standard or tracker.preferred_standard
    try:
        result = classify(
            request.value,
            request.age_months,
            request.sex.value,
            request.metric.value,
            standard.value,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return PercentileResponse(**result.to_dict(), standard=standard.value)


@app.get("/api/standards/{standard}/{metric}/{sex}")
async def get_standard_table(
    standard: PercentileStandard,
    metric: MeasurementType,
    sex: Sex,
    max_age_months: Optional[int] = Query(None, ge=0),
):
    """Reference breakpoints and chart curves for a standard."""
    table = get_reference_table(metric.value, sex.value, standard.value)
    return {
        "standard": standard.value,
        "metric": metric.value,
        "sex": sex.value,
        "unit": METRIC_UNITS[metric.value],
        "breakpoints": [
            {"age_months": bp.age_months, "p3": bp.p3, "p15": bp.p15, "p50": bp.p50, "p85": bp.p85, "p97": bp.p97}
            for bp in table
        ],
        "curves": {
            key: [{"age_months": a, "value": v} for a, v in points]
            for key, points in percentile_curves(metric.value, sex.value, standard.value, max_age_months).items()
        },
    }


# =============================================================================
# SETTINGS
# =============================================================================


@app.get("/api/settings/standard", response_model=StandardSetting)
async def get_preferred_standard():
    """Get the preferred growth standard."""
    return StandardSetting(standard=tracker.preferred_standard)


@app.put("/api/settings/standard", response_model=StandardSetting)
async def set_preferred_standard(setting: StandardSetting):
    """Change the preferred growth standard."""
    tracker.preferred_standard = setting.standard
    logger.info("Preferred standard changed to %s", setting.standard.value)
    return StandardSetting(standard=tracker.preferred_standard)


# =============================================================================
# CHILDREN
# =============================================================================


@app.post("/api/children", response_model=ChildProfile)
async def create_child(request: CreateChildRequest):
    """Register a child."""
    child = ChildProfile(**request.model_dump())
    if db_configured():
        child = ChildRepository().create(child)
    else:
        children_store[child.id] = child
    return child


@app.get("/api/children/{child_id}", response_model=ChildProfile)
async def get_child(child_id: str):
    """Get a child profile."""
    return _get_child(child_id)


@app.delete("/api/children/{child_id}")
async def delete_child(child_id: str):
    """Delete a child and their measurements."""
    child = _get_child(child_id)
    for m in tracker.get_measurements(child.id):
        tracker.delete_measurement(m.id)
    if db_configured():
        ChildRepository().delete(child.id)
    else:
        del children_store[child.id]
    return {"status": "deleted", "child_id": child.id}


# =============================================================================
# MEASUREMENTS
# =============================================================================


@app.post("/api/children/{child_id}/measurements")
async def add_measurement(child_id: str, request: AddMeasurementRequest):
    """Record a measurement for a child."""
    child = _get_child(child_id)
    measurement = tracker.add_measurement(NewMeasurement(child_id=child.id, **request.model_dump()))
    return _measurement_payload(measurement, child)


@app.get("/api/children/{child_id}/measurements")
async def list_measurements(child_id: str, type: Optional[MeasurementType] = None):
    """List a child's measurements, newest first."""
    child = _get_child(child_id)
    measurements = tracker.get_measurements(child.id, type)
    return {
        "child_id": child.id,
        "total": len(measurements),
        "measurements": [_measurement_payload(m, child) for m in measurements],
    }


@app.get("/api/children/{child_id}/measurements/latest")
async def latest_measurement(child_id: str, type: MeasurementType):
    """Most recent measurement of a type, with its current percentile."""
    child = _get_child(child_id)
    measurement = tracker.get_latest_measurement(child.id, type)
    if measurement is None:
        raise HTTPException(status_code=404, detail=f"No {type.value} measurements recorded")
    return _measurement_payload(measurement, child)


@app.delete("/api/measurements/{measurement_id}")
async def delete_measurement(measurement_id: str):
    """Delete a measurement."""
    if not tracker.delete_measurement(measurement_id):
        raise HTTPException(status_code=404, detail="Measurement not found")
    return {"status": "deleted", "measurement_id": measurement_id}


@app.get("/api/children/{child_id}/percentiles")
async def child_percentiles(child_id: str, standard: Optional[PercentileStandard] = None):
    """Percentile results for all of a child's measurements."""
    child = _get_child(child_id)
    if child.sex is None:
        raise HTTPException(status_code=400, detail="Child's sex is required for percentiles")
    results = tracker.percentile_data(child, standard)
    return {
        "child_id": child.id,
        "standard": (standard or tracker.preferred_standard).value,
        "percentiles": {mid: r.to_dict() for mid, r in results.items()},
    }


# =============================================================================
# REPORTS
# =============================================================================


@app.get("/api/children/{child_id}/report")
async def growth_report(
    child_id: str,
    start: date,
    end: date,
    format: str = Query("json", pattern="^(json|markdown|html)$"),
    standard: Optional[PercentileStandard] = None,
):
    """
    Growth report for a date range.

    Supports multiple output formats: json, markdown, html.
    """
    child = _get_child(child_id)
    try:
        data = build_report_data(tracker, child, start, end, standard)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if format == "markdown":
        return PlainTextResponse(export_report_markdown(data), media_type="text/markdown")
    if format == "html":
        return HTMLResponse(export_report_html(data))
    return JSONResponse(content=json.loads(export_report_json(data)))


def run_server(host: str = "0.0.0.0", port: int = 8000):
    """Run the server."""
    import uvicorn
    configure_logging()
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
