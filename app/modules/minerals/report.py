"""Derived report for a mineral: composition ranking, property bands and advice."""

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field

from modules.minerals.models import Mineral


class ReportRequest(BaseModel):
    audience: str = "technical geologist"
    purpose: str = "exploration briefing"
    site_context: str = "pilot drill campaign"


class ElementShare(BaseModel):
    name: str
    percent: float


class MineralReport(BaseModel):
    mineral: Mineral
    audience: str
    purpose: str
    site_context: str
    generated_utc: str
    dominant_element: str
    dominant_element_pct: float
    hardness_band: str
    density_band: str
    summary: str
    recommendations: List[str] = Field(default_factory=list)
    element_breakdown: List[ElementShare] = Field(default_factory=list)


def hardness_band(hardness_mohs: float) -> str:
    if hardness_mohs < 3.0:
        return "soft"
    if hardness_mohs < 6.0:
        return "medium"
    if hardness_mohs < 7.5:
        return "hard"
    return "very hard"


def density_band(density_g_cm3: float) -> str:
    if density_g_cm3 < 2.6:
        return "light"
    if density_g_cm3 < 3.2:
        return "moderate"
    return "dense"


def build_report(mineral: Mineral, request: ReportRequest) -> MineralReport:
    """Build a report. Pure apart from the generation timestamp."""
    breakdown = sorted(
        (ElementShare(name=name, percent=pct) for name, pct in mineral.major_elements_pct.items()),
        key=lambda share: share.percent,
        reverse=True,
    )
    dominant = breakdown[0] if breakdown else ElementShare(name="Unknown", percent=0.0)
    hardness = hardness_band(mineral.hardness_mohs)
    density = density_band(mineral.density_g_cm3)

    summary = (
        f"For {request.audience} and the {request.site_context} context, "
        f"{mineral.common_name} is classified as {hardness} with {density} density "
        f"behavior. The chemistry is led by {dominant.name} ({dominant.percent:.1f} wt%), "
        f"supporting {request.purpose} decisions."
    )

    recommendations = [
        f"Prioritize samples of {mineral.common_name} where {dominant.name} "
        "enrichment is strongest."
    ]
    if hardness in ("hard", "very hard"):
        recommendations.append(
            "Use abrasion-resistant tooling and adjust comminution energy estimates upward."
        )
    else:
        recommendations.append(
            "Validate breakage and weathering rates early, as softer material can "
            "bias grade control."
        )
    if density == "dense":
        recommendations.append(
            "Run density separation testwork to confirm recovery uplift potential "
            "in early flowsheets."
        )
    else:
        recommendations.append(
            "Combine XRD with geochemistry to avoid over-reliance on density-based separation."
        )
    recommendations.append(
        f"Archive this report against '{request.purpose}' objectives for "
        "reproducible decision records."
    )

    return MineralReport(
        mineral=mineral,
        audience=request.audience,
        purpose=request.purpose,
        site_context=request.site_context,
        generated_utc=datetime.now(timezone.utc).isoformat(),
        dominant_element=dominant.name,
        dominant_element_pct=dominant.percent,
        hardness_band=hardness,
        density_band=density,
        summary=summary,
        recommendations=recommendations,
        element_breakdown=breakdown,
    )
