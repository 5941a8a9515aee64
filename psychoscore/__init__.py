"""PsychoScore: assessment scoring and interpretation engine."""

from psychoscore.services.analysis_service import AnalysisService, analyze_assessment

__version__ = "1.0.0"

__all__ = ["AnalysisService", "analyze_assessment", "__version__"]
