"""Services coordinating record sources and the aggregation engine."""

from chantier_tracker.services.report_service import ReportService, SiteReport

__all__ = ["ReportService", "SiteReport"]
