"""Reporting: derived statistics, chart series and report documents."""

from crm_lite.reporting.documents import customer_performance_report, financial_summary_report
from crm_lite.reporting.statistics import (
    CategoryStats,
    FinancialReport,
    QuickStats,
    ReportingEngine,
)

__all__ = [
    "CategoryStats",
    "FinancialReport",
    "QuickStats",
    "ReportingEngine",
    "customer_performance_report",
    "financial_summary_report",
]
