"""JSON-ready report documents built from the reporting engine."""

from typing import Any

from crm_lite.reporting.statistics import ReportingEngine
from crm_lite.storage.serialization import serialize_value


def customer_performance_report(engine: ReportingEngine) -> dict[str, Any]:
    """Category breakdown as an exportable document."""
    rows = [
        {
            "category": stats.category,
            "customers": stats.count,
            "revenue": stats.revenue,
            "avgValue": stats.avg_value,
        }
        for stats in engine.category_breakdown()
    ]
    return serialize_value({
        "reportType": "Customer Performance Report",
        "generatedAt": engine.clock(),
        "data": rows,
    })


def financial_summary_report(engine: ReportingEngine) -> dict[str, Any]:
    """Capital, revenue, profit and ROI as an exportable document."""
    report = engine.financial_report()
    return serialize_value({
        "reportType": "Financial Summary Report",
        "generatedAt": engine.clock(),
        "totalCapital": report.capital,
        "totalRevenue": report.revenue,
        "totalProfit": report.profit,
        "roi": report.roi,
    })
