"""member_scout.report: выгрузка собранных записей (CSV)."""

from member_scout.report.csv_report import open_sink, render_csv

__all__ = ["open_sink", "render_csv"]
