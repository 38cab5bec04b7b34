"""JSON serialization of report views."""

import logging
from pathlib import Path

from pydantic import BaseModel

from topic_census.report.models import Report

logger = logging.getLogger(__name__)

DEFAULT_ARTICLE_LIST_FILENAME = "纵横研究院文章列表.json"
DEFAULT_TOPIC_REPORT_FILENAME = "纵横研究院专题统计.json"
DEFAULT_AUTHOR_REPORT_FILENAME = "纵横研究院作者统计.json"


class ReportWriter:
    """Write the three report views as JSON files into one directory.

    Args:
        output_dir: Directory to write into (created if missing).
        article_list_filename: File name of the flat article list.
        topic_report_filename: File name of the per-topic view.
        author_report_filename: File name of the per-author view.
        indent: JSON indentation; None writes compact JSON.
    """

    def __init__(
        self,
        output_dir: Path,
        *,
        article_list_filename: str = DEFAULT_ARTICLE_LIST_FILENAME,
        topic_report_filename: str = DEFAULT_TOPIC_REPORT_FILENAME,
        author_report_filename: str = DEFAULT_AUTHOR_REPORT_FILENAME,
        indent: int | None = None,
    ) -> None:
        self._output_dir = output_dir
        self._article_list_filename = article_list_filename
        self._topic_report_filename = topic_report_filename
        self._author_report_filename = author_report_filename
        self._indent = indent

    def write(self, report: Report) -> list[Path]:
        """Write all three views.

        Returns:
            Paths of the written files, in article/topic/author order.
        """
        self._output_dir.mkdir(parents=True, exist_ok=True)
        return [
            self._write_view(report.articles, self._article_list_filename),
            self._write_view(report.topics, self._topic_report_filename),
            self._write_view(report.authors, self._author_report_filename),
        ]

    def _write_view(self, view: BaseModel, filename: str) -> Path:
        filepath = self._output_dir / filename
        filepath.write_text(
            view.model_dump_json(by_alias=True, indent=self._indent),
            encoding="utf-8",
        )
        logger.info(f"Wrote {filepath}")
        return filepath
