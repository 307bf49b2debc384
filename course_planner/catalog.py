# === catalog.py ===
import logging

from course_planner.errors import CatalogNotLoaded, MalformedRecord, SourceUnavailable
from course_planner.parser import DELIMITER, parse_lines
from course_planner.sources import open_source
from course_planner.tree import CourseTree

logger = logging.getLogger(__name__)


class LoadReport:
    def __init__(self, source):
        self.source = source
        self.loaded = 0
        self.warnings = []  # MalformedRecord per skipped line
        self.size = 0

    @property
    def skipped(self):
        return len(self.warnings)

    def __repr__(self):
        return (
            f"LoadReport(source={self.source!r}, loaded={self.loaded}, "
            f"skipped={self.skipped}, size={self.size})"
        )


class CourseCatalog:
    """Session-scoped course catalog: load, list_all and lookup."""

    def __init__(self, delimiter=DELIMITER, request_timeout=10):
        self.tree = CourseTree()
        self.delimiter = delimiter
        self.request_timeout = request_timeout
        self.last_report = None

    @property
    def size(self):
        return self.tree.size()

    @property
    def is_loaded(self):
        return self.tree.size() > 0

    def load(self, source):
        """Replace the catalog contents with the courses in `source`.

        Raises SourceUnavailable (catalog untouched) when the source cannot be
        opened. Malformed lines are logged and skipped.
        """
        try:
            lines = open_source(source, timeout=self.request_timeout)
        except SourceUnavailable as e:
            logger.warning("Could not open '%s': %s", source, e.reason)
            raise

        self.tree.clear()
        report = LoadReport(source)

        for line_no, result in parse_lines(lines, self.delimiter):
            if isinstance(result, MalformedRecord):
                logger.warning("line %d has fewer than 2 columns. Skipping.", line_no)
                report.warnings.append(result)
                continue
            self.tree.insert(result)
            report.loaded += 1

        report.size = self.tree.size()
        self.last_report = report
        logger.info(
            "Loaded %d course%s from '%s' (%d skipped)",
            report.loaded, "" if report.loaded == 1 else "s", source, report.skipped,
        )
        return report

    def list_all(self):
        """Return (number, title) pairs in key order; raise CatalogNotLoaded if empty."""
        if not self.is_loaded:
            raise CatalogNotLoaded()
        return [(course.number, course.title) for course in self.tree]

    def lookup(self, number):
        """Return the course for `number`, or None if it is not in the catalog."""
        return self.tree.find(number)

    def courses(self):
        return self.tree.in_order()
