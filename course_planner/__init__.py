"""Course catalog lookup: parse a course file into a search tree and query it."""

from .course import Course, normalize_key
from .tree import CourseTree
from .catalog import CourseCatalog, LoadReport
from .errors import CatalogError, CatalogNotLoaded, MalformedRecord, SourceUnavailable

__all__ = [
    'Course',
    'normalize_key',
    'CourseTree',
    'CourseCatalog',
    'LoadReport',
    'CatalogError',
    'CatalogNotLoaded',
    'MalformedRecord',
    'SourceUnavailable',
]
