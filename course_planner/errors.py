"""Error conditions raised by the catalog core.

Only `SourceUnavailable` escapes a load; `MalformedRecord` is caught per line
by the loader and reported as a warning. A missing course is not an error:
lookups return None.
"""


class CatalogError(Exception):
    """Base class for every condition the catalog reports."""


class SourceUnavailable(CatalogError):
    def __init__(self, source, reason):
        self.source = source
        self.reason = reason
        super().__init__(f"could not open '{source}': {reason}")


class MalformedRecord(CatalogError):
    def __init__(self, line_no, line):
        self.line_no = line_no
        self.line = line
        super().__init__(f"line {line_no} has fewer than 2 columns: {line!r}")


class CatalogNotLoaded(CatalogError):
    def __init__(self):
        super().__init__("No courses loaded. Choose option 1 to load the data.")
