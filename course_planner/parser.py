from course_planner.course import Course
from course_planner.errors import MalformedRecord

DELIMITER = ","


def split_fields(line, delimiter=DELIMITER):
    # no quoting support: a delimiter inside a field always splits it
    return [field.strip() for field in line.split(delimiter)]


def parse_line(line, line_no, delimiter=DELIMITER):
    """Turn one line of catalog text into a Course.

    Returns None for blank lines. Raises MalformedRecord (carrying the
    1-based line number) when fewer than two fields are present.
    """
    line = line.strip()
    if not line:
        return None

    parts = split_fields(line, delimiter)
    if len(parts) < 2:
        raise MalformedRecord(line_no, line)

    number, title = parts[0], parts[1]
    prerequisites = [p for p in parts[2:] if p]
    return Course(number, title, prerequisites)


def parse_lines(lines, delimiter=DELIMITER):
    """Yield (line_no, Course or MalformedRecord) for every non-blank line."""
    for line_no, line in enumerate(lines, 1):
        try:
            course = parse_line(line, line_no, delimiter)
        except MalformedRecord as e:
            yield line_no, e
            continue
        if course is not None:
            yield line_no, course
