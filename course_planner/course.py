# === course.py ===
class Course:
    def __init__(self, number, title, prerequisites=None):
        self.number = number
        self.title = title
        self.prerequisites = list(prerequisites or [])  # course numbers, input order

    @property
    def key(self):
        return normalize_key(self.number)

    def copy(self):
        return Course(self.number, self.title, self.prerequisites)

    def __eq__(self, other):
        if not isinstance(other, Course):
            return NotImplemented
        return (
            self.number == other.number
            and self.title == other.title
            and self.prerequisites == other.prerequisites
        )

    def __repr__(self):
        return (
            f"Course(number={self.number!r}, "
            f"title={self.title!r}, "
            f"prerequisites={self.prerequisites!r})"
        )


def normalize_key(number):
    """Case-fold a course number so "cs101" and "CS101" compare equal."""
    return number.strip().upper()
