"""Binary search tree of courses keyed by normalized course number.

Nodes are stored in parallel lists and linked by index, so clearing the tree
is just dropping the lists. Each node keeps its parent index, which lets the
in-order walk step from node to successor without a stack.

The tree is not self-balancing: inserting keys in sorted order (as most
catalog files are) builds a linked list and insert/find degrade to O(n).
`height()` exposes this.
"""

from typing import Iterator, Optional

from course_planner.course import Course, normalize_key

NIL = -1


class CourseTree:
    def __init__(self):
        self.clear()

    def clear(self) -> None:
        """Drop every node and reset the count to zero."""
        self._keys = []
        self._courses = []
        self._left = []
        self._right = []
        self._parent = []
        self._root = NIL
        self._version = getattr(self, "_version", 0) + 1

    def size(self) -> int:
        return len(self._keys)

    def __len__(self):
        return len(self._keys)

    def insert(self, course: Course) -> None:
        """Add a course, or overwrite title and prerequisites if its key exists."""
        key = course.key

        if self._root == NIL:
            self._root = self._new_node(key, course, NIL)
            return

        cur = self._root
        while True:
            here = self._keys[cur]
            if key < here:
                if self._left[cur] == NIL:
                    self._left[cur] = self._new_node(key, course, cur)
                    return
                cur = self._left[cur]
            elif key > here:
                if self._right[cur] == NIL:
                    self._right[cur] = self._new_node(key, course, cur)
                    return
                cur = self._right[cur]
            else:
                stored = self._courses[cur]
                stored.title = course.title
                stored.prerequisites = list(course.prerequisites)
                return

    def find(self, key: str) -> Optional[Course]:
        """Return a copy of the course stored under `key`, or None."""
        node = self._find_node(normalize_key(key))
        if node == NIL:
            return None
        return self._courses[node].copy()

    def __contains__(self, key):
        return self._find_node(normalize_key(key)) != NIL

    def in_order(self) -> Iterator[Course]:
        """Yield copies of all courses in ascending key order."""
        version = self._version
        node = self._leftmost(self._root)
        while node != NIL:
            yield self._courses[node].copy()
            if version != self._version:
                raise RuntimeError("CourseTree changed size during iteration")
            node = self._successor(node)

    def __iter__(self):
        return self.in_order()

    def height(self) -> int:
        if self._root == NIL:
            return 0
        best = 0
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (self._left[node], self._right[node]):
                if child != NIL:
                    stack.append((child, depth + 1))
        return best

    # ---------- node helpers ----------

    def _new_node(self, key, course, parent):
        self._keys.append(key)
        self._courses.append(course.copy())
        self._left.append(NIL)
        self._right.append(NIL)
        self._parent.append(parent)
        self._version += 1
        return len(self._keys) - 1

    def _find_node(self, key):
        cur = self._root
        while cur != NIL:
            here = self._keys[cur]
            if key == here:
                return cur
            cur = self._left[cur] if key < here else self._right[cur]
        return NIL

    def _leftmost(self, node):
        if node == NIL:
            return NIL
        while self._left[node] != NIL:
            node = self._left[node]
        return node

    def _successor(self, node):
        if self._right[node] != NIL:
            return self._leftmost(self._right[node])
        parent = self._parent[node]
        while parent != NIL and node == self._right[parent]:
            node = parent
            parent = self._parent[parent]
        return parent
