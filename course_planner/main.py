# === main.py ===
import argparse

from course_planner.catalog import CourseCatalog
from course_planner.config import load_config, setup_logging
from course_planner.errors import CatalogNotLoaded, SourceUnavailable

MENU = """
Welcome to the course planner.

  1. Load Data Structure.
  2. Print Course List.
  3. Print Course.
  9. Exit.
"""


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Course catalog lookup')
    parser.add_argument('--config', type=str, default=None,
                       help='Path to JSON configuration file')
    parser.add_argument('--file', type=str, default=None,
                       help='Catalog file or URL to load before the menu starts')
    parser.add_argument('--log-level', type=str, default=None,
                       help='Logging level (overrides the config file)')
    return parser.parse_args(argv)


def read_menu_choice():
    """Keep prompting until the user types a number."""
    raw = input("What would you like to do? ")
    while True:
        try:
            return int(raw.strip())
        except ValueError:
            raw = input("Please enter a valid numeric option: ")


def format_course(course):
    prereqs = ", ".join(course.prerequisites) if course.prerequisites else "None"
    return f"{course.number}, {course.title}\nPrerequisites: {prereqs}"


def load_courses(catalog, source):
    try:
        report = catalog.load(source)
    except SourceUnavailable as e:
        print(f"Error: could not open file '{source}'. Check the path or Working Directory.")
        print(f"  ({e.reason})")
        return 0

    for warning in report.warnings:
        print(f"Warning: line {warning.line_no} has fewer than 2 columns. Skipping.")
    plural = "" if report.loaded == 1 else "s"
    print(f"Loaded {report.loaded} course{plural} from '{source}'.")
    return report.loaded


def print_course_list(catalog):
    print("Here is a sample schedule:")
    try:
        rows = catalog.list_all()
    except CatalogNotLoaded as e:
        print(e)
        return
    for number, title in rows:
        print(f"{number}, {title}")


def print_course(catalog, number):
    course = catalog.lookup(number)
    if course is None:
        print(f"Course '{number}' not found.")
        return
    print(format_course(course))


def run_menu(catalog, default_source):
    running = True
    while running:
        print(MENU)
        try:
            choice = read_menu_choice()
        except EOFError:
            break
        print()

        if choice == 1:
            source = input(f"Enter the CSV filename (blank for {default_source}): ").strip()
            load_courses(catalog, source or default_source)
        elif choice == 2:
            print_course_list(catalog)
        elif choice == 3:
            if not catalog.is_loaded:
                print("No courses loaded. Choose option 1 first.")
                continue
            print_course(catalog, input("What course do you want to know about? ").strip())
        elif choice == 9:
            running = False
        else:
            print("Please enter a valid option.")

    print("Thank you for using the course planner!")


def main(argv=None):
    args = parse_args(argv)
    config = load_config(args.config)
    setup_logging(args.log_level or config["log_level"])

    catalog = CourseCatalog(
        delimiter=config["delimiter"],
        request_timeout=config["request_timeout"],
    )
    if args.file:
        load_courses(catalog, args.file)

    try:
        run_menu(catalog, config["data_file"])
    except (EOFError, KeyboardInterrupt):
        print("\nThank you for using the course planner!")


if __name__ == "__main__":
    main()
