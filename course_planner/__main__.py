from course_planner.main import main

if __name__ == "__main__":
    main()
