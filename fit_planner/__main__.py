from fit_planner.cli import main

main()
