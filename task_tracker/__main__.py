from task_tracker.main import main

main()
