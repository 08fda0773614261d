"""goaltrack - objectives, tasks and progress tracking."""
