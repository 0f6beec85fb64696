"""Constants for the tasks resource."""

TASKS_PATH = "tasks"

# Root element of task request bodies
TASK_ROOT = "task"

RECORD_NAME = "task"
