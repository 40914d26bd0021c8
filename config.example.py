# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO).",
    # Data
    "TODO_TASKS_SOURCE": "Path or http(s) URL of the task document loaded at startup (default: data.json).",
    "TODO_DATA_DIR": "Local data directory, also holds todo.log (default: .local/todo).",
    "TODO_EXPORT_DIR": "Where /export writes todo-tasks-<date>.json (default: <data_dir>/exports).",
    # Behaviour
    "TODO_CONFIRM_DESTRUCTIVE": "Ask before delete / clear completed (true/false, default: true).",
    "TODO_NOTIFY_ON_ADD": "Print 'Task added successfully!' after each add (true/false, default: true).",
}
