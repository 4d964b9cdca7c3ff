#!/usr/bin/env python
"""Script to run the task manager API server."""
import os
from pathlib import Path

# Run from the repository root so the default ./sampleTasks.json resolves
os.chdir(Path(__file__).resolve().parent)

import uvicorn

from task_manager import config
from task_manager.logging_setup import setup_logging

if __name__ == "__main__":
    setup_logging(console_level=config.LOG_LEVEL, log_dir=config.LOG_DIR)
    uvicorn.run(
        "task_manager.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=True
    )
