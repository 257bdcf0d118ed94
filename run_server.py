#!/usr/bin/env python
"""Script to run the Task Manager API server."""
import os
import sys
from pathlib import Path

# Get the directory where this script is located
project_dir = Path(__file__).resolve().parent

# Add project directory to Python path
sys.path.insert(0, str(project_dir))

# Change to project directory so the default SQLite file lands here
os.chdir(project_dir)

import uvicorn

from task_api.config import SERVER_HOST, SERVER_PORT

if __name__ == "__main__":
    uvicorn.run(
        "task_api.main:app",
        host=SERVER_HOST,
        port=SERVER_PORT,
        reload=True
    )
