#!/usr/bin/env python
"""Script to run the Todo API server."""
import uvicorn

from todo_api.config import HOST, PORT

if __name__ == "__main__":
    uvicorn.run(
        "todo_api.main:app",
        host=HOST,
        port=PORT,
        reload=True
    )
