"""Run the program importer API: python -m program_importer"""
import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "program_importer.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8010")),
        reload=os.getenv("ENVIRONMENT", "development") == "development",
    )
