# app/docs.py
# Writes the generated OpenAPI document to disk: python -m app.docs [output]

import json
import logging
import sys
from pathlib import Path

from fastapi import FastAPI

log = logging.getLogger(__name__)

DEFAULT_OUTPUT = "swagger.json"


def write_openapi(app: FastAPI, output: str = DEFAULT_OUTPUT) -> Path:
    path = Path(output)
    path.write_text(json.dumps(app.openapi(), indent=2), encoding="utf-8")
    log.info("OpenAPI document written to %s", path)
    return path


if __name__ == "__main__":
    from main import create_app

    logging.basicConfig(level=logging.INFO)
    write_openapi(create_app(), sys.argv[1] if len(sys.argv) > 1 else DEFAULT_OUTPUT)
