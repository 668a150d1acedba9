"""Configuration constants and paths for emdocs."""

import os
from pathlib import Path

# Shown in the <title> of generated index pages
# Override via EMDOCS_SITE_TITLE environment variable
SITE_TITLE = os.getenv("EMDOCS_SITE_TITLE", "Event Machine Docs")

# Relative to each page; the header image carries the prooph-logo class
LOGO_SRC = os.getenv("EMDOCS_LOGO_SRC", "img/prooph-logo.svg")

# Default input/output locations for `emdocs site`
DOCS_DIR = Path(os.getenv("EMDOCS_DOCS_DIR", "./docs"))
OUT_DIR = Path(os.getenv("EMDOCS_OUT_DIR", "./site"))

# Generator versioning for reproducible builds
GENERATOR_VERSION = "0.1.0"
SCHEMA_VERSION = 1

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
