"""Test data configuration constants.

Constants are organized into:
- FORMAT: Fixed by the canonical test-vector document, not configurable
- CORPUS: Where vector files are found (env vars)
- OPERATIONAL: Logging settings (env vars)
"""

import os

# =============================================================================
# FORMAT CONSTANTS (fixed by the test-vector document)
# =============================================================================

# Scheme prefix prepended to the Base45 text for the PREFIX stage
QR_PREFIX: str = os.getenv("DGC_QR_PREFIX", "HC1:")

# Top-level document keys, in emission order
DOCUMENT_KEYS: tuple[str, ...] = (
    "JSON", "CBOR", "COSE", "BASE45", "PREFIX", "2DCODE", "TESTCTX", "EXPECTEDRESULTS",
)

# =============================================================================
# CORPUS SETTINGS
# =============================================================================

# Default directory holding test-vector JSON files
TESTDATA_DIR: str = os.getenv("DGC_TESTDATA_DIR", "testdata")

# Glob pattern (relative to the corpus directory) selecting vector files
CORPUS_GLOB: str = os.getenv("DGC_TESTDATA_GLOB", "**/*.json")

# =============================================================================
# OPERATIONAL SETTINGS
# =============================================================================

LOG_LEVEL: str = os.getenv("DGC_LOG_LEVEL", "INFO")

# Empty means console only
LOG_FILE: str = os.getenv("DGC_LOG_FILE", "")
