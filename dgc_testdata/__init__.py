# DGC interoperability test data - test-vector records and corpus handling

from dgc_testdata.models import ExpectedResults, TestContext, TestStatement

__version__ = "1.0.0"

__all__ = [
    "ExpectedResults",
    "TestContext",
    "TestStatement",
]
