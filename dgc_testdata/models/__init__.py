# Models - test statement document types

from dgc_testdata.models.statement import ExpectedResults, TestContext, TestStatement

__all__ = [
    "ExpectedResults",
    "TestContext",
    "TestStatement",
]
