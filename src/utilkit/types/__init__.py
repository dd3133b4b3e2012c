"""Type helpers: nominal brands and success/failure results.

This layer depends only on stdlib, pydantic, and utilkit.config.logging.
"""

from utilkit.types.brand import (
    BrandDescriptor,
    BrandMismatchError,
    create_brand,
    is_brand,
    unbrand,
)
from utilkit.types.result import (
    AsyncResult,
    Failure,
    Result,
    Success,
    err,
    ok,
    to_async_result,
    to_result,
)

__all__ = [
    "AsyncResult",
    "BrandDescriptor",
    "BrandMismatchError",
    "Failure",
    "Result",
    "Success",
    "create_brand",
    "err",
    "is_brand",
    "ok",
    "to_async_result",
    "to_result",
    "unbrand",
]
