"""Operation result types and status enums.

Standardized result types returned by the AWS integration layer, including
the status enum, the result dataclass and the boto error classifier.
"""

from infrastructure.operations.classifiers import classify_aws_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_aws_error",
]
