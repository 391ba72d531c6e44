"""DynamoDB operations over client_next.

Thin wrappers that fix the service name and table, and return the
OperationResult of execute_aws_api_call. Keys and items use the low-level
attribute-value format:

    result = get_item(
        table_name="translation_keys",
        Key={"domain": {"S": "cart"}, "trans_key": {"S": "checkout"}},
        ConsistentRead=True,
    )
    item = result.data.get("Item") if result.is_success else None
"""

from typing import Any, Dict

from integrations.aws.client_next import execute_aws_api_call
from infrastructure.operations.result import OperationResult


def get_item(table_name: str, Key: Dict[str, Any], **kwargs) -> OperationResult:
    """Read one item; data is the raw response, holding "Item" when found."""
    return execute_aws_api_call(
        service_name="dynamodb",
        method="get_item",
        TableName=table_name,
        Key=Key,
        **kwargs,
    )


def put_item(table_name: str, Item: Dict[str, Any], **kwargs) -> OperationResult:
    """Write one item. Pass ConditionExpression for create-only writes."""
    return execute_aws_api_call(
        service_name="dynamodb",
        method="put_item",
        TableName=table_name,
        Item=Item,
        **kwargs,
    )


def update_item(table_name: str, Key: Dict[str, Any], **kwargs) -> OperationResult:
    """Update attributes of one item with an UpdateExpression."""
    return execute_aws_api_call(
        service_name="dynamodb",
        method="update_item",
        TableName=table_name,
        Key=Key,
        **kwargs,
    )


def delete_item(table_name: str, Key: Dict[str, Any], **kwargs) -> OperationResult:
    return execute_aws_api_call(
        service_name="dynamodb",
        method="delete_item",
        TableName=table_name,
        Key=Key,
        **kwargs,
    )


def scan(table_name: str, **kwargs) -> OperationResult:
    """Scan the whole table.

    Every page is read; data is the flat list of items across pages.
    """
    return execute_aws_api_call(
        service_name="dynamodb",
        method="scan",
        TableName=table_name,
        keys=["Items"],
        force_paginate=True,
        **kwargs,
    )
