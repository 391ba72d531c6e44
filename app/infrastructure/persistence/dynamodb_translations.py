"""DynamoDB key store implementation.

Table schema:
- Partition Key: domain (e.g. "cart")
- Sort Key: trans_key (e.g. "checkout")
- translated: BOOL, set once a non-empty message is written
- messages: M, locale -> S message body
"""

from typing import Any, Dict, List, Optional

import structlog

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus
from infrastructure.persistence.errors import PersistenceError
from infrastructure.persistence.models import LocalizedMessage, TranslationKey
from infrastructure.persistence.store import KeyStore
from integrations.aws.dynamodb_next import (
    delete_item,
    get_item,
    put_item,
    scan,
    update_item,
)

logger = structlog.get_logger()

TRANSLATIONS_TABLE = "translation_keys"
PARTITION_KEY = "domain"
SORT_KEY = "trans_key"

# "domain" is a DynamoDB reserved word
KEY_NAMES = {"#domain": PARTITION_KEY, "#trans_key": SORT_KEY}


def _key(trans_key: str, domain: str) -> Dict[str, Any]:
    return {PARTITION_KEY: {"S": domain}, SORT_KEY: {"S": trans_key}}


def item_to_translation_key(item: Dict[str, Any]) -> TranslationKey:
    """Convert a DynamoDB item (attribute-value format) to a TranslationKey."""
    messages = {
        locale: LocalizedMessage(locale=locale, message=value.get("S", ""))
        for locale, value in item.get("messages", {}).get("M", {}).items()
    }
    return TranslationKey(
        trans_key=item[SORT_KEY]["S"],
        domain=item[PARTITION_KEY]["S"],
        translated=item.get("translated", {}).get("BOOL", False),
        messages=messages,
    )


class DynamoDBKeyStore(KeyStore):
    """DynamoDB-backed key store.

    Every call writes through to the table; there is no client-side buffer.
    """

    def __init__(self, table_name: str = TRANSLATIONS_TABLE):
        """Initialize DynamoDB key store.

        Args:
            table_name: DynamoDB table name (default: translation_keys).
        """
        self.table_name = table_name
        logger.info("initialized_dynamodb_key_store", table_name=table_name)

    def _raise_for(self, operation: str, result: OperationResult, **context) -> None:
        logger.error(
            "dynamodb_key_store_error",
            operation=operation,
            error_message=result.message,
            error_code=result.error_code,
            **context,
        )
        raise PersistenceError(operation, result.message, result)

    def find_one_by_key_and_domain(
        self, trans_key: str, domain: str
    ) -> Optional[TranslationKey]:
        result = get_item(
            table_name=self.table_name,
            Key=_key(trans_key, domain),
            ConsistentRead=True,
        )
        if not result.is_success:
            self._raise_for(
                "find_one_by_key_and_domain", result, trans_key=trans_key, domain=domain
            )

        item = (result.data or {}).get("Item")
        if item is None:
            return None
        return item_to_translation_key(item)

    def create(
        self, trans_key: str, domain: str, initially_translated: bool = False
    ) -> TranslationKey:
        item = _key(trans_key, domain)
        item["translated"] = {"BOOL": initially_translated}
        item["messages"] = {"M": {}}

        result = put_item(
            table_name=self.table_name,
            Item=item,
            ConditionExpression="attribute_not_exists(#trans_key)",
            ExpressionAttributeNames={"#trans_key": SORT_KEY},
        )
        if not result.is_success:
            self._raise_for("create", result, trans_key=trans_key, domain=domain)

        logger.debug("translation_key_created", trans_key=trans_key, domain=domain)
        return TranslationKey(
            trans_key=trans_key, domain=domain, translated=initially_translated
        )

    def set_message(
        self,
        translation_key: TranslationKey,
        locale: str,
        message: str,
        overwrite: bool = True,
    ) -> bool:
        update_expression = "SET messages.#locale = :message"
        values: Dict[str, Any] = {":message": {"S": message}}
        if message:
            update_expression += ", translated = :translated"
            values[":translated"] = {"BOOL": True}

        condition = "attribute_exists(#trans_key)"
        if not overwrite:
            condition += " AND attribute_not_exists(messages.#locale)"

        result = update_item(
            table_name=self.table_name,
            Key=_key(translation_key.trans_key, translation_key.domain),
            UpdateExpression=update_expression,
            ConditionExpression=condition,
            ExpressionAttributeNames={"#locale": locale, "#trans_key": SORT_KEY},
            ExpressionAttributeValues=values,
        )

        if result.status == OperationStatus.CONDITION_FAILED and not overwrite:
            # Existing message kept; a missing item also lands here, which
            # leaves nothing to write either way.
            return False
        if not result.is_success:
            self._raise_for(
                "set_message",
                result,
                trans_key=translation_key.trans_key,
                domain=translation_key.domain,
                locale=locale,
            )

        translation_key.messages[locale] = LocalizedMessage(
            locale=locale, message=message
        )
        if message:
            translation_key.translated = True
        return True

    def delete_all(self) -> int:
        logger.warning("dynamodb_key_store_delete_all", table_name=self.table_name)
        result = scan(
            table_name=self.table_name,
            ProjectionExpression="#domain, #trans_key",
            ExpressionAttributeNames=KEY_NAMES,
        )
        if not result.is_success:
            self._raise_for("delete_all", result)

        deleted = 0
        for item in result.data or []:
            delete_result = delete_item(
                table_name=self.table_name,
                Key={PARTITION_KEY: item[PARTITION_KEY], SORT_KEY: item[SORT_KEY]},
            )
            if not delete_result.is_success:
                self._raise_for(
                    "delete_all",
                    delete_result,
                    domain=item[PARTITION_KEY].get("S"),
                    trans_key=item[SORT_KEY].get("S"),
                    deleted_so_far=deleted,
                )
            deleted += 1

        logger.info("dynamodb_key_store_cleared", keys_deleted=deleted)
        return deleted

    def find_all(self) -> List[TranslationKey]:
        result = scan(table_name=self.table_name)
        if not result.is_success:
            self._raise_for("find_all", result)

        keys = [item_to_translation_key(item) for item in result.data or []]
        return sorted(keys, key=lambda key: key.identity)

    def flush(self) -> None:
        logger.debug("dynamodb_key_store_flush", table_name=self.table_name)
