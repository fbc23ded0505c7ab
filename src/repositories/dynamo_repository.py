"""
DynamoDB Repository for drug data storage.
Handles CRUD operations for drug data in DynamoDB.
"""
import logging
from decimal import Decimal
from typing import List, Optional
import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError
from src.core import config
from src.core.exceptions import DynamoDBException
from src.models.drug_model import Drug
from src.models.page import Page, PageRequest
from src.repositories.db_repository import DrugRepository

logger = logging.getLogger(__name__)

DRUG_RECORD = 'DRUG'
SEQUENCE_RECORD = 'SEQUENCE'
SEQUENCE_KEY = 0
# DynamoDB numbers carry at most 38 significant digits
MAX_NUMBER_DIGITS = 38


class DynamoRepository(DrugRepository):
    """
    Repository for DynamoDB operations.

    All records live in one table keyed by the numeric attribute ``id``.
    Item ``id = 0`` is the id sequence; drug items carry ``record_type = DRUG``.
    """

    def __init__(self):
        self.dynamodb = boto3.resource('dynamodb', region_name=config.settings.aws_region)
        self.table = self.dynamodb.Table(config.settings.dynamodb_table_name)

    def find_all_paginated(self, page_request: PageRequest) -> Page:
        """
        Retrieve one page of drugs ordered by id.

        Args:
            page_request: Page number and size

        Returns:
            Page of Drug objects with the total count

        Raises:
            DynamoDBException: If scan fails
        """
        try:
            drugs = sorted(self._scan_drugs(), key=lambda drug: drug.id)
            content = drugs[page_request.offset:page_request.offset + page_request.size]
            return Page(content, page_request, len(drugs))

        except ClientError as e:
            raise DynamoDBException(f"Failed to scan drug data: {str(e)}") from e
        except Exception as e:
            raise DynamoDBException(f"Unexpected error scanning drug data: {str(e)}") from e

    def find_by_id(self, drug_id: int) -> Optional[Drug]:
        """
        Retrieve a drug by id.

        Args:
            drug_id: Drug identifier

        Returns:
            Drug object or None if not found

        Raises:
            DynamoDBException: If query fails
        """
        if not self._is_storable_id(drug_id):
            return None

        try:
            response = self.table.get_item(Key={'id': drug_id})

            item = response.get('Item')
            if not item or item.get('record_type') != DRUG_RECORD:
                return None

            return self._item_to_drug(item)

        except ClientError as e:
            raise DynamoDBException(f"Failed to get drug {drug_id}: {str(e)}") from e
        except Exception as e:
            raise DynamoDBException(f"Unexpected error getting drug {drug_id}: {str(e)}") from e

    def save(self, drug: Drug) -> Drug:
        """
        Insert or update a drug.

        Args:
            drug: Drug domain model; a new id is allocated when drug.id is None

        Returns:
            The persisted Drug with its id

        Raises:
            DynamoDBException: If save operation fails
        """
        try:
            drug_id = drug.id if drug.id is not None else self._next_id()
            saved = Drug(name=drug.name, price=drug.price, id=drug_id)

            self.table.put_item(Item=self._drug_to_item(saved))
            logger.debug("Saved drug %s to table %s", drug_id, self.table.name)

            return saved

        except ClientError as e:
            raise DynamoDBException(f"Failed to save drug data: {str(e)}") from e
        except Exception as e:
            raise DynamoDBException(f"Unexpected error saving drug data: {str(e)}") from e

    def delete(self, drug: Drug) -> None:
        """
        Delete a drug by id. DynamoDB deletes of a missing key succeed silently.

        Raises:
            DynamoDBException: If delete operation fails
        """
        if drug.id is None or not self._is_storable_id(drug.id):
            return

        try:
            self.table.delete_item(Key={'id': drug.id})

        except ClientError as e:
            raise DynamoDBException(f"Failed to delete drug {drug.id}: {str(e)}") from e
        except Exception as e:
            raise DynamoDBException(f"Unexpected error deleting drug {drug.id}: {str(e)}") from e

    def _scan_drugs(self) -> List[Drug]:
        """Scan every drug item, following LastEvaluatedKey."""
        scan_kwargs = {'FilterExpression': Attr('record_type').eq(DRUG_RECORD)}
        drugs = []

        while True:
            response = self.table.scan(**scan_kwargs)
            drugs.extend(self._item_to_drug(item) for item in response.get('Items', []))

            if 'LastEvaluatedKey' not in response:
                return drugs
            scan_kwargs['ExclusiveStartKey'] = response['LastEvaluatedKey']

    def _is_storable_id(self, drug_id: int) -> bool:
        """Ids DynamoDB cannot represent can never have been stored."""
        return len(str(abs(drug_id))) <= MAX_NUMBER_DIGITS

    def _next_id(self) -> int:
        """Atomically increment the id sequence and return the new value."""
        response = self.table.update_item(
            Key={'id': SEQUENCE_KEY},
            UpdateExpression='SET record_type = :seq ADD next_id :one',
            ExpressionAttributeValues={':seq': SEQUENCE_RECORD, ':one': 1},
            ReturnValues='UPDATED_NEW'
        )
        return int(response['Attributes']['next_id'])

    def _drug_to_item(self, drug: Drug) -> dict:
        """Convert Drug domain model to DynamoDB item."""
        return {
            'id': drug.id,
            'record_type': DRUG_RECORD,
            'name': drug.name,
            'price': Decimal(str(drug.price))
        }

    def _item_to_drug(self, item: dict) -> Drug:
        """Convert DynamoDB item to Drug domain model."""
        return Drug(
            name=item['name'],
            price=Decimal(str(item['price'])),
            id=int(item['id'])
        )
