"""
One-time migration of the joinrequests indexes

Replaces the compound unique index on (user, community, status) with a unique
index on (user, community) that only covers pending requests, and adds the
two lookup indexes used by the join-request queries.

    MONGO_URI=mongodb://... python -m mycare.scripts.fix_join_request_index
"""

import logging
import sys
from typing import Optional

from pymongo import MongoClient, ASCENDING
from pymongo.database import Database

from mycare.config import MONGO_URI, LOG_LEVEL, LOG_FORMAT
from mycare.utils.error_handler import MigrationError

logger = logging.getLogger(__name__)

COLLECTION = "joinrequests"
OLD_INDEX = "user_1_community_1_status_1"
# Database used when the URI names none
DEFAULT_DATABASE = "test"

def fix_join_request_index(db: Database) -> None:
    """Apply the index changes to an open database"""
    collection = db[COLLECTION]

    collection.drop_index(OLD_INDEX)
    logger.info(f"Dropped old index: {OLD_INDEX}")

    collection.create_index(
        [("user", ASCENDING), ("community", ASCENDING)],
        unique=True,
        partialFilterExpression={"status": "pending"}
    )
    logger.info("Created new index with partial filter expression")

    collection.create_index([("community", ASCENDING), ("status", ASCENDING)])
    logger.info("Created index for community and status")

    collection.create_index([("user", ASCENDING), ("status", ASCENDING)])
    logger.info("Created index for user and status")

    logger.info("All indexes have been updated successfully")

def run(mongo_uri: Optional[str], client_factory=MongoClient) -> int:
    """Connect, migrate, disconnect; returns the process exit status"""
    try:
        if not mongo_uri:
            raise MigrationError("MONGO_URI environment variable is not defined")

        client = client_factory(mongo_uri)
        try:
            logger.info("Connected to MongoDB")
            fix_join_request_index(client.get_default_database(DEFAULT_DATABASE))
        finally:
            client.close()
            logger.info("Disconnected from MongoDB")
        return 0

    except Exception as e:
        logger.error(f"Error fixing join request index: {e}")
        return 1

def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    sys.exit(run(MONGO_URI))

if __name__ == "__main__":
    main()
