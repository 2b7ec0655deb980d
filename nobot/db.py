from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, ConfigurationError

from nobot.constants import AGENDA_COLLECTION, MONGODB_SERVER_SELECTION_TIMEOUT_MS
from nobot.logger import logger


def connect(mongo_url: str, db_name: str) -> Database:
    """
    Open the MongoDB connection, check it with a ping and make sure the
    agenda collection is indexed by user key.
    """
    try:
        if not mongo_url:
            raise ValueError("MONGO_URL environment variable is not set")

        client = MongoClient(mongo_url, serverSelectionTimeoutMS=MONGODB_SERVER_SELECTION_TIMEOUT_MS)
        # Test the connection
        client.admin.command("ping")
        db = client[db_name]

        try:
            db[AGENDA_COLLECTION].create_index("key", unique=True)
            logger.debug("Agenda collection index created/verified")
        except Exception as e:
            logger.warning("Could not create index on agenda collection: %s", e)

        logger.info("MongoDB connection established successfully")
        return db
    except (ConnectionFailure, ConfigurationError, ValueError) as e:
        logger.critical("Failed to connect to MongoDB: %s", e)
        raise
    except Exception as e:
        logger.critical("Unexpected error connecting to MongoDB: %s", e)
        raise
