"""
Database connection and management
"""
import logging
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)

# Used when neither MONGO_DB_NAME nor the URI names a database
DEFAULT_DATABASE = "test"


class Database:
    """MongoDB connection manager

    One client is opened at startup and shared by every request until
    shutdown.
    """

    def __init__(self, config):
        self.config = config
        self.client = None
        self.db = None

    async def connect(self):
        """Initialize database connection"""
        try:
            self.client = AsyncIOMotorClient(
                self.config.uri,
                serverSelectionTimeoutMS=self.config.timeout_ms,
            )
            self.db = self._resolve_database()

            # The driver connects lazily, ping so a bad URI fails startup
            await self.client.admin.command("ping")

            logger.info(f"✅ Connected to the database '{self.db.name}'.")

        except Exception as e:
            logger.error(f"❌ Error connecting to the database: {str(e)}")
            if self.client is not None:
                self.client.close()
                self.client = None
                self.db = None
            raise

    async def disconnect(self):
        """Close database connection"""
        if self.client is not None:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Database disconnected")

    def _resolve_database(self) -> AsyncIOMotorDatabase:
        """Pick the database: MONGO_DB_NAME, else the URI's path, else 'test'"""
        if self.config.name:
            return self.client[self.config.name]
        return self.client.get_default_database(default=DEFAULT_DATABASE)

    def get_collection(self) -> AsyncIOMotorCollection:
        """Get the movie collection"""
        if self.db is None:
            raise RuntimeError("Database not connected")
        return self.db[self.config.collection]
