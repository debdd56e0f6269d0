from .database import MongoDatabase
from .user import MongoUserBackend
